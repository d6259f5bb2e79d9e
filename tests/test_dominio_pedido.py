from datetime import date, datetime

import pytest

from servicios.servicio_pedidos.aplicacion.casos_uso.actualizar_pedido import componer_mensaje_cambio
from servicios.servicio_pedidos.dominio.excepciones import DatosDePedidoInvalidosError
from servicios.servicio_pedidos.dominio.pedido import (
    NO_ENVIADO,
    CambiosPedido,
    NuevoPedido,
    Pedido,
    ProductoPedido,
    parse_fecha,
    productos_desde_lista,
)


def _pedido(**kwargs):
    datos = dict(id=1, numero_factura="F-1", cliente="Acme", fecha_ingreso=datetime(2024, 1, 1, 9, 0))
    datos.update(kwargs)
    return Pedido(**datos)


def test_nuevo_pedido_desde_dict():
    nuevo = NuevoPedido.desde_dict({
        "numero_factura": "F-1",
        "cliente": "Acme",
        "fecha_entrega": "2024-01-05",
        "productos": [{"descripcion": "vidrio 4mm", "cantidad": 2, "total": 100}],
    })
    assert nuevo.fecha_entrega == date(2024, 1, 5)
    assert nuevo.productos[0].descripcion == "vidrio 4mm"
    assert nuevo.productos[0].cantidad == 2
    assert nuevo.productos[0].total == 100.0


def test_nuevo_pedido_sin_productos():
    nuevo = NuevoPedido.desde_dict({"numero_factura": "F-2", "cliente": "Acme"})
    assert nuevo.productos == []
    assert nuevo.fecha_entrega is None


@pytest.mark.parametrize("data", [
    None,
    [],
    {"cliente": "Acme"},
    {"numero_factura": "F-1", "cliente": "  "},
    {"numero_factura": "F-1", "cliente": "Acme", "productos": "vidrio"},
    {"numero_factura": "F-1", "cliente": "Acme", "productos": [{"cantidad": 1}]},
    {"numero_factura": "F-1", "cliente": "Acme", "fecha_entrega": "mañana"},
])
def test_nuevo_pedido_invalido(data):
    with pytest.raises(DatosDePedidoInvalidosError):
        NuevoPedido.desde_dict(data)


def test_producto_rechaza_cantidad_no_numerica():
    with pytest.raises(DatosDePedidoInvalidosError):
        ProductoPedido.desde_dict({"descripcion": "x", "cantidad": "dos"})
    with pytest.raises(DatosDePedidoInvalidosError):
        ProductoPedido.desde_dict({"descripcion": "x", "cantidad": 1.5})


def test_parse_fecha_toma_la_parte_de_fecha():
    assert parse_fecha("2024-03-10T00:00:00.000Z") == date(2024, 3, 10)
    assert parse_fecha("") is None
    assert parse_fecha(None) is None


def test_productos_desde_lista_none():
    assert productos_desde_lista(None) == []


def test_cambios_solo_campos_enviados():
    cambios = CambiosPedido.desde_dict({"estado": "cutting", "otro": "ignorado"})
    assert cambios.campos() == {"estado": "cutting"}
    assert cambios.cliente is NO_ENVIADO


def test_cambios_vacio():
    assert CambiosPedido.desde_dict({}).vacio
    assert CambiosPedido.desde_dict({"productos": []}).vacio


def test_cortador_null_desasigna():
    cambios = CambiosPedido.desde_dict({"cortador": None})
    assert cambios.campos() == {"cortador": None}
    assert CambiosPedido.desde_dict({"cortador": ""}).campos() == {"cortador": None}


def test_pedido_to_dict():
    pedido = _pedido(fecha_entrega=date(2024, 1, 5), productos=[ProductoPedido(descripcion="x", id=3, pedido_id=1)])
    data = pedido.to_dict()
    assert data["fecha_ingreso"] == "2024-01-01T09:00:00"
    assert data["fecha_entrega"] == "2024-01-05"
    assert data["estado"] == "pendiente"
    assert data["productos"][0]["id"] == 3


class TestComponerMensaje:

    def test_cortador_cambia_estado(self):
        cambios = CambiosPedido.desde_dict({"estado": "cutting"})
        assert componer_mensaje_cambio("cortador", cambios, _pedido()) == \
            "Pedido F-1 - Acme: Se ha actualizado el estado a cutting"

    def test_cortador_no_genera_mensaje_de_asignacion(self):
        cambios = CambiosPedido.desde_dict({"cortador": "Juan"})
        assert componer_mensaje_cambio("cortador", cambios, _pedido()) is None

    def test_admin_asigna_cortador(self):
        cambios = CambiosPedido.desde_dict({"cortador": "Juan"})
        assert componer_mensaje_cambio("admin", cambios, _pedido()) == \
            "Pedido F-1 - Acme: Se ha asignado al cortador Juan"

    def test_asignacion_pisa_al_estado(self):
        cambios = CambiosPedido.desde_dict({"estado": "cutting", "cortador": "Juan"})
        assert componer_mensaje_cambio("admin", cambios, _pedido()) == \
            "Pedido F-1 - Acme: Se ha asignado al cortador Juan"

    def test_cortador_con_ambos_campos_solo_estado(self):
        cambios = CambiosPedido.desde_dict({"estado": "listo", "cortador": "Juan"})
        assert componer_mensaje_cambio("cortador", cambios, _pedido()) == \
            "Pedido F-1 - Acme: Se ha actualizado el estado a listo"

    def test_sin_estado_ni_cortador(self):
        cambios = CambiosPedido.desde_dict({"cliente": "Otro"})
        assert componer_mensaje_cambio("admin", cambios, _pedido(cliente="Otro")) is None

    def test_desasignar_no_genera_mensaje(self):
        cambios = CambiosPedido.desde_dict({"cortador": None})
        assert componer_mensaje_cambio("admin", cambios, _pedido()) is None

    def test_usa_datos_ya_actualizados(self):
        cambios = CambiosPedido.desde_dict({"cliente": "Nuevo", "estado": "listo"})
        assert componer_mensaje_cambio("admin", cambios, _pedido(cliente="Nuevo")) == \
            "Pedido F-1 - Nuevo: Se ha actualizado el estado a listo"


@pytest.mark.parametrize("campo", ["ingreso", "egreso", "total"])
@pytest.mark.parametrize("valor", ["NaN", "1e999", "-inf", float("nan")])
def test_producto_rechaza_numeros_no_finitos(campo, valor):
    with pytest.raises(DatosDePedidoInvalidosError):
        ProductoPedido.desde_dict({"descripcion": "x", campo: valor})


@pytest.mark.parametrize("valor", ["2024-01-05 basura", "2024-01-05x", "2024-01-05T99:00"])
def test_parse_fecha_rechaza_texto_sobrante(valor):
    with pytest.raises(DatosDePedidoInvalidosError):
        parse_fecha(valor)


def test_parse_fecha_acepta_datetime_iso():
    assert parse_fecha("2024-03-10T15:30:00") == date(2024, 3, 10)
    assert parse_fecha(" 2024-03-10 ") == date(2024, 3, 10)
