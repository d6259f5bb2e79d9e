from conftest import headers


def _registrar(client, username="ana", password="clave123", role=None):
    data = {"username": username, "password": password}
    if role:
        data["role"] = role
    return client.post("/api/register", json=data)


def test_registro_y_login(client):
    resp = _registrar(client)
    assert resp.status_code == 201
    assert resp.get_json() == {"message": "Usuario creado exitosamente"}

    resp = client.post("/api/login", json={"username": "ana", "password": "clave123"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["role"] == "cortador"

    # El token emitido sirve para las rutas protegidas
    listado = client.get("/api/pedidos", headers={"Authorization": f"Bearer {data['token']}"})
    assert listado.status_code == 200


def test_registro_con_rol(client):
    _registrar(client, "jefe", role="admin")
    resp = client.post("/api/login", json={"username": "jefe", "password": "clave123"})
    assert resp.get_json()["role"] == "admin"


def test_registro_duplicado(client):
    _registrar(client)
    resp = _registrar(client)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "El usuario ya existe"}


def test_registro_incompleto(client):
    resp = client.post("/api/register", json={"username": "ana"})
    assert resp.status_code == 400


def test_login_password_incorrecta(client):
    _registrar(client)
    resp = client.post("/api/login", json={"username": "ana", "password": "otra"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Contraseña incorrecta"}


def test_login_usuario_inexistente(client):
    resp = client.post("/api/login", json={"username": "nadie", "password": "x"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Usuario no encontrado"}


def test_usuarios_solo_admin(client):
    assert client.get("/api/users").status_code == 401
    resp = client.get("/api/users", headers=headers("cortador"))
    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Acceso denegado"}


def test_admin_crea_y_lista_usuarios(client):
    resp = client.post("/api/users", json={"username": "beto", "password": "x1"}, headers=headers())
    assert resp.status_code == 201

    usuarios = client.get("/api/users", headers=headers()).get_json()
    assert [u["username"] for u in usuarios] == ["beto"]
    assert usuarios[0]["role"] == "cortador"
    assert "password" not in usuarios[0]


def test_admin_cambia_password(client):
    _registrar(client)
    usuario = client.get("/api/users", headers=headers()).get_json()[0]

    resp = client.put(f"/api/users/{usuario['id']}/password", json={"newPassword": "nueva"}, headers=headers())
    assert resp.status_code == 200

    assert client.post("/api/login", json={"username": "ana", "password": "clave123"}).status_code == 400
    assert client.post("/api/login", json={"username": "ana", "password": "nueva"}).status_code == 200


def test_cambiar_password_usuario_inexistente(client):
    resp = client.put("/api/users/999/password", json={"newPassword": "nueva"}, headers=headers())
    assert resp.status_code == 200


def test_cambiar_password_sin_valor(client):
    resp = client.put("/api/users/1/password", json={}, headers=headers())
    assert resp.status_code == 400


def test_admin_elimina_usuario(client):
    _registrar(client)
    usuario = client.get("/api/users", headers=headers()).get_json()[0]
    resp = client.delete(f"/api/users/{usuario['id']}", headers=headers())
    assert resp.status_code == 200
    assert client.get("/api/users", headers=headers()).get_json() == []


def test_admin_inicial(db_uri, notificador):
    from app import crear_app

    app = crear_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": db_uri,
        "JWT_SECRET": "s",
        "ADMIN_USERNAME": "root",
        "ADMIN_PASSWORD": "raiz",
    }, notificador=notificador)
    try:
        resp = app.test_client().post("/api/login", json={"username": "root", "password": "raiz"})
        assert resp.status_code == 200
        assert resp.get_json()["role"] == "admin"
    finally:
        app.extensions["db_engine"].dispose()
