"""
Tokens de identidad HS256 (formato JWT compacto).

El payload que emite el login es {id, username, role} más 'iat' y, si
expires_in > 0, 'exp'. El cliente lo trata como opaco; el servidor lo verifica
en cada petición protegida.
"""
import base64
import hmac
import hashlib
import json
import time
from typing import Any, Dict

_HEADER = {"alg": "HS256", "typ": "JWT"}


class JWTError(ValueError):
    """Token malformado, con firma inválida o expirado."""
    pass


class TokenExpiradoError(JWTError):
    pass


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _firmar(signing_input: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), signing_input, hashlib.sha256).digest()
    return _b64url_encode(digest)


def _segmento(obj: Dict[str, Any]) -> str:
    return _b64url_encode(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def create_jwt(payload: Dict[str, Any], secret: str, expires_in: int = 0) -> str:
    if not secret:
        raise JWTError("Secreto de firma no configurado")

    claims = dict(payload)
    ahora = int(time.time())
    claims.setdefault("iat", ahora)
    if expires_in and "exp" not in claims:
        claims["exp"] = ahora + int(expires_in)

    signing_input = f"{_segmento(_HEADER)}.{_segmento(claims)}"
    return f"{signing_input}.{_firmar(signing_input.encode('ascii'), secret)}"


def decode_jwt(token: str, secret: str) -> Dict[str, Any]:
    partes = (token or "").split(".")
    if len(partes) != 3:
        raise JWTError("Token malformado")
    header_b64, payload_b64, firma = partes

    esperado = _firmar(f"{header_b64}.{payload_b64}".encode("ascii"), secret)
    if not hmac.compare_digest(firma, esperado):
        raise JWTError("Firma inválida")

    try:
        header = json.loads(_b64url_decode(header_b64))
        payload = json.loads(_b64url_decode(payload_b64))
    except (ValueError, UnicodeDecodeError):
        raise JWTError("Token inválido")

    if header.get("alg") != _HEADER["alg"] or not isinstance(payload, dict):
        raise JWTError("Token inválido")

    exp = payload.get("exp")
    if exp is not None and int(time.time()) > int(exp):
        raise TokenExpiradoError("Token expirado")

    return payload
