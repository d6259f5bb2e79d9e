from functools import wraps
from flask import request, jsonify, g, current_app
from utils.jwt import decode_jwt, JWTError


def _get_bearer_token() -> str | None:
    auth = request.headers.get("Authorization") or ""
    if not auth.lower().startswith("bearer "):
        return None
    return auth.split(" ", 1)[1].strip() or None


def token_required(fn):
    """Verifica el Bearer token y deja la identidad {id, username, role} en g.usuario."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        token = _get_bearer_token()
        if not token:
            return jsonify({"error": "Token requerido"}), 401
        try:
            payload = decode_jwt(token, current_app.config.get("JWT_SECRET", ""))
        except JWTError as e:
            return jsonify({"error": str(e)}), 403
        g.usuario = {
            "id": payload.get("id"),
            "username": payload.get("username"),
            "role": payload.get("role"),
        }
        return fn(*args, **kwargs)
    return wrapper


def admin_required(fn):
    """Debe ir debajo de @token_required."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        usuario = getattr(g, "usuario", None) or {}
        if usuario.get("role") != "admin":
            return jsonify({"error": "Acceso denegado"}), 403
        return fn(*args, **kwargs)
    return wrapper
