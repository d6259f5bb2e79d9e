# configuracion.py
import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

# Cargar variables de entorno si existe .env (opcional)
load_dotenv(find_dotenv(usecwd=True))


def _normalize_pg_url(url: str) -> str:
    """Usa el driver psycopg v3 cuando la URL llega como 'postgresql://'."""
    if url.startswith("postgresql://") and "+" not in url.split("://", 1)[0]:
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


class Config:
    """
    Configuración global de la aplicación Flask.
    Por defecto usa un archivo SQLite 'vidrieria.sqlite' en la raíz del proyecto.
    """

    # -------------------- Base de datos --------------------
    BASE_DIR = Path(__file__).resolve().parent
    DB_PATH = BASE_DIR / "vidrieria.sqlite"
    SQLALCHEMY_DATABASE_URI = _normalize_pg_url(
        os.getenv("SQLALCHEMY_DATABASE_URI")
        or os.getenv("DATABASE_URL")
        or f"sqlite:///{DB_PATH}"
    )

    # Pool de conexiones (mismo límite que el servidor original: 10)
    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "0"))
    DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))

    # -------------------- Seguridad / Tokens --------------------
    SECRET_KEY = os.getenv("SECRET_KEY", "clave-secreta-para-desarrollo")
    JWT_SECRET = os.getenv("JWT_SECRET") or SECRET_KEY
    # Segundos; 0 desactiva la expiración
    JWT_EXPIRES_IN = int(os.getenv("JWT_EXPIRES_IN", str(8 * 3600)))

    # Usuario administrador inicial (opcional)
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

    # -------------------- Servidor --------------------
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = int(os.getenv("PORT", "3001"))
