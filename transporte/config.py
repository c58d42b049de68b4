# transporte/config.py

import os


def _env_bool(*keys):
    for key in keys:
        if str(os.environ.get(key, "")) in ("1", "true", "True"):
            return True
    return False


def _env_int(key, default):
    try:
        return int(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


class Config:
    """Configuración leída de variables de entorno (compatible con Render)."""

    PORT = _env_int("PORT", 5000)
    # DEBUG puede activarse con DEBUG=1 o APP_DEBUG=1
    DEBUG = _env_bool("DEBUG", "APP_DEBUG")
    # límite práctico de la tabla, no del algoritmo
    MAX_DIMENSION = _env_int("MAX_DIMENSION", 10)
    LOG_FILE = os.environ.get("LOG_FILE", "errors.log")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "ERROR")
