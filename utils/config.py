# utils/config.py
# Environment based settings for the web app

import os


def env(name: str, default: str) -> str:
    """return environment value or default if unset/empty"""
    value = os.environ.get(name)
    if value:
        return value
    return default


def env_float(name: str, default: float) -> float:
    raw = env(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


ADDR = env("ADDR", "0.0.0.0")
PORT = int(env("PORT", "8080"))
VERSION = env("VERSION", "dev")
LOG_LEVEL = env("LOG_LEVEL", "INFO")

POKEAPI_URL = env("POKEAPI_URL", "https://pokeapi.co/api/v2").rstrip("/")
HTTP_TIMEOUT = env_float("HTTP_TIMEOUT", 10.0)

# size of the first generation dex, ids are 1..CATALOG_SIZE
CATALOG_SIZE = 151
