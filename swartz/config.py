# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de configuración leídos del entorno o de un fichero .env.
# --------------------------------------------------------------
"""Configuración compartida por el cifrado y los validadores."""

import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Una variable vacía también recurre a la clave por defecto.
CRYPTO_KEY = os.getenv("CRYPTO_KEY") or "SWARTZKRIP2025"
CRYPTO_ENGINE = os.getenv("CRYPTO_ENGINE", "vigenere").strip().lower()
CRYPTO_SALT = os.getenv("CRYPTO_SALT", "swartz-core-salt").encode()

# El interceptor de transporte está desactivado en producción.
ENCRYPTION_ENABLED = _as_bool(os.getenv("ENCRYPTION_ENABLED", "false"))

INSTITUTIONAL_DOMAINS = tuple(
    domain.strip().lower()
    for domain in os.getenv("INSTITUTIONAL_DOMAINS", "@uta.edu.ec,@uta.ec").split(",")
    if domain.strip()
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
