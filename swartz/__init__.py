# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del cifrado de transporte y los validadores.
# --------------------------------------------------------------
"""Inicializa el paquete `swartz` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_aesgcm",
    "crypto_base",
    "crypto_kdf",
    "crypto_vigenere",
    "encryption",
    "envelope",
    "errors",
    "logger",
    "models",
    "user_validators",
]
