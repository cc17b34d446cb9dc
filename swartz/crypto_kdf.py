# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de la clave AES a partir de la clave configurada.
# --------------------------------------------------------------
"""Derivación de claves simétricas con Argon2id."""

from argon2.low_level import Type, hash_secret_raw

# Parámetros Argon2id fijos: la clave derivada debe ser reproducible.
KDF_PARAMS = {"t": 3, "m": 64 * 1024, "p": 1, "outlen": 32}


def derive_key(passphrase: str, salt: bytes) -> bytes:
    """Deriva una clave AES-256 desde una passphrase de configuración.

    Args:
        passphrase (str): Clave textual configurada para el motor.
        salt (bytes): Salt fija del despliegue (mínimo 8 bytes).

    Returns:
        bytes: Clave de 32 bytes.

    """

    return hash_secret_raw(
        passphrase.encode("utf-8"),
        salt,
        time_cost=KDF_PARAMS["t"],
        memory_cost=KDF_PARAMS["m"],
        parallelism=KDF_PARAMS["p"],
        hash_len=KDF_PARAMS["outlen"],
        type=Type.ID,
    )
