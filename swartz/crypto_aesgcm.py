# --------------------------------------------------------------
# File: crypto_aesgcm.py
# Description: Motor alternativo AES-GCM compatible con la interfaz de cifrado.
# --------------------------------------------------------------
"""Motor AES-256-GCM intercambiable con el cifrado Vigenère."""

from __future__ import annotations

import base64
import os
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from swartz import config
from swartz.crypto_base import EncryptionEngine
from swartz.crypto_kdf import derive_key
from swartz.errors import DecodeError

NONCE_SIZE = 12
TAG_SIZE = 16


class AesGcmEngine(EncryptionEngine):
    """Cifra texto con AES-GCM usando una clave derivada por Argon2id.

    El resultado es Base64 de ``nonce || ciphertext || tag``. Cada cifrado usa
    un nonce aleatorio, por lo que no es determinista.

    Args:
        key (Optional[str]): Passphrase; por defecto ``config.CRYPTO_KEY``.
        salt (Optional[bytes]): Salt de derivación; por defecto
            ``config.CRYPTO_SALT``.

    """

    name = "aesgcm"

    def __init__(self, key: Optional[str] = None, salt: Optional[bytes] = None):
        key = config.CRYPTO_KEY if key is None else key
        if not key:
            raise ValueError("La clave de cifrado no puede estar vacía")
        salt = config.CRYPTO_SALT if salt is None else salt
        self._aes = AESGCM(derive_key(key, salt))

    def encrypt(self, plaintext: str) -> str:
        if not plaintext:
            return ""

        nonce = os.urandom(NONCE_SIZE)
        ct_full = self._aes.encrypt(nonce, plaintext.encode("utf-8"), associated_data=None)
        return base64.b64encode(nonce + ct_full).decode("ascii")

    def decrypt_or_raise(self, ciphertext: str) -> str:
        if not ciphertext:
            return ""

        try:
            blob = base64.b64decode(ciphertext, validate=True)
        except ValueError as exc:  # binascii.Error o caracteres no ASCII
            raise DecodeError("Base64 de transporte inválido") from exc
        if len(blob) < NONCE_SIZE + TAG_SIZE:
            raise DecodeError("Texto cifrado demasiado corto")

        nonce, ct_full = blob[:NONCE_SIZE], blob[NONCE_SIZE:]
        try:
            raw = self._aes.decrypt(nonce, ct_full, None)
        except InvalidTag as exc:
            raise DecodeError("Etiqueta de autenticación inválida") from exc

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError("Los bytes descifrados no son UTF-8 válido") from exc
