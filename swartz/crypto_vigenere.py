# --------------------------------------------------------------
# File: crypto_vigenere.py
# Description: Cifrado Vigenère de flujo aditivo sobre una representación Base64.
# --------------------------------------------------------------
"""Cifrado Vigenère para ofuscar cargas de texto antes del transporte.

SECURITY: no ofrece confidencialidad real. Es un cifrado aditivo con clave
corta, estática y repetida, trivial de romper con texto en claro conocido o
análisis de frecuencias. Se conserva para interoperar con datos ya cifrados.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

from swartz import config
from swartz.crypto_base import EncryptionEngine
from swartz.errors import DecodeError


class VigenereCipher(EncryptionEngine):
    """Cifrado de flujo aditivo módulo 256 con clave repetida.

    Args:
        key (Optional[str]): Clave del cifrado. Si es ``None`` se usa
            ``config.CRYPTO_KEY``.

    Raises:
        ValueError: Si la clave está vacía.

    """

    name = "vigenere"

    def __init__(self, key: Optional[str] = None):
        key = config.CRYPTO_KEY if key is None else key
        if not key:
            raise ValueError("La clave de cifrado no puede estar vacía")
        self._key_codes = tuple(ord(char) for char in key)

    def _key_code(self, index: int) -> int:
        return self._key_codes[index % len(self._key_codes)]

    def encrypt(self, plaintext: str) -> str:
        """Cifra un texto usando el algoritmo Vigenère.

        Args:
            plaintext (str): Texto Unicode arbitrario.

        Returns:
            str: Texto cifrado en Base64, o cadena vacía si la entrada lo es.

        """

        if not plaintext:
            return ""

        # Base64 primero para operar solo con caracteres de un byte.
        staging = base64.b64encode(plaintext.encode("utf-8"))
        encrypted = bytes(
            (char_code + self._key_code(i)) % 256 for i, char_code in enumerate(staging)
        )
        return base64.b64encode(encrypted).decode("ascii")

    def decrypt_or_raise(self, ciphertext: str) -> str:
        """Descifra un texto cifrado con Vigenère.

        Args:
            ciphertext (str): Texto cifrado en Base64.

        Returns:
            str: Texto original.

        Raises:
            DecodeError: Si el Base64 es inválido, la clave no corresponde o
                los bytes recuperados no son UTF-8.

        """

        if not ciphertext:
            return ""

        try:
            encrypted = base64.b64decode(ciphertext, validate=True)
        except ValueError as exc:  # binascii.Error o caracteres no ASCII
            raise DecodeError("Base64 de transporte inválido") from exc

        staging = bytes(
            (char_code - self._key_code(i)) % 256 for i, char_code in enumerate(encrypted)
        )

        try:
            raw = base64.b64decode(staging, validate=True)
        except binascii.Error as exc:
            raise DecodeError("El texto descifrado no es Base64; ¿clave incorrecta?") from exc

        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError("Los bytes descifrados no son UTF-8 válido") from exc
