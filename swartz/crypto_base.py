# --------------------------------------------------------------
# File: crypto_base.py
# Description: Contrato común de los motores de cifrado intercambiables.
# --------------------------------------------------------------
"""Interfaz que deben cumplir los motores de cifrado del paquete."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from typing import Any, Optional

from swartz.errors import DecodeError
from swartz.logger import prepare_logger

logger = prepare_logger(__name__)

LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def _escape_surrogate(match: re.Match) -> str:
    return f"\\u{ord(match.group()):04x}"


class EncryptionEngine(ABC):
    """Motor de cifrado de texto con utilidades para objetos JSON.

    Las subclases implementan ``encrypt`` y ``decrypt_or_raise``; el resto de
    operaciones se construye sobre ellas.
    """

    name = "base"

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """Cifra ``plaintext`` y devuelve una cadena Base64."""

    @abstractmethod
    def decrypt_or_raise(self, ciphertext: str) -> str:
        """Descifra ``ciphertext`` lanzando ``DecodeError`` si no es posible."""

    def decrypt(self, ciphertext: str) -> str:
        """Descifra ``ciphertext`` devolviendo cadena vacía si falla.

        Un descifrado fallido (clave errónea, transporte corrupto) es un caso
        esperado, por lo que se registra como informativo.
        """

        try:
            return self.decrypt_or_raise(ciphertext)
        except DecodeError as exc:
            logger.info("Descifrado fallido con el motor %s: %s", self.name, exc)
            return ""

    def encrypt_json(self, data: Any) -> str:
        """Serializa ``data`` como JSON compacto y lo cifra."""

        json_string = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        # Los surrogates sueltos no son codificables en UTF-8; se escapan como JSON.
        json_string = LONE_SURROGATE.sub(_escape_surrogate, json_string)
        return self.encrypt(json_string)

    def decrypt_json(self, ciphertext: str) -> Optional[Any]:
        """Descifra y parsea un objeto JSON; ``None`` si no es posible."""

        decrypted = self.decrypt(ciphertext)
        try:
            return json.loads(decrypted)
        except (ValueError, RecursionError) as exc:
            logger.info("El texto descifrado no es JSON válido: %s", exc)
            return None
