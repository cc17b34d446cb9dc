# --------------------------------------------------------------
# File: encryption.py
# Description: Servicio de cifrado con motor intercambiable en tiempo de ejecución.
# --------------------------------------------------------------
"""Capa de abstracción que desacopla a los llamadores del algoritmo de cifrado."""

from __future__ import annotations

from typing import Any, Optional

from swartz import config
from swartz.crypto_aesgcm import AesGcmEngine
from swartz.crypto_base import EncryptionEngine
from swartz.crypto_vigenere import VigenereCipher

ENGINES = {
    VigenereCipher.name: VigenereCipher,
    AesGcmEngine.name: AesGcmEngine,
}


class EncryptionService:
    """Delegado de cifrado sobre un ``EncryptionEngine`` reemplazable.

    Args:
        engine (EncryptionEngine): Motor inicial.

    """

    def __init__(self, engine: EncryptionEngine):
        self._engine = engine

    @property
    def engine(self) -> EncryptionEngine:
        return self._engine

    def set_engine(self, engine: EncryptionEngine) -> None:
        """Cambia el motor de cifrado sin afectar a los llamadores."""

        self._engine = engine

    def encrypt(self, plaintext: str) -> str:
        return self._engine.encrypt(plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return self._engine.decrypt(ciphertext)

    def encrypt_json(self, data: Any) -> str:
        return self._engine.encrypt_json(data)

    def decrypt_json(self, ciphertext: str) -> Optional[Any]:
        return self._engine.decrypt_json(ciphertext)


def build_engine(name: Optional[str] = None, key: Optional[str] = None) -> EncryptionEngine:
    """Construye el motor indicado por nombre.

    Args:
        name (Optional[str]): ``vigenere`` o ``aesgcm``; por defecto
            ``config.CRYPTO_ENGINE``.
        key (Optional[str]): Clave del motor; por defecto ``config.CRYPTO_KEY``.

    Returns:
        EncryptionEngine: Motor listo para usar.

    Raises:
        ValueError: Si el nombre no corresponde a ningún motor.

    """

    name = (name or config.CRYPTO_ENGINE).strip().lower()
    try:
        engine_cls = ENGINES[name]
    except KeyError:
        raise ValueError(f"Motor de cifrado desconocido: {name!r}") from None
    return engine_cls(key)


def build_encryption_service(
    name: Optional[str] = None, key: Optional[str] = None
) -> EncryptionService:
    """Crea un ``EncryptionService`` a partir de la configuración."""

    return EncryptionService(build_engine(name, key))
