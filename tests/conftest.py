# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas de motores y servicios de cifrado.
# --------------------------------------------------------------

import pytest

from swartz.crypto_aesgcm import AesGcmEngine
from swartz.crypto_vigenere import VigenereCipher
from swartz.encryption import EncryptionService

DEFAULT_KEY = "SWARTZKRIP2025"


@pytest.fixture
def cipher() -> VigenereCipher:
    """Cifrado Vigenère con la clave por defecto del despliegue.

    Returns:
        VigenereCipher: Motor construido con una clave explícita.
    """
    return VigenereCipher(DEFAULT_KEY)


@pytest.fixture(scope="session")
def aes_engine() -> AesGcmEngine:
    """Motor AES-GCM compartido; la derivación Argon2id es costosa.

    Returns:
        AesGcmEngine: Motor con clave y salt de prueba.
    """
    return AesGcmEngine("clave-de-prueba", salt=b"salt-de-prueba-16")


@pytest.fixture
def service(cipher) -> EncryptionService:
    """Servicio de cifrado sobre el motor Vigenère.

    Args:
        cipher (VigenereCipher): Motor proporcionado por la fixture homónima.

    Returns:
        EncryptionService: Servicio listo para cifrar.
    """
    return EncryptionService(cipher)
