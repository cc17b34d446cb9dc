# --------------------------------------------------------------
# File: test_encryption.py
# Description: Pruebas del servicio de cifrado con motor intercambiable.
# --------------------------------------------------------------

import pytest

from swartz import config
from swartz.crypto_aesgcm import AesGcmEngine
from swartz.crypto_vigenere import VigenereCipher
from swartz.encryption import EncryptionService, build_encryption_service, build_engine


def test_service_delegates_to_engine(service, cipher):
    """El servicio produce lo mismo que su motor.

    Returns:
        None: Las salidas coinciden.
    """
    assert service.encrypt("oficio") == cipher.encrypt("oficio")
    assert service.decrypt(cipher.encrypt("oficio")) == "oficio"
    assert service.decrypt_json(service.encrypt_json({"a": 1})) == {"a": 1}
    assert service.decrypt("not-valid-base64!!") == ""


def test_set_engine_swaps_algorithm(service, aes_engine):
    """Cambiar el motor no altera la interfaz de los llamadores.

    Returns:
        None: El servicio descifra con el nuevo motor.
    """
    ciphertext_vigenere = service.encrypt("memorando")
    service.set_engine(aes_engine)
    assert service.engine is aes_engine
    assert service.decrypt(service.encrypt("memorando")) == "memorando"
    assert service.decrypt(ciphertext_vigenere) == ""


def test_build_engine_by_name(monkeypatch):
    """La fábrica devuelve el motor configurado o el pedido.

    Returns:
        None: Se comprueban los tipos devueltos.
    """
    monkeypatch.setattr(config, "CRYPTO_ENGINE", "vigenere")
    assert isinstance(build_engine(), VigenereCipher)
    assert isinstance(build_engine(" AESGCM ", key="k"), AesGcmEngine)


def test_build_engine_unknown():
    """Un nombre desconocido se rechaza.

    Returns:
        None: Se espera ValueError.
    """
    with pytest.raises(ValueError):
        build_engine("rot13")


def test_build_encryption_service_uses_key():
    """El servicio construido usa la clave indicada.

    Returns:
        None: El texto cifrado coincide con el del motor equivalente.
    """
    svc = build_encryption_service("vigenere", key="abc")
    assert isinstance(svc, EncryptionService)
    assert svc.encrypt("hola") == VigenereCipher("abc").encrypt("hola")
