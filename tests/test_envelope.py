# --------------------------------------------------------------
# File: test_envelope.py
# Description: Pruebas de la envoltura cifrada de peticiones y respuestas.
# --------------------------------------------------------------

import pytest

from swartz import config
from swartz.envelope import ENCRYPTED_FIELD, REQUEST_TIME_HEADER, open_response, seal_request


def test_seal_disabled_is_passthrough(service, monkeypatch):
    """Con el cifrado desactivado solo se añade la cabecera temporal.

    Returns:
        None: Cuerpo y parámetros no cambian.
    """
    monkeypatch.setattr(config, "ENCRYPTION_ENABLED", False)
    headers = {"Content-Type": "application/json"}
    data, params, sealed = seal_request(service, {"a": 1}, {"page": 2}, headers, now=1.5)
    assert data == {"a": 1}
    assert params == {"page": 2}
    assert sealed == {"Content-Type": "application/json", REQUEST_TIME_HEADER: "1500"}
    assert REQUEST_TIME_HEADER not in headers


def test_seal_enabled_encrypts_body_and_params(service):
    """Con el cifrado activo cuerpo y parámetros se envuelven.

    Returns:
        None: Los campos contienen el JSON cifrado.
    """
    data, params, headers = seal_request(service, {"a": 1}, {"page": 2}, enabled=True)
    assert set(data) == {ENCRYPTED_FIELD}
    assert service.decrypt_json(data[ENCRYPTED_FIELD]) == {"a": 1}
    assert service.decrypt_json(params[ENCRYPTED_FIELD]) == {"page": 2}
    assert headers[REQUEST_TIME_HEADER].isdigit()


def test_seal_enabled_wraps_empty_containers(service):
    """Objetos y listas vacíos también se envuelven, como en JavaScript.

    Returns:
        None: Ambos campos quedan cifrados.
    """
    data, params, _ = seal_request(service, [], {}, enabled=True)
    assert service.decrypt_json(data[ENCRYPTED_FIELD]) == []
    assert service.decrypt_json(params[ENCRYPTED_FIELD]) == {}


@pytest.mark.parametrize("value", [None, False, "", 0])
def test_seal_enabled_skips_falsy_scalars(service, value):
    """Valores ausentes o falsos se envían sin cifrar.

    Args:
        value (Any): Cuerpo sin contenido.

    Returns:
        None: Se devuelve tal cual.
    """
    data, _, _ = seal_request(service, value, enabled=True)
    assert data is value


def test_open_response_roundtrip(service):
    """Una respuesta envuelta se descifra al objeto original.

    Returns:
        None: El cuerpo recuperado es igual al enviado.
    """
    data, _, _ = seal_request(service, {"documentos": [1, 2]}, enabled=True)
    assert open_response(service, data, enabled=True) == {"documentos": [1, 2]}


def test_open_response_passthrough(service):
    """Respuestas sin envoltura o con cifrado desactivado no cambian.

    Returns:
        None: Se devuelve el mismo cuerpo.
    """
    assert open_response(service, {"ok": True}, enabled=True) == {"ok": True}
    assert open_response(service, [1, 2], enabled=True) == [1, 2]
    wrapped = {ENCRYPTED_FIELD: service.encrypt_json({"x": 1})}
    assert open_response(service, wrapped, enabled=False) == wrapped


def test_open_response_keeps_body_on_parse_error(service, caplog):
    """Si el descifrado no produce JSON se conserva el cuerpo y se avisa.

    Returns:
        None: El cuerpo original vuelve y hay un WARNING.
    """
    body = {ENCRYPTED_FIELD: "not-valid-base64!!"}
    assert open_response(service, body, enabled=True) == body
    assert any(record.levelname == "WARNING" for record in caplog.records)


def test_open_response_keeps_body_on_deep_nesting(service):
    """Un JSON demasiado anidado no propaga RecursionError.

    Returns:
        None: Se devuelve el cuerpo original.
    """
    body = {ENCRYPTED_FIELD: service.encrypt("[" * 100000)}
    assert open_response(service, body, enabled=True) == body
