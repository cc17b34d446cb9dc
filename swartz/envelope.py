# --------------------------------------------------------------
# File: envelope.py
# Description: Envoltura cifrada de cuerpos y parámetros de peticiones HTTP.
# --------------------------------------------------------------
"""Funciones que el cliente HTTP aplica antes de enviar y tras recibir datos.

Cuando el cifrado de transporte está activo, el cuerpo y los parámetros se
sustituyen por ``{"encrypted": <texto cifrado>}`` y las respuestas con ese
campo se descifran. La activación depende de ``config.ENCRYPTION_ENABLED``.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional, Tuple

from swartz import config
from swartz.encryption import EncryptionService
from swartz.logger import prepare_logger

logger = prepare_logger(__name__)

ENCRYPTED_FIELD = "encrypted"
REQUEST_TIME_HEADER = "X-Request-Time"


def _is_enabled(enabled: Optional[bool]) -> bool:
    return config.ENCRYPTION_ENABLED if enabled is None else enabled


def _is_present(value: Any) -> bool:
    """Veracidad al estilo JavaScript: ``{}`` y ``[]`` cuentan como presentes."""

    if value is None or value is False:
        return False
    if isinstance(value, (str, int, float)):
        return bool(value)
    return True


def seal_request(
    service: EncryptionService,
    data: Any = None,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    *,
    enabled: Optional[bool] = None,
    now: Optional[float] = None,
) -> Tuple[Any, Optional[Dict[str, Any]], Dict[str, str]]:
    """Prepara cuerpo, parámetros y cabeceras de una petición saliente.

    Args:
        service (EncryptionService): Servicio usado para cifrar.
        data (Any): Cuerpo JSON de la petición.
        params (Optional[Dict[str, Any]]): Parámetros de la URL.
        headers (Optional[Dict[str, str]]): Cabeceras originales; no se mutan.
        enabled (Optional[bool]): Fuerza el cifrado; por defecto la configuración.
        now (Optional[float]): Instante en segundos, para pruebas.

    Returns:
        Tuple[Any, Optional[Dict[str, Any]], Dict[str, str]]: Cuerpo,
        parámetros y cabeceras a enviar.

    """

    sealed_headers = dict(headers or {})
    # Marca temporal para dificultar la repetición de peticiones.
    timestamp = time.time() if now is None else now
    sealed_headers[REQUEST_TIME_HEADER] = str(int(timestamp * 1000))

    if not _is_enabled(enabled):
        return data, params, sealed_headers

    if _is_present(data):
        data = {ENCRYPTED_FIELD: service.encrypt_json(data)}
    if _is_present(params):
        params = {ENCRYPTED_FIELD: service.encrypt_json(params)}
    return data, params, sealed_headers


def open_response(
    service: EncryptionService, body: Any, *, enabled: Optional[bool] = None
) -> Any:
    """Descifra el cuerpo de una respuesta si viene envuelto.

    Si el contenido descifrado no es JSON se devuelve el cuerpo original.
    """

    if not _is_enabled(enabled):
        return body
    if not isinstance(body, dict) or not body.get(ENCRYPTED_FIELD):
        return body

    decrypted = service.decrypt(body[ENCRYPTED_FIELD])
    try:
        return json.loads(decrypted)
    except (ValueError, RecursionError):
        logger.warning("No se pudo parsear la respuesta descifrada")
        return body
