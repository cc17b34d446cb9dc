# --------------------------------------------------------------
# File: models.py
# Description: Modelos de resultado devueltos por los validadores de usuario.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan los resultados de validación."""

from typing import Literal, Optional

from pydantic import BaseModel

UserRole = Literal["admin", "secretaria", "docente", "viewer"]


class CedulaValidation(BaseModel):
    """Resultado de validar una cédula ecuatoriana.

    Attributes:
        is_valid (bool): ``True`` si la cédula supera todas las reglas.
        message (Optional[str]): Motivo legible del rechazo.
        code (Optional[str]): Regla que falló (``length``, ``digits``,
            ``province``, ``third_digit`` o ``check_digit``).

    """

    is_valid: bool
    message: Optional[str] = None
    code: Optional[str] = None


class EmailValidation(BaseModel):
    """Resultado de validar un email institucional."""

    is_valid: bool
    is_institutional: bool
    message: Optional[str] = None


class PasswordValidation(BaseModel):
    is_valid: bool
    message: Optional[str] = None
