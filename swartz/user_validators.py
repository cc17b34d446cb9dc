# --------------------------------------------------------------
# File: user_validators.py
# Description: Validadores de datos de usuarios ecuatorianos (cédula, email, contraseña).
# --------------------------------------------------------------
"""Reglas de validación usadas por el formulario de registro de usuarios."""

from __future__ import annotations

import re

from swartz import config
from swartz.models import CedulaValidation, EmailValidation, PasswordValidation, UserRole

SEPARATORS = re.compile(r"[\s-]")
EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UPPER = re.compile(r"[A-Z]")
LOWER = re.compile(r"[a-z]")
DIGIT = re.compile(r"[0-9]")
SYMBOL = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

PROVINCE_MIN = 1
PROVINCE_MAX = 24

ROLES: dict[UserRole, str] = {
    "admin": "Administrador del Sistema",
    "secretaria": "Secretaria/Asistente Administrativa",
    "docente": "Docente/Profesor",
    "viewer": "Visualizador (Solo lectura)",
}
ADMIN_PASSWORD_ROLES = {"admin", "secretaria"}


def _clean(cedula: str) -> str:
    return SEPARATORS.sub("", cedula)


def _fail(code: str, message: str) -> CedulaValidation:
    return CedulaValidation(is_valid=False, message=message, code=code)


def check_digit(digits: str) -> int:
    """Calcula el dígito verificador módulo 10 de los nueve primeros dígitos.

    Los dígitos en posición par (índice 0, 2, ...) se duplican restando 9 si
    superan 9; el resto se suma sin cambios.
    """

    total = 0
    for i, char in enumerate(digits[:9]):
        value = int(char)
        if i % 2 == 0:
            value *= 2
            if value > 9:
                value -= 9
        total += value

    residue = total % 10
    return 0 if residue == 0 else 10 - residue


def validate_cedula(cedula: str) -> CedulaValidation:
    """Valida una cédula de identidad ecuatoriana de persona natural.

    Las reglas se evalúan en orden y se devuelve la primera que falla.

    Args:
        cedula (str): Valor introducido; se ignoran espacios y guiones.

    Returns:
        CedulaValidation: Resultado con motivo y código de la regla fallida.

    """

    clean = _clean(cedula)

    if len(clean) != 10:
        return _fail("length", "La cédula debe tener 10 dígitos")

    # isdigit() aceptaría dígitos Unicode no ASCII.
    if not (clean.isascii() and clean.isdigit()):
        return _fail("digits", "La cédula solo debe contener números")

    province = int(clean[:2])
    if province < PROVINCE_MIN or province > PROVINCE_MAX:
        return _fail("province", "Los dos primeros dígitos deben estar entre 01 y 24")

    if int(clean[2]) >= 6:
        return _fail("third_digit", "El tercer dígito debe ser menor a 6")

    if check_digit(clean) != int(clean[9]):
        return _fail(
            "check_digit", "La cédula no es válida (dígito verificador incorrecto)"
        )

    return CedulaValidation(is_valid=True)


validate_national_id = validate_cedula


def validate_institutional_email(email: str) -> EmailValidation:
    """Comprueba el formato del email y que pertenezca a un dominio institucional."""

    if not EMAIL.match(email):
        return EmailValidation(
            is_valid=False,
            is_institutional=False,
            message="El formato del email no es válido",
        )

    if not email.lower().endswith(config.INSTITUTIONAL_DOMAINS):
        return EmailValidation(
            is_valid=False,
            is_institutional=False,
            message="Debe usar un email institucional ("
            + ", ".join(config.INSTITUTIONAL_DOMAINS)
            + ")",
        )

    return EmailValidation(is_valid=True, is_institutional=True)


def validate_password(password: str) -> PasswordValidation:
    """Aplica la política de contraseñas del registro, primera regla fallida."""

    rules = (
        (len(password) >= 8, "La contraseña debe tener al menos 8 caracteres"),
        (UPPER.search(password), "La contraseña debe contener al menos una mayúscula"),
        (LOWER.search(password), "La contraseña debe contener al menos una minúscula"),
        (DIGIT.search(password), "La contraseña debe contener al menos un número"),
        (
            SYMBOL.search(password),
            "La contraseña debe contener al menos un carácter especial",
        ),
    )
    for passed, message in rules:
        if not passed:
            return PasswordValidation(is_valid=False, message=message)
    return PasswordValidation(is_valid=True)


def format_cedula(cedula: str) -> str:
    """Formatea la cédula como ``XXX-XXXXXXX`` si tiene 10 caracteres."""

    clean = _clean(cedula)
    if len(clean) == 10:
        return f"{clean[:3]}-{clean[3:]}"
    return cedula


def generate_full_name(nombre: str, apellido: str) -> str:
    return f"{nombre.strip()} {apellido.strip()}"


def get_role_description(role: str) -> str:
    return ROLES.get(role, role)


def requires_admin_password(role: str) -> bool:
    """Indica si el rol exige contraseña de administrador al crearse."""

    return role in ADMIN_PASSWORD_ROLES
