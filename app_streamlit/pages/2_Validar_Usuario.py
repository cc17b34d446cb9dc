# --------------------------------------------------------------
# File: 2_Validar_Usuario.py
# Description: Valida los datos del formulario de registro de usuarios.
# --------------------------------------------------------------

import streamlit as st

from swartz.user_validators import (
    ROLES,
    format_cedula,
    generate_full_name,
    get_role_description,
    requires_admin_password,
    validate_cedula,
    validate_institutional_email,
    validate_password,
)

# Presenta el título del formulario.
st.title("🪪 Validar usuario")

nombre = st.text_input("Nombre")
apellido = st.text_input("Apellido")
cedula = st.text_input("Cédula", max_chars=12)
email = st.text_input("Email institucional")
password = st.text_input("Contraseña", type="password")
role = st.selectbox("Rol", list(ROLES), format_func=get_role_description)

if requires_admin_password(role):
    st.text_input("Contraseña de administrador", type="password", key="admin_pw")

if st.button("Validar"):
    # Cada validador devuelve un modelo con el motivo del rechazo.
    checks = {
        "Cédula": validate_cedula(cedula),
        "Email": validate_institutional_email(email),
        "Contraseña": validate_password(password),
    }
    for label, result in checks.items():
        if result.is_valid:
            st.success(f"{label}: correcto")
        else:
            st.error(f"{label}: {result.message}")

    if all(result.is_valid for result in checks.values()):
        st.info(
            f"{generate_full_name(nombre, apellido)} · {format_cedula(cedula)} · "
            f"{get_role_description(role)}"
        )
