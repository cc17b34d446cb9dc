# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen de utilidades.
# --------------------------------------------------------------

import streamlit as st

from swartz import config

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Swartz Core", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 Swartz Core")
st.write(
    "Utilidades del gestor documental: cifrado de cargas para transporte y "
    "validación de datos de usuarios ecuatorianos."
)
st.caption(
    f"Motor configurado: **{config.CRYPTO_ENGINE}** · Cifrado de transporte: "
    f"**{'activo' if config.ENCRYPTION_ENABLED else 'desactivado'}**"
)
st.warning(
    "El cifrado Vigenère solo ofusca los datos: no ofrece confidencialidad frente "
    "a un atacante con recursos."
)
