# --------------------------------------------------------------
# File: 1_Cifrado.py
# Description: Cifra y descifra texto o JSON con el servicio configurado.
# --------------------------------------------------------------

import json

import streamlit as st

from swartz.encryption import ENGINES, build_encryption_service


@st.cache_resource
def get_service(engine_name: str, key: str | None):
    """Reutiliza el servicio entre ejecuciones; AES-GCM deriva la clave con Argon2id."""

    return build_encryption_service(engine_name, key)


# Presenta el título de la sección de cifrado.
st.title("🔏 Cifrado de cargas")

engine_name = st.selectbox("Motor", sorted(ENGINES), index=sorted(ENGINES).index("vigenere"))
key = st.text_input("Clave (vacío = clave configurada)", type="password")
service = get_service(engine_name, key or None)

tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

# Cifrado de texto libre o de un objeto JSON.
with tab_enc:
    as_json = st.checkbox("Interpretar como JSON", key="enc_json")
    plaintext = st.text_area("Texto en claro", key="enc_text")
    if st.button("Cifrar", disabled=not plaintext, key="btn_encrypt"):
        if as_json:
            try:
                ciphertext = service.encrypt_json(json.loads(plaintext))
            except json.JSONDecodeError as exc:
                st.error(f"JSON inválido: {exc.msg}")
                st.stop()
        else:
            ciphertext = service.encrypt(plaintext)
        st.success("Texto cifrado.")
        st.code(ciphertext)

# Descifrado con la misma clave y motor.
with tab_dec:
    as_json = st.checkbox("Esperar JSON", key="dec_json")
    ciphertext = st.text_area("Texto cifrado (Base64)", key="dec_text")
    if st.button("Descifrar", disabled=not ciphertext, key="btn_decrypt"):
        if as_json:
            data = service.decrypt_json(ciphertext.strip())
            if data is None:
                st.error("No se pudo descifrar el JSON.")
            else:
                st.json(data)
        else:
            plaintext = service.decrypt(ciphertext.strip())
            if plaintext:
                st.code(plaintext)
            else:
                st.error("No se pudo descifrar: clave incorrecta o datos corruptos.")
