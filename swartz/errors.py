# --------------------------------------------------------------
# File: errors.py
# Description: Excepciones propias de la capa de cifrado.
# --------------------------------------------------------------


class DecodeError(ValueError):
    """El texto cifrado no pudo revertirse al texto original.

    Se produce con Base64 malformado, con una clave distinta a la usada al
    cifrar o cuando los bytes recuperados no son UTF-8 válido.
    """
