# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores de seguridad del plugin criptográfico builtin.
# --------------------------------------------------------------
"""Excepciones lanzadas por los códecs de material de claves y cabeceras."""

from __future__ import annotations

from typing import Any, Union

__all__ = [
    "SecurityError",
    "InvalidTransformationKind",
    "KeyLengthMismatch",
    "DeserializationError",
    "SerializationError",
    "WrongClassId",
    "UnexpectedProperties",
    "WrongBinaryPropertyCount",
    "WrongBinaryPropertyName",
    "InvalidCardinality",
    "KeyMaterialMismatch",
    "MalformedHeaderExtra",
]


class SecurityError(Exception):
    """Error base de seguridad; todas las causas son recuperables por el llamador.

    Un material de claves o token malformado no se distingue de un intento de
    manipulación, así que el llamador debe descartar el mensaje.
    """

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class InvalidTransformationKind(SecurityError):
    """Código de transformación de 4 bytes desconocido."""


class KeyLengthMismatch(SecurityError):
    """La clave no tiene la longitud exigida por el tipo de transformación."""

    def __init__(self, expected: Union[int, str], received: int) -> None:
        super().__init__(
            f"Key length mismatch: expected {expected} bytes, received {received}."
        )
        self.expected = expected
        self.received = received


class DeserializationError(SecurityError):
    """Fallo de framing CDR al decodificar."""


class SerializationError(SecurityError):
    """Fallo de framing CDR al codificar."""


class WrongClassId(SecurityError):
    """El token no pertenece al plugin builtin AES-GCM-GMAC."""


class UnexpectedProperties(SecurityError):
    """El token trae propiedades de texto cuando deberían estar vacías."""


class WrongBinaryPropertyCount(SecurityError):
    """El token no trae exactamente una propiedad binaria con el keymat."""


class WrongBinaryPropertyName(WrongBinaryPropertyCount):
    """La única propiedad binaria no se llama ``dds.cryp.keymat``."""


class InvalidCardinality(SecurityError):
    """Secuencia de material de claves con 3 o más elementos."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Expected 1 or 2 key materials in KeyMaterial_AES_GCM_GMAC_seq, received {count}."
        )
        self.count = count


class KeyMaterialMismatch(SecurityError):
    """El material específico del receptor no coincide con el material común."""

    def __init__(self, field: str, expected: Any, received: Any) -> None:
        super().__init__(
            f"The receiver-specific key material has a wrong {field}: "
            f"expected {expected!r}, received {received!r}."
        )
        self.field = field
        self.expected = expected
        self.received = received


class MalformedHeaderExtra(SecurityError):
    """El campo extra de la cabecera no mide exactamente 12 bytes."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"plugin_crypto_header_extra was of length {length}. Expected 12."
        )
        self.length = length
