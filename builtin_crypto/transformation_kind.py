# --------------------------------------------------------------
# File: transformation_kind.py
# Description: Códec del identificador de transformación AES-GCM/GMAC.
# --------------------------------------------------------------
"""Conversión entre los códigos de 4 bytes del cable y el enumerado builtin."""

from __future__ import annotations

from enum import IntEnum

from builtin_crypto.errors import InvalidTransformationKind

__all__ = [
    "BuiltinTransformationKind",
    "TRANSFORMATION_KIND_SIZE",
    "decode_transformation_kind",
    "encode_transformation_kind",
]

TRANSFORMATION_KIND_SIZE = 4


class BuiltinTransformationKind(IntEnum):
    """Valores válidos de ``CryptoTransformKind`` (DDS Security 1.1, 9.5.2.1.1)."""

    NONE = 0
    AES128_GMAC = 1
    AES128_GCM = 2
    AES256_GMAC = 3
    AES256_GCM = 4

    @property
    def is_gcm(self) -> bool:
        """Indica si la transformación cifra además de autenticar."""

        return self in (BuiltinTransformationKind.AES128_GCM, BuiltinTransformationKind.AES256_GCM)

    @property
    def wire_code(self) -> bytes:
        return encode_transformation_kind(self)


# Los únicos cinco patrones reservados: [0, 0, 0, 0..4].
_BY_CODE = {
    kind.value.to_bytes(TRANSFORMATION_KIND_SIZE, "big"): kind
    for kind in BuiltinTransformationKind
}


def decode_transformation_kind(code: bytes) -> BuiltinTransformationKind:
    """Decodifica un ``CryptoTransformKind`` de 4 bytes big-endian.

    Args:
        code (bytes): Código leído del cable.

    Returns:
        BuiltinTransformationKind: Transformación correspondiente.

    Raises:
        InvalidTransformationKind: Si el código no es uno de los cinco reservados.

    """

    if not isinstance(code, (bytes, bytearray, memoryview)):
        raise TypeError(f"CryptoTransformKind must be bytes, got {type(code).__name__}")
    kind = _BY_CODE.get(bytes(code))
    if kind is None:
        raise InvalidTransformationKind(
            f"Invalid CryptoTransformKind: {bytes(code).hex() or '<empty>'}"
        )
    return kind


def encode_transformation_kind(kind: BuiltinTransformationKind) -> bytes:
    """Devuelve el código de 4 bytes big-endian de ``kind``."""

    return BuiltinTransformationKind(kind).value.to_bytes(TRANSFORMATION_KIND_SIZE, "big")
