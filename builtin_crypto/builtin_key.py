# --------------------------------------------------------------
# File: builtin_key.py
# Description: Política de longitud de claves y contenedor acotado de claves crudas.
# --------------------------------------------------------------
"""Claves simétricas crudas del plugin builtin y su longitud obligatoria."""

from __future__ import annotations

import hashlib
from typing import Dict

from cryptography.hazmat.primitives import constant_time

from builtin_crypto.errors import KeyLengthMismatch
from builtin_crypto.transformation_kind import BuiltinTransformationKind

__all__ = ["BuiltinKey", "KEY_LENGTHS", "MAX_KEY_LENGTH", "required_key_length"]

MAX_KEY_LENGTH = 32

# Tabla inmutable: cada transformación tiene exactamente una longitud.
KEY_LENGTHS: Dict[BuiltinTransformationKind, int] = {
    BuiltinTransformationKind.NONE: 0,
    BuiltinTransformationKind.AES128_GMAC: 16,
    BuiltinTransformationKind.AES128_GCM: 16,
    BuiltinTransformationKind.AES256_GMAC: 32,
    BuiltinTransformationKind.AES256_GCM: 32,
}
_VALID_LENGTHS = frozenset(KEY_LENGTHS.values())


def required_key_length(kind: BuiltinTransformationKind) -> int:
    """Devuelve la longitud en bytes (0, 16 o 32) que exige ``kind``."""

    return KEY_LENGTHS[BuiltinTransformationKind(kind)]


class BuiltinKey:
    """Clave simétrica cruda de longitud fija.

    Se construye mediante :meth:`from_bytes`, :meth:`for_kind` o :meth:`zero`,
    que aplican la longitud de :func:`required_key_length`; el constructor
    rechaza cualquier longitud que no sea 0, 16 o 32 bytes. La igualdad compara
    en tiempo constante.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if len(data) not in _VALID_LENGTHS:
            raise KeyLengthMismatch("0, 16 or 32", len(data))
        self._data = bytes(data)

    @classmethod
    def from_bytes(cls, required_length: int, data: bytes) -> "BuiltinKey":
        """Crea una clave validando su longitud.

        Args:
            required_length (int): Longitud impuesta por el tipo de transformación.
            data (bytes): Bytes crudos de la clave.

        Returns:
            BuiltinKey: Clave inmutable.

        Raises:
            KeyLengthMismatch: Si ``len(data)`` no coincide con ``required_length``.

        """

        if len(data) != required_length:
            raise KeyLengthMismatch(required_length, len(data))
        return cls(data)

    @classmethod
    def for_kind(cls, kind: BuiltinTransformationKind, data: bytes) -> "BuiltinKey":
        return cls.from_bytes(required_key_length(kind), data)

    @classmethod
    def zero(
        cls, kind: BuiltinTransformationKind = BuiltinTransformationKind.NONE
    ) -> "BuiltinKey":
        """Clave canónica de ceros de la longitud que exige ``kind``.

        Sin argumentos es la clave vacía del caso degenerado "sin clave".
        """

        if not isinstance(kind, BuiltinTransformationKind):
            raise TypeError(f"zero() expects a BuiltinTransformationKind, got {kind!r}")
        return cls(b"\x00" * required_key_length(kind))

    def as_bytes(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuiltinKey):
            return NotImplemented
        return constant_time.bytes_eq(self._data, other._data)

    def __hash__(self) -> int:
        return hash(self._data)

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_data"):
            raise AttributeError("BuiltinKey is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        # Nunca se imprime la clave, sólo su huella.
        fingerprint = hashlib.sha256(self._data).hexdigest()[:8]
        return f"BuiltinKey(len={len(self._data)}, sha256={fingerprint})"


BuiltinKey.ZERO = BuiltinKey.zero()
