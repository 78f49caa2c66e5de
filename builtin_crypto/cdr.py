# --------------------------------------------------------------
# File: cdr.py
# Description: Lector y escritor CDR mínimos para las estructuras del plugin.
# --------------------------------------------------------------
"""Primitivas CDR (Common Data Representation) dependientes del orden de bytes.

Sólo se cubre lo que necesitan las estructuras del plugin builtin: enteros
``uint32`` alineados a 4 bytes, arrays de octetos de tamaño fijo y secuencias
de octetos con prefijo de longitud (opcionalmente acotadas). La alineación se
calcula respecto al origen del flujo, como exige CDR.
"""

from __future__ import annotations

import struct
from typing import Optional

from builtin_crypto.errors import DeserializationError, SerializationError

__all__ = ["CdrReader", "CdrWriter", "UINT32_MAX"]

UINT32_MAX = 0xFFFFFFFF


def _prefix(big_endian: bool) -> str:
    return ">" if big_endian else "<"


class CdrWriter:
    """Acumula una codificación CDR en memoria.

    Args:
        big_endian (bool): Orden de bytes de los enteros; el plugin usa big-endian.
    """

    def __init__(self, big_endian: bool = True) -> None:
        self._buf = bytearray()
        self._fmt = _prefix(big_endian) + "I"

    def align(self, alignment: int) -> None:
        """Rellena con ceros hasta el siguiente múltiplo de ``alignment``."""

        self._buf.extend(b"\x00" * (-len(self._buf) % alignment))

    def write_uint32(self, value: int) -> None:
        if not 0 <= value <= UINT32_MAX:
            raise SerializationError(f"uint32 out of range: {value}")
        self.align(4)
        self._buf.extend(struct.pack(self._fmt, value))

    def write_octets(self, data: bytes, size: int) -> None:
        """Escribe un array de octetos de tamaño fijo (sin prefijo)."""

        if len(data) != size:
            raise SerializationError(
                f"Fixed octet array must be {size} bytes, got {len(data)}"
            )
        self._buf.extend(data)

    def write_sequence(self, data: bytes, bound: Optional[int] = None) -> None:
        """Escribe una ``sequence<octet, bound>`` con prefijo de longitud."""

        if bound is not None and len(data) > bound:
            raise SerializationError(
                f"Sequence of {len(data)} octets exceeds bound {bound}"
            )
        self.write_uint32(len(data))
        self._buf.extend(data)

    def getvalue(self) -> bytes:
        return bytes(self._buf)


class CdrReader:
    """Recorre un búfer CDR validando cada lectura.

    Todas las lecturas fuera de rango lanzan ``DeserializationError``; nunca se
    devuelven datos parciales.

    Args:
        data (bytes): Búfer codificado.
        big_endian (bool): Orden de bytes de los enteros.
    """

    def __init__(self, data: bytes, big_endian: bool = True) -> None:
        self._data = bytes(data)
        self._pos = 0
        self._fmt = _prefix(big_endian) + "I"

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, size: int, what: str) -> bytes:
        if size > self.remaining:
            raise DeserializationError(
                f"Truncated input reading {what}: need {size} bytes, have {self.remaining}"
            )
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def align(self, alignment: int) -> None:
        self._take(-self._pos % alignment, "alignment padding")

    def read_uint32(self, what: str = "uint32") -> int:
        self.align(4)
        (value,) = struct.unpack(self._fmt, self._take(4, what))
        return value

    def read_octets(self, size: int, what: str = "octet array") -> bytes:
        return self._take(size, what)

    def read_sequence(self, bound: Optional[int] = None, what: str = "sequence") -> bytes:
        length = self.read_uint32(f"{what} length")
        if bound is not None and length > bound:
            raise DeserializationError(
                f"Invalid length prefix for {what}: {length} exceeds bound {bound}"
            )
        return self._take(length, what)

    def expect_end(self, what: str = "structure") -> None:
        """Exige que no queden bytes tras la estructura decodificada."""

        if self.remaining:
            raise DeserializationError(
                f"{self.remaining} trailing bytes after {what}"
            )
