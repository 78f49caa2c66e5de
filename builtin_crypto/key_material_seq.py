# --------------------------------------------------------------
# File: key_material_seq.py
# Description: Secuencias de uno o dos materiales de claves por endpoint.
# --------------------------------------------------------------
"""Cardinalidad de ``KeyMaterial_AES_GCM_GMAC_seq``.

Un endpoint usa normalmente un único material de claves para submensaje y
payload; si el payload se protege con un material distinto, la secuencia
lleva dos. La regla se centraliza en :meth:`KeyMaterialSequence.from_wire_list`.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from builtin_crypto.builtin_key import BuiltinKey
from builtin_crypto.cdr import CdrReader, CdrWriter
from builtin_crypto.errors import InvalidCardinality
from builtin_crypto.key_material import KeyMaterial, read_key_material, write_key_material

__all__ = ["KeyMaterialSequence", "decode_seq_wire", "encode_seq_wire"]

logger = logging.getLogger(__name__)


class KeyMaterialSequence(BaseModel):
    """Variante ``One(km)`` o ``Two(km, payload_km)``.

    Attributes:
        first (KeyMaterial): Material a nivel de submensaje.
        second (Optional[KeyMaterial]): Material a nivel de payload, si existe.

    """

    model_config = ConfigDict(frozen=True)

    first: KeyMaterial
    second: Optional[KeyMaterial] = None

    @classmethod
    def one(cls, key_material: KeyMaterial) -> "KeyMaterialSequence":
        return cls(first=key_material)

    @classmethod
    def two(
        cls, key_material: KeyMaterial, payload_key_material: KeyMaterial
    ) -> "KeyMaterialSequence":
        return cls(first=key_material, second=payload_key_material)

    @classmethod
    def from_wire_list(cls, key_materials: Sequence[KeyMaterial]) -> "KeyMaterialSequence":
        """Aplica la regla de cardinalidad a una lista recibida del cable.

        Args:
            key_materials (Sequence[KeyMaterial]): Materiales en orden de llegada.

        Returns:
            KeyMaterialSequence: ``One`` para 0 o 1 elementos, ``Two`` para 2.
            Una lista vacía equivale a un único material sin protección.

        Raises:
            InvalidCardinality: Si la lista tiene 3 o más elementos.

        """

        count = len(key_materials)
        if count == 0:
            return cls.one(KeyMaterial.unprotected())
        if count == 1:
            return cls.one(key_materials[0])
        if count == 2:
            return cls.two(key_materials[0], key_materials[1])
        raise InvalidCardinality(count)

    def to_wire_list(self) -> List[KeyMaterial]:
        """Devuelve 1 o 2 elementos; nunca produce la lista vacía."""

        if self.second is None:
            return [self.first]
        return [self.first, self.second]

    @property
    def key_material(self) -> KeyMaterial:
        return self.first

    @property
    def payload_key_material(self) -> KeyMaterial:
        """Material del payload; el primero protege ambos si no hay segundo."""

        return self.first if self.second is None else self.second

    @property
    def is_unprotected(self) -> bool:
        return self.second is None and self.first.is_unprotected

    def __len__(self) -> int:
        return 1 if self.second is None else 2

    def modify_key_material(
        self, func: Callable[[KeyMaterial], KeyMaterial]
    ) -> "KeyMaterialSequence":
        """Aplica ``func`` sólo al primer material y conserva el segundo."""

        return KeyMaterialSequence(first=func(self.first), second=self.second)

    def add_master_receiver_specific_key(
        self, receiver_specific_key_id: bytes, master_receiver_specific_key: BuiltinKey
    ) -> "KeyMaterialSequence":
        return self.modify_key_material(
            lambda km: km.with_receiver_specific_key(
                receiver_specific_key_id, master_receiver_specific_key
            )
        )


def decode_seq_wire(data: bytes, *, big_endian: bool = True) -> KeyMaterialSequence:
    """Decodifica una ``sequence<KeyMaterial_AES_GCM_GMAC>`` CDR.

    Raises:
        DeserializationError: Framing CDR inválido o bytes sobrantes.
        InvalidCardinality: Si la secuencia trae 3 o más materiales.

    """

    reader = CdrReader(data, big_endian=big_endian)
    count = reader.read_uint32("key material count")
    key_materials = [read_key_material(reader) for _ in range(count)]
    reader.expect_end("KeyMaterial_AES_GCM_GMAC_seq")
    logger.debug("Decoded KeyMaterial_AES_GCM_GMAC_seq with %d elements", count)
    return KeyMaterialSequence.from_wire_list(key_materials)


def encode_seq_wire(sequence: KeyMaterialSequence, *, big_endian: bool = True) -> bytes:
    writer = CdrWriter(big_endian=big_endian)
    key_materials = sequence.to_wire_list()
    writer.write_uint32(len(key_materials))
    for key_material in key_materials:
        write_key_material(writer, key_material)
    return writer.getvalue()
