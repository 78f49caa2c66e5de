# --------------------------------------------------------------
# File: key_material.py
# Description: Estructura KeyMaterial_AES_GCM_GMAC y su códec CDR big-endian.
# --------------------------------------------------------------
"""Material de claves del plugin builtin (DDS Security 1.1, sección 9.5.2.1.1).

Disposición en el cable, en orden::

    transformation_kind           octet[4]
    master_salt                   sequence<octet, 32>
    sender_key_id                 octet[4]
    master_sender_key             sequence<octet, 32>
    receiver_specific_key_id      octet[4]
    master_receiver_specific_key  sequence<octet, 32>
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBytes, model_validator

from builtin_crypto.builtin_key import MAX_KEY_LENGTH, BuiltinKey, required_key_length
from builtin_crypto.cdr import CdrReader, CdrWriter
from builtin_crypto.errors import KeyLengthMismatch, KeyMaterialMismatch
from builtin_crypto.transformation_kind import (
    TRANSFORMATION_KIND_SIZE,
    BuiltinTransformationKind,
    decode_transformation_kind,
    encode_transformation_kind,
)

__all__ = [
    "KEY_ID_SIZE",
    "MASTER_SALT_MAX_LENGTH",
    "KeyId",
    "KeyMaterial",
    "ReceiverKeyMaterial",
    "decode_wire",
    "encode_wire",
    "read_key_material",
    "write_key_material",
]

logger = logging.getLogger(__name__)

KEY_ID_SIZE = 4
MASTER_SALT_MAX_LENGTH = 32
ZERO_KEY_ID = b"\x00" * KEY_ID_SIZE

KeyId = Annotated[StrictBytes, Field(min_length=KEY_ID_SIZE, max_length=KEY_ID_SIZE)]


class ReceiverKeyMaterial(BaseModel):
    """Vista del material de claves específico de un receptor."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    receiver_specific_key_id: KeyId
    master_receiver_specific_key: BuiltinKey


class KeyMaterial(BaseModel):
    """Estado completo de claves de una transformación AES-GCM/GMAC.

    Attributes:
        transformation_kind (BuiltinTransformationKind): Modo compartido por
            la clave del emisor y la específica del receptor.
        master_salt (bytes): Sal maestra, como mucho 32 bytes.
        sender_key_id (bytes): Identificador de 4 bytes de la clave del emisor.
        master_sender_key (BuiltinKey): Clave maestra del emisor.
        receiver_specific_key_id (bytes): Identificador de 4 bytes de la clave
            específica del receptor.
        master_receiver_specific_key (BuiltinKey): Clave específica del receptor.

    Para cambiar la parte específica del receptor usa
    ``with_receiver_specific_key``. ``model_copy(update=...)`` vuelve a
    validar el resultado, así que también respeta la longitud de clave.

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    transformation_kind: BuiltinTransformationKind
    master_salt: Annotated[StrictBytes, Field(max_length=MASTER_SALT_MAX_LENGTH)]
    sender_key_id: KeyId
    master_sender_key: BuiltinKey
    receiver_specific_key_id: KeyId
    master_receiver_specific_key: BuiltinKey

    @model_validator(mode="after")
    def _keys_match_kind(self) -> "KeyMaterial":
        key_len = required_key_length(self.transformation_kind)
        for key in (self.master_sender_key, self.master_receiver_specific_key):
            if len(key) != key_len:
                raise KeyLengthMismatch(key_len, len(key))
        return self

    def model_copy(self, *, update=None, deep: bool = False) -> "KeyMaterial":
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**dict(self), **update})

    @classmethod
    def unprotected(cls) -> "KeyMaterial":
        """Material degenerado que representa "sin protección configurada"."""

        return cls(
            transformation_kind=BuiltinTransformationKind.NONE,
            master_salt=b"",
            sender_key_id=ZERO_KEY_ID,
            master_sender_key=BuiltinKey.ZERO,
            receiver_specific_key_id=ZERO_KEY_ID,
            master_receiver_specific_key=BuiltinKey.ZERO,
        )

    @property
    def is_unprotected(self) -> bool:
        return self.transformation_kind == BuiltinTransformationKind.NONE

    def with_receiver_specific_key(
        self, receiver_specific_key_id: bytes, master_receiver_specific_key: BuiltinKey
    ) -> "KeyMaterial":
        """Copia el material sustituyendo sólo la parte específica del receptor."""

        return KeyMaterial(
            transformation_kind=self.transformation_kind,
            master_salt=self.master_salt,
            sender_key_id=self.sender_key_id,
            master_sender_key=self.master_sender_key,
            receiver_specific_key_id=receiver_specific_key_id,
            master_receiver_specific_key=master_receiver_specific_key,
        )

    def receiver_key_material_for(self, common: "KeyMaterial") -> ReceiverKeyMaterial:
        """Comprueba que este material describe la misma relación que ``common``.

        Args:
            common (KeyMaterial): Material común del emisor en el que ya se confía.

        Returns:
            ReceiverKeyMaterial: Identificador y clave específicos del receptor.

        Raises:
            KeyMaterialMismatch: Si difiere ``sender_key_id``,
                ``transformation_kind``, ``master_sender_key`` o ``master_salt``.

        """

        if self.sender_key_id != common.sender_key_id:
            raise KeyMaterialMismatch("sender_key_id", common.sender_key_id, self.sender_key_id)
        if self.transformation_kind != common.transformation_kind:
            raise KeyMaterialMismatch(
                "transformation_kind", common.transformation_kind, self.transformation_kind
            )
        if self.master_sender_key != common.master_sender_key:
            raise KeyMaterialMismatch(
                "master_sender_key", common.master_sender_key, self.master_sender_key
            )
        if self.master_salt != common.master_salt:
            raise KeyMaterialMismatch("master_salt", common.master_salt, self.master_salt)
        return ReceiverKeyMaterial(
            receiver_specific_key_id=self.receiver_specific_key_id,
            master_receiver_specific_key=self.master_receiver_specific_key,
        )


def read_key_material(reader: CdrReader) -> KeyMaterial:
    """Lee un ``KeyMaterial_AES_GCM_GMAC`` en la posición actual del lector."""

    kind = decode_transformation_kind(
        reader.read_octets(TRANSFORMATION_KIND_SIZE, "transformation_kind")
    )
    master_salt = reader.read_sequence(MASTER_SALT_MAX_LENGTH, "master_salt")
    sender_key_id = reader.read_octets(KEY_ID_SIZE, "sender_key_id")
    master_sender_key = reader.read_sequence(MAX_KEY_LENGTH, "master_sender_key")
    receiver_specific_key_id = reader.read_octets(KEY_ID_SIZE, "receiver_specific_key_id")
    master_receiver_specific_key = reader.read_sequence(
        MAX_KEY_LENGTH, "master_receiver_specific_key"
    )

    key_len = required_key_length(kind)
    return KeyMaterial(
        transformation_kind=kind,
        master_salt=master_salt,
        sender_key_id=sender_key_id,
        master_sender_key=BuiltinKey.from_bytes(key_len, master_sender_key),
        receiver_specific_key_id=receiver_specific_key_id,
        master_receiver_specific_key=BuiltinKey.from_bytes(key_len, master_receiver_specific_key),
    )


def write_key_material(writer: CdrWriter, key_material: KeyMaterial) -> None:
    writer.write_octets(
        encode_transformation_kind(key_material.transformation_kind), TRANSFORMATION_KIND_SIZE
    )
    writer.write_sequence(key_material.master_salt, MASTER_SALT_MAX_LENGTH)
    writer.write_octets(key_material.sender_key_id, KEY_ID_SIZE)
    writer.write_sequence(key_material.master_sender_key.as_bytes(), MAX_KEY_LENGTH)
    writer.write_octets(key_material.receiver_specific_key_id, KEY_ID_SIZE)
    writer.write_sequence(key_material.master_receiver_specific_key.as_bytes(), MAX_KEY_LENGTH)


def decode_wire(data: bytes, *, big_endian: bool = True) -> KeyMaterial:
    """Decodifica un material de claves CDR.

    Args:
        data (bytes): Codificación CDR completa de una única estructura.
        big_endian (bool): Orden de bytes; el plugin builtin usa big-endian.

    Returns:
        KeyMaterial: Material validado.

    Raises:
        DeserializationError: Framing CDR inválido o bytes sobrantes.
        InvalidTransformationKind: Código de transformación desconocido.
        KeyLengthMismatch: Clave con longitud distinta a la del tipo.

    """

    reader = CdrReader(data, big_endian=big_endian)
    key_material = read_key_material(reader)
    reader.expect_end("KeyMaterial_AES_GCM_GMAC")
    logger.debug(
        "Decoded KeyMaterial_AES_GCM_GMAC kind=%s sender_key_id=%s",
        key_material.transformation_kind.name,
        key_material.sender_key_id.hex(),
    )
    return key_material


def encode_wire(key_material: KeyMaterial, *, big_endian: bool = True) -> bytes:
    """Codifica ``key_material`` en CDR; nunca falla para un material válido."""

    writer = CdrWriter(big_endian=big_endian)
    write_key_material(writer, key_material)
    return writer.getvalue()
