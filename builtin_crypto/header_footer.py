# --------------------------------------------------------------
# File: header_footer.py
# Description: Interpretación de cabecera, contenido y pie del plugin builtin.
# --------------------------------------------------------------
"""Tipos builtin de DDS Security 1.1, secciones 9.5.2.2 a 9.5.2.5.

Formatos del plugin builtin:

* ``plugin_crypto_header_extra``: ``session_id`` (4) + ``initialization_vector_suffix`` (8).
* Pie: ``common_mac`` (16) + ``sequence<ReceiverSpecificMAC>`` con
  ``receiver_mac_key_id`` (4) y ``receiver_mac`` (16) por entrada.
* Contenido: bytes opacos que se entregan tal cual.
"""

from __future__ import annotations

import logging
from typing import Annotated, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBytes

from builtin_crypto.cdr import CdrReader, CdrWriter
from builtin_crypto.errors import MalformedHeaderExtra
from builtin_crypto.key_material import KEY_ID_SIZE, KeyId
from builtin_crypto.submessage_elements import (
    CryptoContent,
    CryptoFooter,
    CryptoHeader,
    CryptoTransformIdentifier,
)
from builtin_crypto.transformation_kind import (
    BuiltinTransformationKind,
    decode_transformation_kind,
    encode_transformation_kind,
)

__all__ = [
    "BuiltinCryptoContent",
    "BuiltinCryptoFooter",
    "BuiltinCryptoHeader",
    "BuiltinCryptoTransformIdentifier",
    "ReceiverSpecificMAC",
    "encode_content",
    "encode_footer",
    "encode_header",
    "parse_content",
    "parse_footer",
    "parse_header",
    "parse_transform_identifier",
]

logger = logging.getLogger(__name__)

SESSION_ID_SIZE = 4
IV_SUFFIX_SIZE = 8
HEADER_EXTRA_SIZE = SESSION_ID_SIZE + IV_SUFFIX_SIZE
MAC_SIZE = 16

Mac = Annotated[StrictBytes, Field(min_length=MAC_SIZE, max_length=MAC_SIZE)]


class BuiltinCryptoTransformIdentifier(BaseModel):
    model_config = ConfigDict(frozen=True)

    transformation_kind: BuiltinTransformationKind
    transformation_key_id: KeyId


class BuiltinCryptoHeader(BaseModel):
    """Prefijo de cada mensaje protegido.

    Attributes:
        transform_identifier (BuiltinCryptoTransformIdentifier): Transformación
            y clave usadas.
        session_id (bytes): Identificador de sesión de 4 bytes.
        initialization_vector_suffix (bytes): Sufijo de IV de 8 bytes.

    """

    model_config = ConfigDict(frozen=True)

    transform_identifier: BuiltinCryptoTransformIdentifier
    session_id: Annotated[
        StrictBytes, Field(min_length=SESSION_ID_SIZE, max_length=SESSION_ID_SIZE)
    ]
    initialization_vector_suffix: Annotated[
        StrictBytes, Field(min_length=IV_SUFFIX_SIZE, max_length=IV_SUFFIX_SIZE)
    ]

    @property
    def initialization_vector(self) -> bytes:
        """IV de 96 bits para AES-GCM: ``session_id || initialization_vector_suffix``."""

        return self.session_id + self.initialization_vector_suffix


class BuiltinCryptoContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    crypto_content: StrictBytes


class ReceiverSpecificMAC(BaseModel):
    model_config = ConfigDict(frozen=True)

    receiver_mac_key_id: KeyId
    receiver_mac: Mac


class BuiltinCryptoFooter(BaseModel):
    """Trailer de integridad: MAC común y MACs específicos por receptor."""

    model_config = ConfigDict(frozen=True)

    common_mac: Mac
    receiver_specific_macs: Tuple[ReceiverSpecificMAC, ...] = ()


def parse_transform_identifier(
    value: CryptoTransformIdentifier,
) -> BuiltinCryptoTransformIdentifier:
    return BuiltinCryptoTransformIdentifier(
        transformation_kind=decode_transformation_kind(value.transformation_kind),
        transformation_key_id=value.transformation_key_id,
    )


def parse_header(value: CryptoHeader) -> BuiltinCryptoHeader:
    """Interpreta una cabecera criptográfica.

    Args:
        value (CryptoHeader): Elemento de cabecera del submensaje.

    Returns:
        BuiltinCryptoHeader: Identificador de transformación, sesión y sufijo de IV.

    Raises:
        InvalidTransformationKind: Código de transformación desconocido.
        MalformedHeaderExtra: El campo extra no mide exactamente 12 bytes.

    """

    transform_identifier = parse_transform_identifier(value.transformation_id)
    extra = value.plugin_crypto_header_extra
    if len(extra) != HEADER_EXTRA_SIZE:
        raise MalformedHeaderExtra(len(extra))
    return BuiltinCryptoHeader(
        transform_identifier=transform_identifier,
        session_id=extra[:SESSION_ID_SIZE],
        initialization_vector_suffix=extra[SESSION_ID_SIZE:],
    )


def encode_header(header: BuiltinCryptoHeader) -> CryptoHeader:
    identifier = header.transform_identifier
    return CryptoHeader(
        transformation_id=CryptoTransformIdentifier(
            transformation_kind=encode_transformation_kind(identifier.transformation_kind),
            transformation_key_id=identifier.transformation_key_id,
        ),
        plugin_crypto_header_extra=header.session_id + header.initialization_vector_suffix,
    )


def parse_content(value: CryptoContent) -> BuiltinCryptoContent:
    return BuiltinCryptoContent(crypto_content=value.data)


def encode_content(content: BuiltinCryptoContent) -> CryptoContent:
    return CryptoContent(data=content.crypto_content)


def parse_footer(value: CryptoFooter, *, big_endian: bool = True) -> BuiltinCryptoFooter:
    """Interpreta el pie: MAC común seguido de la lista de MACs por receptor.

    Raises:
        DeserializationError: Pie truncado, con bytes sobrantes o MACs incompletos.

    """

    reader = CdrReader(value.data, big_endian=big_endian)
    common_mac = reader.read_octets(MAC_SIZE, "common_mac")
    count = reader.read_uint32("receiver_specific_macs length")
    macs = []
    for _ in range(count):
        key_id = reader.read_octets(KEY_ID_SIZE, "receiver_mac_key_id")
        mac = reader.read_octets(MAC_SIZE, "receiver_mac")
        macs.append(ReceiverSpecificMAC(receiver_mac_key_id=key_id, receiver_mac=mac))
    reader.expect_end("CryptoFooter")
    logger.debug("Parsed CryptoFooter with %d receiver-specific MACs", count)
    return BuiltinCryptoFooter(common_mac=common_mac, receiver_specific_macs=tuple(macs))


def encode_footer(footer: BuiltinCryptoFooter, *, big_endian: bool = True) -> CryptoFooter:
    writer = CdrWriter(big_endian=big_endian)
    writer.write_octets(footer.common_mac, MAC_SIZE)
    writer.write_uint32(len(footer.receiver_specific_macs))
    for entry in footer.receiver_specific_macs:
        writer.write_octets(entry.receiver_mac_key_id, KEY_ID_SIZE)
        writer.write_octets(entry.receiver_mac, MAC_SIZE)
    return CryptoFooter(data=writer.getvalue())
