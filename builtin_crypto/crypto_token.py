# --------------------------------------------------------------
# File: crypto_token.py
# Description: Adaptador entre CryptoToken genérico y material de claves tipado.
# --------------------------------------------------------------
"""Contrato del token ``DDS:Crypto:AES_GCM_GMAC`` (DDS Security 1.1, 9.5.2.1).

Éste es el único módulo que conoce el ``class_id`` y el nombre de la propiedad
binaria que transporta el material de claves.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from builtin_crypto import config
from builtin_crypto.data_holder import BinaryProperty, CryptoToken, DataHolder
from builtin_crypto.errors import (
    SecurityError,
    UnexpectedProperties,
    WrongBinaryPropertyCount,
    WrongBinaryPropertyName,
    WrongClassId,
)
from builtin_crypto.key_material import KeyMaterial, decode_wire, encode_wire
from builtin_crypto.key_material_seq import KeyMaterialSequence

__all__ = [
    "CRYPTO_TOKEN_CLASS_ID",
    "CRYPTO_TOKEN_KEYMAT_NAME",
    "key_material_seq_to_tokens",
    "key_material_to_token",
    "token_to_key_material",
    "tokens_to_key_material_seq",
]

logger = logging.getLogger(__name__)

CRYPTO_TOKEN_CLASS_ID = "DDS:Crypto:AES_GCM_GMAC"
CRYPTO_TOKEN_KEYMAT_NAME = "dds.cryp.keymat"


def _reject(error: SecurityError) -> SecurityError:
    logger.warning("Rejected CryptoToken: %s", error.msg)
    return error


def token_to_key_material(token: CryptoToken) -> KeyMaterial:
    """Extrae y decodifica el material de claves de un token builtin.

    Args:
        token (CryptoToken): Token recibido de un participante remoto.

    Returns:
        KeyMaterial: Material decodificado desde la propiedad ``dds.cryp.keymat``.

    Raises:
        WrongClassId: ``class_id`` distinto de ``DDS:Crypto:AES_GCM_GMAC``.
        UnexpectedProperties: La lista de propiedades de texto no está vacía.
        WrongBinaryPropertyCount: No hay exactamente una propiedad binaria.
        WrongBinaryPropertyName: En modo estricto, la propiedad binaria no se
            llama ``dds.cryp.keymat``.
        DeserializationError: El valor no es un material CDR válido.

    """

    holder = token.data_holder
    if holder.class_id != CRYPTO_TOKEN_CLASS_ID:
        raise _reject(
            WrongClassId(
                f"CryptoToken has wrong class_id {holder.class_id!r}. "
                f"Expected {CRYPTO_TOKEN_CLASS_ID}"
            )
        )
    if holder.properties:
        raise _reject(
            UnexpectedProperties(
                "CryptoToken has wrong properties. Expected properties to be empty."
            )
        )
    binary_properties = holder.binary_properties
    if len(binary_properties) != 1:
        raise _reject(
            WrongBinaryPropertyCount(
                "CryptoToken has wrong binary_properties. Expected exactly 1 binary "
                f"property, got {len(binary_properties)}."
            )
        )
    name = binary_properties[0].name
    if config.STRICT_KEYMAT_NAME and name != CRYPTO_TOKEN_KEYMAT_NAME:
        raise _reject(
            WrongBinaryPropertyName(
                f"CryptoToken has wrong binary property name {name!r}. "
                f"Expected {CRYPTO_TOKEN_KEYMAT_NAME}."
            )
        )
    return decode_wire(binary_properties[0].value)


def key_material_to_token(key_material: KeyMaterial) -> CryptoToken:
    """Construye el token builtin que transporta ``key_material``."""

    return CryptoToken(
        data_holder=DataHolder(
            class_id=CRYPTO_TOKEN_CLASS_ID,
            properties=(),
            binary_properties=(
                BinaryProperty(
                    name=CRYPTO_TOKEN_KEYMAT_NAME,
                    value=encode_wire(key_material),
                    propagate=True,
                ),
            ),
        )
    )


def tokens_to_key_material_seq(tokens: Iterable[CryptoToken]) -> KeyMaterialSequence:
    """Decodifica cada token y aplica la regla de cardinalidad 1 o 2."""

    return KeyMaterialSequence.from_wire_list([token_to_key_material(t) for t in tokens])


def key_material_seq_to_tokens(sequence: KeyMaterialSequence) -> List[CryptoToken]:
    return [key_material_to_token(km) for km in sequence.to_wire_list()]
