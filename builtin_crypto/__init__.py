# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del plugin criptográfico builtin AES-GCM-GMAC.
# --------------------------------------------------------------
"""Material de claves y framing del plugin ``DDS:Crypto:AES_GCM_GMAC``."""

from builtin_crypto.builtin_key import BuiltinKey, required_key_length
from builtin_crypto.crypto_token import (
    key_material_seq_to_tokens,
    key_material_to_token,
    token_to_key_material,
    tokens_to_key_material_seq,
)
from builtin_crypto.data_holder import BinaryProperty, CryptoToken, DataHolder, Property
from builtin_crypto.errors import SecurityError
from builtin_crypto.header_footer import parse_content, parse_footer, parse_header
from builtin_crypto.key_material import KeyMaterial, ReceiverKeyMaterial, decode_wire, encode_wire
from builtin_crypto.key_material_seq import KeyMaterialSequence, decode_seq_wire, encode_seq_wire
from builtin_crypto.transformation_kind import (
    BuiltinTransformationKind,
    decode_transformation_kind,
    encode_transformation_kind,
)

__all__ = [
    "BinaryProperty",
    "BuiltinKey",
    "BuiltinTransformationKind",
    "CryptoToken",
    "DataHolder",
    "KeyMaterial",
    "KeyMaterialSequence",
    "Property",
    "ReceiverKeyMaterial",
    "SecurityError",
    "decode_seq_wire",
    "decode_transformation_kind",
    "decode_wire",
    "encode_seq_wire",
    "encode_transformation_kind",
    "encode_wire",
    "key_material_seq_to_tokens",
    "key_material_to_token",
    "parse_content",
    "parse_footer",
    "parse_header",
    "required_key_length",
    "token_to_key_material",
    "tokens_to_key_material_seq",
]
