# --------------------------------------------------------------
# File: test_key_material_seq.py
# Description: Pruebas de la cardinalidad y el códec de secuencias de material.
# --------------------------------------------------------------

import pytest

from builtin_crypto.builtin_key import BuiltinKey
from builtin_crypto.errors import DeserializationError, InvalidCardinality
from builtin_crypto.key_material import KeyMaterial, encode_wire
from builtin_crypto.key_material_seq import (
    KeyMaterialSequence,
    decode_seq_wire,
    encode_seq_wire,
)
from builtin_crypto.transformation_kind import BuiltinTransformationKind


def test_empty_list_is_unprotected():
    """Comprueba que la lista vacía equivalga a un único material NONE.

    Returns:
        None: Las aserciones revisan el material degenerado.
    """
    seq = KeyMaterialSequence.from_wire_list([])
    assert len(seq) == 1
    assert seq.is_unprotected
    km = seq.key_material
    assert km.transformation_kind is BuiltinTransformationKind.NONE
    assert km.master_salt == b""
    assert km.sender_key_id == b"\x00\x00\x00\x00"
    assert km.master_sender_key == BuiltinKey.ZERO
    assert seq.to_wire_list() == [KeyMaterial.unprotected()]


def test_one_and_two(aes256_key_material, aes128_key_material):
    """Valida las variantes One y Two y el material de payload.

    Args:
        aes256_key_material (KeyMaterial): Material de submensaje.
        aes128_key_material (KeyMaterial): Material de payload.

    Returns:
        None: Las aserciones revisan los accesores.
    """
    one = KeyMaterialSequence.from_wire_list([aes256_key_material])
    assert one == KeyMaterialSequence.one(aes256_key_material)
    assert one.key_material == aes256_key_material
    assert one.payload_key_material == aes256_key_material
    assert one.to_wire_list() == [aes256_key_material]
    assert not one.is_unprotected

    two = KeyMaterialSequence.from_wire_list([aes256_key_material, aes128_key_material])
    assert two == KeyMaterialSequence.two(aes256_key_material, aes128_key_material)
    assert len(two) == 2
    assert two.key_material == aes256_key_material
    assert two.payload_key_material == aes128_key_material
    assert two.to_wire_list() == [aes256_key_material, aes128_key_material]


def test_three_or_more_is_rejected(aes256_key_material):
    """Garantiza que 3 o más materiales provoquen InvalidCardinality.

    Args:
        aes256_key_material (KeyMaterial): Material repetido en la lista.

    Returns:
        None: Las aserciones revisan el recuento del error.
    """
    for count in (3, 5):
        with pytest.raises(InvalidCardinality) as excinfo:
            KeyMaterialSequence.from_wire_list([aes256_key_material] * count)
        assert excinfo.value.count == count


def test_add_master_receiver_specific_key(aes256_key_material, aes128_key_material):
    """Comprueba que sólo cambie la parte de receptor del primer material.

    Args:
        aes256_key_material (KeyMaterial): Primer material.
        aes128_key_material (KeyMaterial): Segundo material, que no debe cambiar.

    Returns:
        None: Las aserciones comparan cada campo.
    """
    seq = KeyMaterialSequence.two(aes256_key_material, aes128_key_material)
    new_key = BuiltinKey.from_bytes(32, b"\x33" * 32)
    updated = seq.add_master_receiver_specific_key(b"\x00\x00\x01\x00", new_key)

    first = updated.key_material
    assert first.receiver_specific_key_id == b"\x00\x00\x01\x00"
    assert first.master_receiver_specific_key == new_key
    assert first.transformation_kind == aes256_key_material.transformation_kind
    assert first.master_salt == aes256_key_material.master_salt
    assert first.sender_key_id == aes256_key_material.sender_key_id
    assert first.master_sender_key == aes256_key_material.master_sender_key
    assert updated.payload_key_material == aes128_key_material
    # La secuencia original no se modifica.
    assert seq.key_material == aes256_key_material


def test_seq_wire_roundtrip(aes256_key_material, aes128_key_material):
    """Valida la codificación CDR de secuencias de uno y dos elementos.

    Args:
        aes256_key_material (KeyMaterial): Primer material.
        aes128_key_material (KeyMaterial): Segundo material.

    Returns:
        None: Las aserciones comparan bytes y secuencias.
    """
    one = KeyMaterialSequence.one(aes128_key_material)
    wire = encode_seq_wire(one)
    assert wire == b"\x00\x00\x00\x01" + encode_wire(aes128_key_material)
    assert decode_seq_wire(wire) == one

    two = KeyMaterialSequence.two(aes128_key_material, aes256_key_material)
    assert decode_seq_wire(encode_seq_wire(two)) == two


def test_seq_wire_empty_and_oversized(aes256_key_material):
    """Comprueba la lista vacía del cable y el rechazo de tres elementos.

    Args:
        aes256_key_material (KeyMaterial): Material repetido.

    Returns:
        None: Las aserciones revisan el caso degenerado y el error.
    """
    seq = decode_seq_wire(b"\x00\x00\x00\x00")
    assert seq.is_unprotected
    # La forma abreviada vacía nunca se produce al codificar.
    assert encode_seq_wire(seq) == b"\x00\x00\x00\x01" + b"\x00" * 24

    three = b"\x00\x00\x00\x03" + encode_wire(aes256_key_material) * 3
    with pytest.raises(InvalidCardinality):
        decode_seq_wire(three)
    with pytest.raises(DeserializationError):
        decode_seq_wire(b"\x00\x00\x00\x02" + encode_wire(aes256_key_material))
