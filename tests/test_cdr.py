# --------------------------------------------------------------
# File: test_cdr.py
# Description: Pruebas de las primitivas CDR de lectura y escritura.
# --------------------------------------------------------------

import pytest

from builtin_crypto.cdr import CdrReader, CdrWriter
from builtin_crypto.errors import DeserializationError, SerializationError


def test_uint32_byte_order():
    """Comprueba la codificación big-endian y little-endian de uint32.

    Returns:
        None: Las aserciones comparan los bytes generados.
    """
    be = CdrWriter()
    be.write_uint32(0x01020304)
    le = CdrWriter(big_endian=False)
    le.write_uint32(0x01020304)
    assert be.getvalue() == b"\x01\x02\x03\x04"
    assert le.getvalue() == b"\x04\x03\x02\x01"
    assert CdrReader(le.getvalue(), big_endian=False).read_uint32() == 0x01020304


def test_length_prefix_is_aligned():
    """Verifica el relleno previo a un prefijo de longitud desalineado.

    Returns:
        None: Las aserciones revisan relleno y lectura posterior.
    """
    writer = CdrWriter()
    writer.write_octets(b"\xff", 1)
    writer.write_sequence(b"ab")
    data = writer.getvalue()
    assert data == b"\xff\x00\x00\x00\x00\x00\x00\x02ab"

    reader = CdrReader(data)
    assert reader.read_octets(1) == b"\xff"
    assert reader.read_sequence() == b"ab"
    reader.expect_end()


def test_bounded_sequence_limits():
    """Garantiza que las secuencias acotadas respeten su límite al leer y escribir.

    Returns:
        None: Se esperan errores de serialización y deserialización.
    """
    with pytest.raises(SerializationError):
        CdrWriter().write_sequence(b"\x00" * 33, bound=32)
    with pytest.raises(DeserializationError):
        CdrReader(b"\x00\x00\x00\x21" + b"\x00" * 33).read_sequence(bound=32)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x00\x00",
        b"\x00\x00\x00\x04abc",
        b"\xff\xff\xff\xff",
    ],
)
def test_truncated_input(data):
    """Comprueba que los búferes truncados fallen sin devolver datos parciales.

    Args:
        data (bytes): Búfer incompleto.

    Returns:
        None: Se espera DeserializationError.
    """
    with pytest.raises(DeserializationError):
        CdrReader(data).read_sequence()


def test_trailing_bytes_and_ranges():
    """Valida la detección de bytes sobrantes y de enteros fuera de rango.

    Returns:
        None: Las aserciones usan pytest.raises.
    """
    reader = CdrReader(b"\x00\x00\x00\x00\x01")
    reader.read_uint32()
    assert reader.remaining == 1
    with pytest.raises(DeserializationError):
        reader.expect_end()
    with pytest.raises(SerializationError):
        CdrWriter().write_uint32(-1)
    with pytest.raises(SerializationError):
        CdrWriter().write_octets(b"\x00" * 3, 4)
