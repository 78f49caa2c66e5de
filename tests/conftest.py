# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas de material de claves y configuración.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

from builtin_crypto.builtin_key import BuiltinKey
from builtin_crypto.key_material import KeyMaterial
from builtin_crypto.transformation_kind import BuiltinTransformationKind


@pytest.fixture
def aes256_key_material() -> KeyMaterial:
    """Material AES256-GCM común, sin clave específica de receptor.

    Returns:
        KeyMaterial: Material con sal 0x01, clave 0xAA e id de emisor 7.
    """
    return KeyMaterial(
        transformation_kind=BuiltinTransformationKind.AES256_GCM,
        master_salt=b"\x01" * 32,
        sender_key_id=b"\x00\x00\x00\x07",
        master_sender_key=BuiltinKey.from_bytes(32, b"\xaa" * 32),
        receiver_specific_key_id=b"\x00\x00\x00\x00",
        master_receiver_specific_key=BuiltinKey.from_bytes(32, b"\x00" * 32),
    )


@pytest.fixture
def aes128_key_material() -> KeyMaterial:
    """Material AES128-GMAC con una sal de longitud no alineada.

    Returns:
        KeyMaterial: Material con sal de 5 bytes y claves de 16 bytes.
    """
    return KeyMaterial(
        transformation_kind=BuiltinTransformationKind.AES128_GMAC,
        master_salt=b"\x10\x20\x30\x40\x50",
        sender_key_id=b"\x01\x02\x03\x04",
        master_sender_key=BuiltinKey.from_bytes(16, bytes(range(16))),
        receiver_specific_key_id=b"\x0a\x0b\x0c\x0d",
        master_receiver_specific_key=BuiltinKey.from_bytes(16, bytes(range(16, 32))),
    )


@pytest.fixture
def reload_config(monkeypatch) -> Iterator:
    """Recarga builtin_crypto.config tras ajustar variables de entorno.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para modificar el entorno.

    Returns:
        Iterator[Callable[..., ModuleType]]: Función que fija variables y
        devuelve el módulo recargado; al terminar se restaura el estado.
    """
    import builtin_crypto.config as config_module

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config_module)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config_module)
