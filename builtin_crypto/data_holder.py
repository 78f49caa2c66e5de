# --------------------------------------------------------------
# File: data_holder.py
# Description: Contenedores genéricos de propiedades para tokens de seguridad.
# --------------------------------------------------------------
"""Modelos Pydantic del ``DataHolder`` genérico de DDS Security y sus tokens."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, StrictBytes


class Property(BaseModel):
    """Propiedad de texto con nombre.

    Attributes:
        name (str): Nombre de la propiedad.
        value (str): Valor textual.
        propagate (bool): Si la propiedad viaja por la red.

    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    propagate: bool = True


class BinaryProperty(BaseModel):
    """Propiedad binaria con nombre.

    Attributes:
        name (str): Nombre de la propiedad.
        value (bytes): Valor opaco.
        propagate (bool): Si la propiedad viaja por la red.

    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: StrictBytes
    propagate: bool = True


class DataHolder(BaseModel):
    """Bolsa de propiedades etiquetada con un ``class_id``."""

    model_config = ConfigDict(frozen=True)

    class_id: str
    properties: Tuple[Property, ...] = ()
    binary_properties: Tuple[BinaryProperty, ...] = ()


class CryptoToken(BaseModel):
    """Token criptográfico genérico intercambiado entre participantes."""

    model_config = ConfigDict(frozen=True)

    data_holder: DataHolder

    @property
    def class_id(self) -> str:
        return self.data_holder.class_id
