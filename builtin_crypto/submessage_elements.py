# --------------------------------------------------------------
# File: submessage_elements.py
# Description: Elementos genéricos de submensaje RTPS usados por la capa de cifrado.
# --------------------------------------------------------------
"""Elementos tal y como los entrega la capa de submensajes, sin interpretar."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBytes

FourBytes = Annotated[StrictBytes, Field(min_length=4, max_length=4)]


class CryptoTransformIdentifier(BaseModel):
    """Par (tipo de transformación, id de clave) en bruto."""

    model_config = ConfigDict(frozen=True)

    transformation_kind: FourBytes
    transformation_key_id: FourBytes


class CryptoHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    transformation_id: CryptoTransformIdentifier
    plugin_crypto_header_extra: StrictBytes = b""


class CryptoContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: StrictBytes = b""


class CryptoFooter(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: StrictBytes = b""
