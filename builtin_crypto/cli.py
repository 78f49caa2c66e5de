# --------------------------------------------------------------
# File: cli.py
# Description: Herramienta de inspección de material de claves y tramas del plugin.
# --------------------------------------------------------------
"""CLI ``builtin-crypto``: decodifica estructuras hexadecimales y muestra JSON."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Optional

from pydantic import ValidationError

from builtin_crypto import config
from builtin_crypto.builtin_key import BuiltinKey
from builtin_crypto.errors import SecurityError
from builtin_crypto.header_footer import parse_footer, parse_header
from builtin_crypto.key_material import KeyMaterial, decode_wire
from builtin_crypto.key_material_seq import decode_seq_wire
from builtin_crypto.submessage_elements import (
    CryptoFooter,
    CryptoHeader,
    CryptoTransformIdentifier,
)


def _hex(value: str) -> bytes:
    try:
        return bytes.fromhex(value.replace(":", "").replace(" ", ""))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid hex string: {value!r}") from exc


def _key(key: BuiltinKey, show_keys: bool) -> str:
    return key.as_bytes().hex() if show_keys else repr(key)


def _describe_key_material(km: KeyMaterial, show_keys: bool) -> Dict[str, Any]:
    return {
        "transformation_kind": km.transformation_kind.name,
        "master_salt": km.master_salt.hex() if show_keys else f"<{len(km.master_salt)} bytes>",
        "sender_key_id": km.sender_key_id.hex(),
        "master_sender_key": _key(km.master_sender_key, show_keys),
        "receiver_specific_key_id": km.receiver_specific_key_id.hex(),
        "master_receiver_specific_key": _key(km.master_receiver_specific_key, show_keys),
    }


def _cmd_keymat(args: argparse.Namespace) -> Dict[str, Any]:
    return _describe_key_material(decode_wire(args.data), args.show_keys)


def _cmd_keymat_seq(args: argparse.Namespace) -> Dict[str, Any]:
    sequence = decode_seq_wire(args.data)
    return {
        "unprotected": sequence.is_unprotected,
        "key_materials": [
            _describe_key_material(km, args.show_keys) for km in sequence.to_wire_list()
        ],
    }


def _cmd_header(args: argparse.Namespace) -> Dict[str, Any]:
    header = parse_header(
        CryptoHeader(
            transformation_id=CryptoTransformIdentifier(
                transformation_kind=args.kind, transformation_key_id=args.key_id
            ),
            plugin_crypto_header_extra=args.extra,
        )
    )
    return {
        "transformation_kind": header.transform_identifier.transformation_kind.name,
        "transformation_key_id": header.transform_identifier.transformation_key_id.hex(),
        "session_id": header.session_id.hex(),
        "initialization_vector_suffix": header.initialization_vector_suffix.hex(),
    }


def _cmd_footer(args: argparse.Namespace) -> Dict[str, Any]:
    footer = parse_footer(CryptoFooter(data=args.data))
    return {
        "common_mac": footer.common_mac.hex(),
        "receiver_specific_macs": [
            {"receiver_mac_key_id": m.receiver_mac_key_id.hex(), "receiver_mac": m.receiver_mac.hex()}
            for m in footer.receiver_specific_macs
        ],
    }


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="builtin-crypto",
        description="Inspect DDS:Crypto:AES_GCM_GMAC key material and framing.",
    )
    ap.add_argument("--log-level", default=config.LOG_LEVEL)
    ap.add_argument("--show-keys", action="store_true", help="Print raw keys and salt in hex")

    sub = ap.add_subparsers(dest="cmd", required=True)

    p_km = sub.add_parser("keymat", help="Decode a CDR KeyMaterial_AES_GCM_GMAC")
    p_km.add_argument("data", type=_hex)
    p_km.set_defaults(func=_cmd_keymat)

    p_seq = sub.add_parser("keymat-seq", help="Decode a CDR sequence of key materials")
    p_seq.add_argument("data", type=_hex)
    p_seq.set_defaults(func=_cmd_keymat_seq)

    p_hdr = sub.add_parser("header", help="Parse a crypto header")
    p_hdr.add_argument("kind", type=_hex, help="4-byte transformation kind")
    p_hdr.add_argument("key_id", type=_hex, help="4-byte transformation key id")
    p_hdr.add_argument("extra", type=_hex, help="plugin_crypto_header_extra")
    p_hdr.set_defaults(func=_cmd_header)

    p_ftr = sub.add_parser("footer", help="Parse a crypto footer")
    p_ftr.add_argument("data", type=_hex)
    p_ftr.set_defaults(func=_cmd_footer)
    return ap


def main(argv: Optional[list] = None) -> int:
    args = _build_parser().parse_args(argv)
    config.configure_logging(args.log_level.upper())
    try:
        result = args.func(args)
    except SecurityError as exc:
        print(f"{type(exc).__name__}: {exc.msg}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0
