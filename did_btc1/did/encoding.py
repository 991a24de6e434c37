"""Byte level encodings behind did:btc1 method-specific identifiers.

Method-specific identifiers are bech32 strings (BIP-173 checksum). Sidecar
identifiers wrap a CIDv1 of the intermediate DID document: codec `json`
(0x0200), multihash `sha2-256`, computed over the canonical JSON encoding of the
document (keys sorted by code point, no insignificant whitespace, UTF-8), so
third parties can recompute it from the document alone.
"""

from typing import Mapping, Tuple

import canonicaljson
from bech32 import bech32_decode, bech32_encode, convertbits
from multiformats import CID, multihash

CID_VERSION = 1
CID_CODEC = "json"
CID_HASH = "sha2-256"


def bech32_encode_bytes(hrp: str, data: bytes) -> str:
    """Encode raw bytes as a bech32 string with the given human-readable part."""
    return bech32_encode(hrp, convertbits(data, 8, 5))


def bech32_decode_bytes(value: str) -> Tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and raw bytes.

    Raises:
        ValueError: the string is not valid bech32 or does not hold whole bytes

    """
    hrp, data = bech32_decode(value)
    if hrp is None:
        raise ValueError(f"Invalid bech32 string: {value}")
    decoded = convertbits(data, 5, 8, False)
    if decoded is None:
        raise ValueError(f"Invalid bech32 padding: {value}")
    return hrp, bytes(decoded)


def canonicalize(document: Mapping) -> bytes:
    """Canonical JSON bytes of a document."""
    return canonicaljson.encode_canonical_json(document)


def document_cid(document: Mapping) -> CID:
    """Content identifier of a document's canonical JSON bytes."""
    digest = multihash.digest(canonicalize(document), CID_HASH)
    return CID("base32", CID_VERSION, CID_CODEC, digest)
