"""Encoding and parsing of did:btc1 identifiers.

An identifier has the form `did:btc1[:<version>:<tag>]:<bech32 payload>`.
Version 1 identifiers omit the version and tag segment. The tag and the bech32
human-readable part name the identifier type:

* `k1` / `k`: deterministic, the payload is the compressed public key;
* `x1` / `x`: sidecar, the payload is the CID of the intermediate document.
"""

import logging
import re
from enum import Enum
from typing import Mapping, NamedTuple, Optional

from ..wallet.did_method import BTC1
from .document import finalize_document
from .encoding import bech32_decode_bytes, bech32_encode_bytes, document_cid
from .error import InvalidIdentifierError
from .models import CreateResult

LOGGER = logging.getLogger(__name__)

DEFAULT_VERSION = 1

DID_BTC1_PATTERN = re.compile(
    rf"^did:{BTC1.method_name}:(?:(?P<version>[1-9][0-9]*):(?P<tag>[a-z][0-9]):)?"
    r"(?P<msid>[a-z0-9]+)$"
)

IdTypeSpec = NamedTuple("IdTypeSpec", [("type_name", str), ("tag", str), ("hrp", str)])


class IdType(Enum):
    """Identifier types with their DID tag and bech32 human-readable part."""

    DETERMINISTIC = IdTypeSpec("deterministic", "k1", "k")
    SIDECAR = IdTypeSpec("sidecar", "x1", "x")

    @property
    def type_name(self) -> str:
        """Getter for the name used in creation options."""
        return self.value.type_name

    @property
    def tag(self) -> str:
        """Getter for the tag in versioned identifiers."""
        return self.value.tag

    @property
    def hrp(self) -> str:
        """Getter for the bech32 human-readable part."""
        return self.value.hrp

    @classmethod
    def from_tag(cls, tag: str) -> Optional["IdType"]:
        """Get IdType instance from a DID tag. Returns None if not found."""
        return next((id_type for id_type in IdType if id_type.tag == tag), None)

    @classmethod
    def from_hrp(cls, hrp: str) -> Optional["IdType"]:
        """Get IdType instance from a bech32 prefix. Returns None if not found."""
        return next((id_type for id_type in IdType if id_type.hrp == hrp), None)


class Btc1Identifier(NamedTuple):
    """A parsed did:btc1 identifier."""

    did: str
    version: int
    id_type: IdType
    payload: bytes

    @property
    def hrp(self) -> str:
        """Getter for the bech32 human-readable part of the payload."""
        return self.id_type.hrp


def did_prefix(version: int, id_type: IdType) -> str:
    """DID prefix up to the method-specific id."""
    if version == DEFAULT_VERSION:
        return f"did:{BTC1.method_name}"
    return f"did:{BTC1.method_name}:{version}:{id_type.tag}"


def encode_identifier(version: int, id_type: IdType, payload: bytes) -> str:
    """Encode a payload into a did:btc1 identifier."""
    method_specific_id = bech32_encode_bytes(id_type.hrp, payload)
    return f"{did_prefix(version, id_type)}:{method_specific_id}"


def encode_deterministic(
    intermediate: Mapping, version: int, public_key: bytes, jwk: Mapping
) -> CreateResult:
    """Create a DID and document whose identifier encodes the public key."""
    did = encode_identifier(version, IdType.DETERMINISTIC, public_key)
    LOGGER.debug("Encoded deterministic identifier %s", did)
    return CreateResult(did=did, did_document=finalize_document(intermediate, did, jwk))


def encode_sidecar(intermediate: Mapping, version: int, jwk: Mapping) -> CreateResult:
    """Create a DID and document whose identifier encodes the document's CID."""
    cid = document_cid(intermediate)
    did = encode_identifier(version, IdType.SIDECAR, bytes(cid))
    LOGGER.debug("Encoded sidecar identifier %s for CID %s", did, cid)
    return CreateResult(did=did, did_document=finalize_document(intermediate, did, jwk))


def parse_identifier(did: str) -> Btc1Identifier:
    """Parse a did:btc1 identifier.

    Raises:
        InvalidIdentifierError: the string is not a well formed did:btc1 DID

    """
    match = DID_BTC1_PATTERN.match(did) if isinstance(did, str) else None
    if not match:
        raise InvalidIdentifierError(f"Invalid did:btc1 identifier: {did}")

    try:
        hrp, payload = bech32_decode_bytes(match.group("msid"))
    except ValueError as err:
        raise InvalidIdentifierError(f"Invalid did:btc1 identifier: {did}") from err

    id_type = IdType.from_hrp(hrp)
    if not id_type:
        raise InvalidIdentifierError(f"Unknown identifier type prefix: {hrp}")

    tag = match.group("tag")
    if tag and IdType.from_tag(tag) is not id_type:
        raise InvalidIdentifierError(
            f"Identifier tag {tag} does not match payload prefix {hrp}"
        )

    version = int(match.group("version") or DEFAULT_VERSION)
    return Btc1Identifier(did=did, version=version, id_type=id_type, payload=payload)
