import re

import pytest

from ...bitcoin.network import Network
from ...wallet.jwk import jwk_from_key_pair
from ..document import assemble_intermediate_document
from ..encoding import bech32_encode_bytes, document_cid
from ..error import InvalidIdentifierError
from .. import identifier as test_module
from ..identifier import IdType

DID_V1_RE = re.compile(r"^did:btc1:[a-z0-9]+$")


@pytest.fixture
def intermediate(public_key):
    yield assemble_intermediate_document(public_key, Network.MAINNET)


@pytest.fixture
def jwk(key_pair):
    yield jwk_from_key_pair(key_pair.public_key, key_pair.private_key)


def test_id_type_lookup():
    assert IdType.from_tag("k1") is IdType.DETERMINISTIC
    assert IdType.from_tag("x1") is IdType.SIDECAR
    assert IdType.from_tag("z1") is None
    assert IdType.from_hrp("k") is IdType.DETERMINISTIC
    assert IdType.from_hrp("x") is IdType.SIDECAR
    assert IdType.from_hrp("bc") is None
    assert IdType.SIDECAR.type_name == "sidecar"


def test_did_prefix():
    assert test_module.did_prefix(1, IdType.DETERMINISTIC) == "did:btc1"
    assert test_module.did_prefix(1, IdType.SIDECAR) == "did:btc1"
    assert test_module.did_prefix(2, IdType.DETERMINISTIC) == "did:btc1:2:k1"
    assert test_module.did_prefix(7, IdType.SIDECAR) == "did:btc1:7:x1"


def test_encode_deterministic(intermediate, public_key, jwk):
    result = test_module.encode_deterministic(intermediate, 1, public_key, jwk)

    assert DID_V1_RE.match(result.did)
    assert result.did == f"did:btc1:{bech32_encode_bytes('k', public_key)}"
    assert result.mnemonic is None
    assert result.did_document["id"] == result.did
    assert result.did_document["verificationMethod"][0]["controller"] == result.did
    assert "id" not in intermediate


def test_encode_deterministic_idempotent(intermediate, public_key, jwk):
    first = test_module.encode_deterministic(intermediate, 2, public_key, jwk)
    second = test_module.encode_deterministic(intermediate, 2, public_key, jwk)

    assert first == second
    assert first.did.startswith("did:btc1:2:k1:k1")


def test_encode_sidecar(intermediate, jwk):
    result = test_module.encode_sidecar(intermediate, 1, jwk)

    assert DID_V1_RE.match(result.did)
    assert "k1" not in result.did
    assert result.did == (
        f"did:btc1:{bech32_encode_bytes('x', bytes(document_cid(intermediate)))}"
    )
    assert result.mnemonic is None


def test_encode_sidecar_idempotent(intermediate, jwk):
    first = test_module.encode_sidecar(intermediate, 3, jwk)
    second = test_module.encode_sidecar(dict(intermediate), 3, jwk)

    assert first.did == second.did
    assert first.did.startswith("did:btc1:3:x1:x1")


def test_parse_identifier_round_trip(intermediate, public_key, jwk):
    deterministic = test_module.encode_deterministic(intermediate, 1, public_key, jwk)
    parsed = test_module.parse_identifier(deterministic.did)
    assert parsed.version == 1
    assert parsed.id_type is IdType.DETERMINISTIC
    assert parsed.hrp == "k"
    assert parsed.payload == public_key

    sidecar = test_module.encode_sidecar(intermediate, 2, jwk)
    parsed = test_module.parse_identifier(sidecar.did)
    assert parsed.version == 2
    assert parsed.id_type is IdType.SIDECAR
    assert parsed.payload == bytes(document_cid(intermediate))


def test_parse_identifier_explicit_version_one():
    msid = bech32_encode_bytes("k", bytes(33))
    parsed = test_module.parse_identifier(f"did:btc1:1:k1:{msid}")
    assert parsed.version == 1
    assert parsed.id_type is IdType.DETERMINISTIC


@pytest.mark.parametrize(
    "did",
    [
        None,
        "",
        "did:btc1",
        "did:key:z6Mk",
        "did:btc1:K1QQQQ",
        "did:btc1:k1qqqqqqqq",
        "did:btc1:0:k1:k1qqqq",
        f"did:btc1:{bech32_encode_bytes('z', bytes(33))}",
        f"did:btc1:2:x1:{bech32_encode_bytes('k', bytes(33))}",
    ],
)
def test_parse_identifier_x(did):
    with pytest.raises(InvalidIdentifierError) as excinfo:
        test_module.parse_identifier(did)
    assert excinfo.value.error_code == "invalidDid"
