"""Assembly of did:btc1 DID documents."""

import copy
from typing import Mapping, Optional, Sequence

from ..bitcoin.addresses import beacon_addresses, bitcoin_uri
from ..bitcoin.network import Network

DID_V1_CONTEXT_URL = "https://www.w3.org/ns/did/v1"
DID_BTC1_CONTEXT_URL = "https://github.com/dcdpr/did-btc1"

INITIAL_KEY_ID = "#initialKey"
JSON_WEB_KEY_TYPE = "JsonWebKey"
SINGLETON_BEACON_TYPE = "SingletonBeacon"

VERIFICATION_RELATIONSHIPS = (
    "authentication",
    "assertionMethod",
    "capabilityInvocation",
    "capabilityDelegation",
)


def default_services(public_key: bytes, network: Network) -> list:
    """One singleton beacon service per address encoding of the key."""
    addresses = beacon_addresses(public_key, network)
    return [
        {
            "id": f"#initial_{address_type}",
            "type": SINGLETON_BEACON_TYPE,
            "serviceEndpoint": bitcoin_uri(address),
        }
        for address_type, address in addresses._asdict().items()
    ]


def assemble_intermediate_document(
    public_key: bytes,
    network: Network,
    services: Optional[Sequence[Mapping]] = None,
) -> dict:
    """Build a DID document without `id` and `verificationMethod`.

    Every verification relationship references the single initial key. When no
    services are given, the key's p2pkh, p2wpkh and p2tr addresses on `network`
    become singleton beacons.
    """
    document = {"@context": [DID_V1_CONTEXT_URL, DID_BTC1_CONTEXT_URL]}
    for relationship in VERIFICATION_RELATIONSHIPS:
        document[relationship] = [INITIAL_KEY_ID]
    document["service"] = (
        [dict(service) for service in services]
        if services
        else default_services(public_key, network)
    )
    return document


def finalize_document(intermediate: Mapping, did: str, jwk: Mapping) -> dict:
    """Merge the DID and its initial verification method into a new document."""
    document = copy.deepcopy(dict(intermediate))
    document["id"] = did
    document["verificationMethod"] = [
        {
            "id": INITIAL_KEY_ID,
            "type": JSON_WEB_KEY_TYPE,
            "controller": did,
            "publicKeyJwk": dict(jwk),
        }
    ]
    return document
