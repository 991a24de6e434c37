"""Selection of the verification method used to sign for a did:btc1 DID."""

import logging
from typing import Mapping, Optional, Union

from pydid import DID, DIDError

from ..wallet.did_method import BTC1
from .error import MethodNotSupportedError, NoSigningKeyError

LOGGER = logging.getLogger(__name__)


def extract_fragment(value: Union[str, Mapping, None]) -> Optional[str]:
    """Return the fragment of a DID URL or relative reference.

    An embedded verification method is reduced to its `id`. A value without `#`
    is returned as is.
    """
    if isinstance(value, Mapping):
        value = value.get("id")
    if not isinstance(value, str) or not value:
        return None
    return value.rsplit("#", 1)[-1] or None


def _document_method(did_document: Mapping) -> Optional[str]:
    try:
        return DID(did_document.get("id")).method
    except (DIDError, TypeError):
        return None


def get_signing_method(did_document: Mapping, method_id: str = None) -> dict:
    """Find the verification method a signer should use.

    Args:
        did_document: a resolved did:btc1 DID document, left unchanged
        method_id: id or fragment of the wanted method; when omitted, the first
            `assertionMethod` entry is used

    Returns:
        The matching verification method

    Raises:
        MethodNotSupportedError: the document id is not a did:btc1 DID
        NoSigningKeyError: no method matches or the match carries no public JWK

    """
    method = _document_method(did_document)
    if method != BTC1.method_name:
        raise MethodNotSupportedError(f"Method not supported: {method}")

    if method_id:
        target = extract_fragment(method_id)
    else:
        assertion_methods = did_document.get("assertionMethod") or []
        target = extract_fragment(assertion_methods[0]) if assertion_methods else None

    LOGGER.debug("Looking up signing method %s", target)
    verification_method = next(
        (
            vm
            for vm in did_document.get("verificationMethod") or []
            if target and extract_fragment(vm) == target
        ),
        None,
    )
    if not (verification_method and verification_method.get("publicKeyJwk")):
        raise NoSigningKeyError(
            "A verification method intended for signing could not be determined "
            "from the DID Document"
        )
    return verification_method
