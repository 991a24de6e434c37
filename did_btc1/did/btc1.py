"""The did:btc1 method: creation, signing method lookup and resolution."""

import logging
from typing import Mapping, Optional

from ..bitcoin.network import DEFAULT_NETWORK, Network
from ..resolver import default_resolver
from ..resolver.base import DidResolutionResult
from ..resolver.did_resolver import DIDResolver
from ..wallet.did_method import BTC1
from ..wallet.jwk import jwk_from_key_pair
from ..wallet.keys import derive_key_pair, generate_mnemonic
from . import signing
from .document import assemble_intermediate_document
from .identifier import DEFAULT_VERSION, encode_deterministic, encode_sidecar
from .models import CreateResult, load_create_options
from .validation import CreateParametersValidation

LOGGER = logging.getLogger(__name__)


class DIDBtc1:
    """Operations of the did:btc1 DID method.

    Instances hold no per-call state; every operation builds its values fresh.
    """

    method_name = BTC1.method_name

    def __init__(self, resolver: DIDResolver = None, timeout: int = None):
        """Initialize the method.

        Args:
            resolver: resolver registry used by `resolve`, defaults to one holding
                the did:btc1 resolver
            timeout: seconds allowed per resolution, defaults to the registry's

        """
        self.resolver = resolver or default_resolver()
        self.timeout = timeout
        self.validation = CreateParametersValidation(BTC1)

    async def create(self, options: Optional[Mapping] = None) -> CreateResult:
        """Create a new did:btc1 DID and its initial DID document.

        Args:
            options: creation options (`network`, `version`, `type`,
                `verificationMethods`, `services`), never modified

        Returns:
            The DID, its document and, in deterministic mode, the mnemonic the
            identity key was derived from

        Raises:
            DIDCreationError: the options were rejected, no key was generated
            KeyDerivationError: no key pair could be derived

        """
        create_options = load_create_options(options)
        self.validation.validate(create_options)

        network = Network.from_name(create_options.network) or DEFAULT_NETWORK
        version = create_options.version or DEFAULT_VERSION

        mnemonic = generate_mnemonic()
        key_pair = derive_key_pair(mnemonic, network)
        jwk = jwk_from_key_pair(key_pair.public_key, key_pair.private_key)
        intermediate = assemble_intermediate_document(
            key_pair.public_key, network, create_options.services
        )

        if create_options.is_sidecar:
            LOGGER.debug("Creating sidecar did:btc1 on %s", network.network_name)
            return self.create_sidecar(intermediate, version, jwk)

        LOGGER.debug("Creating deterministic did:btc1 on %s", network.network_name)
        return self.create_deterministic(
            intermediate, version, key_pair.public_key, jwk
        )._replace(mnemonic=mnemonic)

    @staticmethod
    def create_deterministic(
        intermediate: Mapping, version: int, public_key: bytes, jwk: Mapping
    ) -> CreateResult:
        """Encode a DID from the public key of an intermediate document."""
        return encode_deterministic(intermediate, version, public_key, jwk)

    @staticmethod
    def create_sidecar(
        intermediate: Mapping, version: int, jwk: Mapping
    ) -> CreateResult:
        """Encode a DID from the content identifier of an intermediate document."""
        return encode_sidecar(intermediate, version, jwk)

    async def get_signing_method(
        self, did_document: Mapping, method_id: str = None
    ) -> dict:
        """Return the verification method to sign with for a did:btc1 document."""
        return signing.get_signing_method(did_document, method_id)

    async def resolve(
        self, did: str, options: Optional[Mapping] = None
    ) -> DidResolutionResult:
        """Resolve a DID; failures are reported in the result metadata."""
        return await self.resolver.resolve_with_metadata(
            did, options, timeout=self.timeout
        )
