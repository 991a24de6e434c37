"""did:btc1 resolver.

Identifiers are parsed and dispatched by type. Reading the beacon history that
backs a did:btc1 document is not implemented, so both handlers report the DID
as not found.
"""

import logging
import re
from typing import Mapping, Pattern

from ...did.error import InvalidIdentifierError
from ...did.identifier import Btc1Identifier, IdType, parse_identifier
from ...wallet.did_method import BTC1
from ..base import BaseDIDResolver, DIDNotFound, InvalidDIDError, ResolverType

LOGGER = logging.getLogger(__name__)


class Btc1DIDResolver(BaseDIDResolver):
    """did:btc1 resolver implementation."""

    def __init__(self):
        """Initialize Btc1 Resolver."""
        super().__init__(ResolverType.NATIVE)
        self._handlers = {
            IdType.DETERMINISTIC: self._resolve_deterministic,
            IdType.SIDECAR: self._resolve_sidecar,
        }

    @property
    def supported_did_regex(self) -> Pattern:
        """Return supported_did_regex of did:btc1 Resolver."""
        return re.compile(rf"^did:{BTC1.method_name}:.+$")

    async def _resolve(self, did: str, options: Mapping) -> dict:
        """Resolve a did:btc1 DID."""
        try:
            identifier = parse_identifier(did)
        except InvalidIdentifierError as err:
            raise InvalidDIDError(err.message) from err

        LOGGER.debug(
            "Dispatching %s identifier %s (version %s)",
            identifier.id_type.type_name,
            did,
            identifier.version,
        )
        return await self._handlers[identifier.id_type](identifier, options)

    async def _resolve_deterministic(
        self, identifier: Btc1Identifier, options: Mapping
    ) -> dict:
        raise DIDNotFound(
            f"Deterministic resolution of {identifier.did} is not implemented"
        )

    async def _resolve_sidecar(
        self, identifier: Btc1Identifier, options: Mapping
    ) -> dict:
        raise DIDNotFound(f"Sidecar resolution of {identifier.did} is not implemented")
