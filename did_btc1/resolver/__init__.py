"""Interfaces and base classes for DID Resolution."""

import logging

from .default.btc1 import Btc1DIDResolver
from .did_resolver import DIDResolver

LOGGER = logging.getLogger(__name__)


def default_resolver() -> DIDResolver:
    """Create a resolver registry with the default resolvers registered."""
    registry = DIDResolver()
    registry.register_resolver(Btc1DIDResolver())
    LOGGER.debug("Registered default resolvers: %s", registry.resolvers)
    return registry
