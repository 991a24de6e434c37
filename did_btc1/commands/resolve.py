"""Resolve command for looking up a did:btc1 identifier."""

import asyncio
import json
import sys
from typing import Sequence

from configargparse import ArgumentParser

from ..config import argparse as arg
from ..config.settings import Settings
from ..config.util import common_config
from ..did.btc1 import DIDBtc1
from ..resolver.base import DidResolutionResult

from . import PROG


def init_argument_parser(parser: ArgumentParser):
    """Initialize an argument parser with the module's arguments."""
    parser.add_argument("did", metavar="<did>", help="The DID to resolve")
    return arg.load_argument_groups(
        parser, *arg.group.get_registered(arg.CAT_RESOLVE)
    )


async def resolve(did: str, settings: Settings) -> DidResolutionResult:
    """Resolve a DID with the configured timeout."""
    method = DIDBtc1(timeout=settings.get_int("resolver.timeout"))
    return await method.resolve(did)


def execute(argv: Sequence[str] = None):
    """Entrypoint.

    The resolution result is printed in every case; the exit status is 1 when
    it reports an error.
    """
    parser = arg.create_argument_parser(prog=PROG)
    parser.prog += " resolve"
    get_settings = init_argument_parser(parser)
    args = parser.parse_args(argv)
    settings = Settings.with_defaults(get_settings(args))
    common_config(settings)

    result = asyncio.run(resolve(args.did, settings))
    print(json.dumps(result.serialize(), indent=2))
    if result.error:
        sys.exit(1)


def main():
    """Execute the main line."""
    if __name__ == "__main__":
        execute()


main()
