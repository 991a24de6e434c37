"""Create command for generating a new did:btc1 identifier."""

import asyncio
import json
import sys
from typing import Sequence

from configargparse import ArgumentParser

from ..config import argparse as arg
from ..config.settings import Settings
from ..config.util import common_config
from ..core.error import BaseError
from ..did.btc1 import DIDBtc1
from ..did.models import CreateOptions, CreateResult

from . import PROG


def init_argument_parser(parser: ArgumentParser):
    """Initialize an argument parser with the module's arguments."""
    return arg.load_argument_groups(parser, *arg.group.get_registered(arg.CAT_CREATE))


async def create(settings: Settings) -> CreateResult:
    """Create a DID from `btc1.*` settings."""
    return await DIDBtc1().create(CreateOptions.from_settings(settings))


def execute(argv: Sequence[str] = None):
    """Entrypoint."""
    parser = arg.create_argument_parser(prog=PROG)
    parser.prog += " create"
    get_settings = init_argument_parser(parser)
    args = parser.parse_args(argv)
    settings = Settings.with_defaults(get_settings(args))
    common_config(settings)

    try:
        result = asyncio.run(create(settings))
    except BaseError as err:
        print(err.roll_up, file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result.serialize(), indent=2))


def main():
    """Execute the main line."""
    if __name__ == "__main__":
        execute()


main()
