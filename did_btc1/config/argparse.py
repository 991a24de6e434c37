"""Command line option parsing."""

import abc
import json
from typing import Type

from configargparse import ArgumentParser, Namespace, YAMLConfigFileParser

from ..bitcoin.network import Network
from .error import ArgsParseError
from .util import BoundedInt

CAT_CREATE = "create"
CAT_RESOLVE = "resolve"

NETWORK_CHOICES = tuple(Network.names())
TYPE_CHOICES = ("deterministic", "sidecar")


class ArgumentGroup(abc.ABC):
    """A class representing a group of related command line arguments."""

    GROUP_NAME = None

    @abc.abstractmethod
    def add_arguments(self, parser: ArgumentParser):
        """Add arguments to the provided argument parser."""

    @abc.abstractmethod
    def get_settings(self, args: Namespace) -> dict:
        """Extract settings from the parsed arguments."""


class group:
    """Decorator for registering argument groups."""

    _registered = []

    def __init__(self, *categories):
        """Initialize the decorator."""
        self.categories = tuple(categories)

    def __call__(self, group_cls: ArgumentGroup):
        """Register a class in the given categories."""
        setattr(group_cls, "CATEGORIES", self.categories)
        self._registered.append((self.categories, group_cls))
        return group_cls

    @classmethod
    def get_registered(cls, category: str = None):
        """Fetch the set of registered classes in a category."""
        return (
            grp
            for (cats, grp) in cls._registered
            if category is None or category in cats
        )


def create_argument_parser(*, prog: str = None):
    """Create an instance of an arg parser, force yaml format for external config."""
    return ArgumentParser(config_file_parser_class=YAMLConfigFileParser, prog=prog)


def load_argument_groups(parser: ArgumentParser, *groups: Type[ArgumentGroup]):
    """
    Load a set of argument groups into a parser.

    Returns:
        A callable to convert loaded arguments into a settings dictionary

    """
    group_inst = []
    for group in groups:
        g_parser = parser.add_argument_group(group.GROUP_NAME)
        inst = group()
        inst.add_arguments(g_parser)
        group_inst.append(inst)

    def get_settings(args: Namespace):
        settings = {}
        try:
            for group in group_inst:
                settings.update(group.get_settings(args))
        except ArgsParseError as e:
            parser.print_help()
            raise e
        return settings

    return get_settings


def _load_json_list(path: str, label: str) -> list:
    try:
        with open(path, encoding="utf-8") as json_file:
            value = json.load(json_file)
    except (OSError, json.JSONDecodeError) as err:
        raise ArgsParseError(f"Unable to read {label} file {path}") from err
    if not isinstance(value, list):
        raise ArgsParseError(f"The {label} file {path} must contain a JSON array")
    return value


@group(CAT_CREATE)
class CreateGroup(ArgumentGroup):
    """DID creation settings."""

    GROUP_NAME = "Create"

    def add_arguments(self, parser: ArgumentParser):
        """Add creation-specific command line arguments to the parser."""
        parser.add_argument(
            "--network",
            type=str,
            metavar="<network>",
            env_var="BTC1_NETWORK",
            help=(
                "Bitcoin network the beacon addresses are generated for. One of "
                f"{', '.join(NETWORK_CHOICES)}. Default: mainnet."
            ),
        )
        parser.add_argument(
            "--version",
            dest="did_version",
            type=BoundedInt(min=1),
            metavar="<version>",
            env_var="BTC1_VERSION",
            help=(
                "did:btc1 version number. Version 1 omits the version and "
                "identifier type segment from the DID. Default: 1."
            ),
        )
        parser.add_argument(
            "--type",
            dest="did_type",
            type=str,
            metavar="<type>",
            env_var="BTC1_TYPE",
            help=(
                f"Identifier type, one of {', '.join(TYPE_CHOICES)}. Deterministic "
                "identifiers encode the public key, sidecar identifiers encode a "
                "content identifier of the initial DID document. "
                "Default: deterministic."
            ),
        )
        parser.add_argument(
            "--services-file",
            type=str,
            metavar="<path>",
            env_var="BTC1_SERVICES_FILE",
            help=(
                "JSON file holding an array of services to publish instead of the "
                "three default singleton beacons."
            ),
        )
        parser.add_argument(
            "--verification-methods-file",
            type=str,
            metavar="<path>",
            env_var="BTC1_VERIFICATION_METHODS_FILE",
            help=(
                "JSON file holding an array of verification method requests, each "
                "with an 'algorithm' and an optional 'id'."
            ),
        )

    def get_settings(self, args: Namespace) -> dict:
        """Extract creation settings."""
        settings = {}
        if args.network:
            settings["btc1.network"] = args.network
        if args.did_version is not None:
            settings["btc1.version"] = args.did_version
        if args.did_type:
            settings["btc1.type"] = args.did_type
        if args.services_file:
            settings["btc1.services"] = _load_json_list(
                args.services_file, "services"
            )
        if args.verification_methods_file:
            settings["btc1.verification_methods"] = _load_json_list(
                args.verification_methods_file, "verification methods"
            )
        return settings


@group(CAT_RESOLVE)
class ResolverGroup(ArgumentGroup):
    """DID resolution settings."""

    GROUP_NAME = "Resolver"

    def add_arguments(self, parser: ArgumentParser):
        """Add resolver-specific command line arguments to the parser."""
        parser.add_argument(
            "--resolver-timeout",
            type=BoundedInt(min=1),
            metavar="<seconds>",
            env_var="BTC1_RESOLVER_TIMEOUT",
            help="Seconds to wait for a resolver before giving up. Default: 30.",
        )

    def get_settings(self, args: Namespace) -> dict:
        """Extract resolver settings."""
        settings = {}
        if args.resolver_timeout is not None:
            settings["resolver.timeout"] = args.resolver_timeout
        return settings


@group(CAT_CREATE, CAT_RESOLVE)
class GeneralGroup(ArgumentGroup):
    """General settings."""

    GROUP_NAME = "General"

    def add_arguments(self, parser: ArgumentParser):
        """Add general command line arguments to the parser."""
        parser.add_argument(
            "--arg-file",
            is_config_file=True,
            help=(
                "Load did-btc1 arguments from the specified file. Note that "
                "this file *must* be in YAML format."
            ),
        )

    def get_settings(self, args: Namespace) -> dict:
        """Values from the argument file are applied to their own options."""
        return {}


@group(CAT_CREATE, CAT_RESOLVE)
class LoggingGroup(ArgumentGroup):
    """Logging settings."""

    GROUP_NAME = "Logging"

    def add_arguments(self, parser: ArgumentParser):
        """Add logging-specific command line arguments to the parser."""
        parser.add_argument(
            "--log-config",
            dest="log_config",
            type=str,
            metavar="<path-to-config>",
            default=None,
            env_var="BTC1_LOG_CONFIG",
            help="Specifies a custom logging configuration file",
        )
        parser.add_argument(
            "--log-file",
            dest="log_file",
            type=str,
            metavar="<log-file>",
            default=None,
            env_var="BTC1_LOG_FILE",
            help=(
                "Overrides the output destination for the root logger (as defined "
                "by the log config file) to the named <log-file>."
            ),
        )
        parser.add_argument(
            "--log-level",
            dest="log_level",
            type=str,
            metavar="<log-level>",
            default=None,
            env_var="BTC1_LOG_LEVEL",
            help=(
                "Specifies a custom logging level as one of: "
                "('debug', 'info', 'warning', 'error', 'critical')"
            ),
        )
        parser.add_argument(
            "--log-json",
            action="store_true",
            env_var="BTC1_LOG_JSON",
            help="Format log records as JSON objects.",
        )

    def get_settings(self, args: Namespace) -> dict:
        """Extract logging settings."""
        settings = {}
        if args.log_config:
            settings["log.config"] = args.log_config
        if args.log_file:
            settings["log.file"] = args.log_file
        if args.log_level:
            settings["log.level"] = args.log_level
        if args.log_json:
            settings["log.json"] = True
        return settings
