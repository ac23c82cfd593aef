"""Command-line arguments."""

from __future__ import annotations

import argparse

from . import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfaccess",
        description=(
            "Clean Cloudflare IP Access rules. Can clean all rules, rules with a "
            "given prefix, a specific target (IP, CIDR or ASN), or rules by note."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--token",
        default="",
        help="Cloudflare API token (discouraged, use CLOUDFLARE_API_TOKEN env var instead)",
    )
    parser.add_argument("--zone-id", default="", help="Cloudflare Zone ID")
    parser.add_argument(
        "--zone-name",
        default="",
        help="Cloudflare Zone name (alternative to --zone-id)",
    )
    parser.add_argument(
        "--account-id",
        default="",
        help="Cloudflare Account ID, only needed for account-scoped rules",
    )
    parser.add_argument("--config", help="INI file with a [cloudflare] section")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="log_level",
        action="store_const",
        const="DEBUG",
        help="Shortcut for --log-level DEBUG",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    clean = commands.add_parser("clean", help="Clean IP Access rules")
    clean.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without actually deleting",
    )
    targets = clean.add_subparsers(dest="selector", metavar="SELECTOR")
    targets.required = True

    targets.add_parser("all", help="Clean all IP Access rules in the zone")

    prefix = targets.add_parser("prefix", help="Clean IP Access rules whose target starts with PREFIX")
    prefix.add_argument("value", metavar="PREFIX")

    target = targets.add_parser("target", help="Clean IP Access rules for one target (IP, CIDR or ASN)")
    target.add_argument("value", metavar="TARGET")

    description = targets.add_parser(
        "description", help="Clean IP Access rules whose notes contain DESCRIPTION"
    )
    description.add_argument("value", metavar="DESCRIPTION")

    return parser


def parse_args(argv=None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
