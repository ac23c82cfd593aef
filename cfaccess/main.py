#!/usr/bin/env python3
import logging
import sys

from .cli import parse_args
from .delete import delete_rules
from .errors import CloudflareError, ConfigurationError
from .functions import (
    build_config,
    filter_by_notes,
    filter_by_prefix,
    filter_by_target,
    setup_client,
)
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

# selector -> (filter, label template)
SELECTORS = {
    "all": (None, "all rules"),
    "prefix": (filter_by_prefix, 'rules with prefix "{}"'),
    "target": (filter_by_target, 'rules targeting "{}"'),
    "description": (filter_by_notes, 'rules containing description "{}"'),
}


def clean(config, selector, value=None):
    """List the zone's rules, narrow them with the selector and delete them."""
    _, client = setup_client(config)
    rules = client.list_access_rules()

    rule_filter, label = SELECTORS[selector]
    if rule_filter is not None:
        rules = rule_filter(rules, value)
        label = label.format(value)

    return delete_rules(client, rules, dry_run=config.dry_run, label=label)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level or "WARNING")

    try:
        config = build_config(args)
        setup_logging(config.log_level)
        clean(config, args.selector, getattr(args, "value", None))
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except CloudflareError as e:
        logger.debug("clean %s failed", args.selector, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
