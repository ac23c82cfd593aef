"""Preview and delete a set of access rules, one at a time."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import CloudflareError, PartialFailureError
from .models import AccessRule

logger = logging.getLogger(__name__)


@dataclass
class DeletionResult:
    total: int
    dry_run: bool = False
    deleted: list[AccessRule] = field(default_factory=list)
    failures: list[tuple[AccessRule, Exception]] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.deleted)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


def delete_rules(client, rules, dry_run=False, label="rules") -> DeletionResult:
    """
    Print the rules, then delete them unless dry_run is set.

    Deletion is best effort: a failed rule is reported and the loop moves on.
    When anything failed, PartialFailureError is raised after the last rule,
    carrying the DeletionResult.
    """
    rules = list(rules)
    result = DeletionResult(total=len(rules), dry_run=dry_run)

    if not rules:
        print(f"No {label} found.")
        return result

    print(f"Found {len(rules)} {label}:")
    for rule in rules:
        print(f"  - {rule.describe()}")

    if dry_run:
        print(f"\nDry run mode: would delete {len(rules)} rules")
        return result

    print(f"\nDeleting {len(rules)} rules...")
    for rule in rules:
        try:
            client.delete_access_rule(rule)
        except CloudflareError as e:
            logger.warning("Delete failed for %s (%s): %s", rule.target, rule.id, e)
            print(f"❌ Failed to delete rule {rule.target}: {e}")
            result.failures.append((rule, e))
        else:
            print(f"✅ Deleted: {rule.target}")
            result.deleted.append(rule)

    if result.failures:
        print(f"\nDeleted {result.succeeded} rules, {result.failed} failed")
        raise PartialFailureError(result.failed, result.total, result)

    print(f"\nSuccessfully deleted {result.succeeded} rules")
    return result
