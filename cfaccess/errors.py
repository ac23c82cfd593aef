"""
Exceptions raised while talking to Cloudflare or cleaning rules.
"""


class CloudflareError(Exception):
    """Base class for every error raised by cfaccess."""


class ConfigurationError(CloudflareError):
    """Missing token or zone selector, detected before any API call."""


class NotFoundError(CloudflareError):
    def __init__(self, zone_name):
        self.zone_name = zone_name
        super().__init__(f"zone {zone_name!r} not found")


class ProviderError(CloudflareError):
    """
    Any network or API failure while listing or deleting.

    Keeps the operation name and, for listing, the page that failed.
    """

    def __init__(self, operation, message, page=None, status_code=None, errors=None):
        self.operation = operation
        self.page = page
        self.status_code = status_code
        self.errors = errors or []
        where = f"{operation} on page {page}" if page is not None else operation
        super().__init__(f"failed to {where}: {message}")


class UnsupportedScopeError(CloudflareError):
    def __init__(self, scope):
        self.scope = scope
        super().__init__(f"unsupported access rule scope: {scope!r}")


class PartialFailureError(CloudflareError):
    """Raised after a batch when at least one delete failed."""

    def __init__(self, failed, total, result=None):
        self.failed = failed
        self.total = total
        self.result = result
        super().__init__(f"failed to delete {failed} out of {total} rules")
