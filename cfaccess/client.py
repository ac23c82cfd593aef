"""
Cloudflare v4 API calls for IP Access rules.

Only the three things the cleaner needs: find a zone id by name, list the
zone's access rules page by page, and delete one rule.
"""
import logging

import requests

from .errors import (
    ConfigurationError,
    NotFoundError,
    ProviderError,
    UnsupportedScopeError,
)
from .models import AccessRule, Scope

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT = 15
PER_PAGE = 100
ZONES_PER_PAGE = 50


class CloudflareClient:
    def __init__(self, api_token, zone_id="", account_id="", timeout=DEFAULT_TIMEOUT):
        if not api_token or not api_token.strip():
            raise ConfigurationError("API token cannot be empty.")
        self.zone_id = (zone_id or "").strip()
        self.account_id = (account_id or "").strip()
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {api_token.strip()}",
            "Content-Type": "application/json",
        }

    def _request(self, method, path, operation, page=None, **kwargs):
        """
        Send one request and return the decoded envelope.

        Raises ProviderError on transport errors, non-JSON bodies, non 2xx
        status codes and envelopes with success=false.
        """
        url = f"{API_BASE_URL}{path}"
        logger.debug("%s %s page=%s", method, path, page)
        try:
            resp = requests.request(method, url, headers=self.headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ProviderError(operation, str(e), page=page) from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError(
                operation,
                f"non-JSON response (HTTP {resp.status_code}): {resp.text[:200]}",
                page=page,
                status_code=resp.status_code,
            ) from e

        if not isinstance(data, dict):
            data = {"result": data}
        if not resp.ok or not data.get("success"):
            errors = data.get("errors") or []
            raise ProviderError(
                operation,
                f"HTTP {resp.status_code}: {errors or data}",
                page=page,
                status_code=resp.status_code,
                errors=errors,
            )
        return data

    # -------------------------------
    # Zones
    # -------------------------------
    def resolve_zone_id(self, zone_name):
        """Return the id of the zone named exactly zone_name."""
        data = self._request(
            "GET",
            "/zones",
            "list zones",
            params={"name": zone_name, "per_page": ZONES_PER_PAGE},
        )
        for zone in data.get("result") or []:
            if zone.get("name") == zone_name:
                logger.info("Resolved zone %s to %s", zone_name, zone.get("id"))
                return zone["id"]
        raise NotFoundError(zone_name)

    # -------------------------------
    # Access rules
    # -------------------------------
    def list_access_rules(self):
        """
        Fetch every zone-scoped access rule.

        Pages are fetched in order from 1 until a page comes back empty or the
        reported total_pages is reached. Any page failure aborts the listing.
        """
        if not self.zone_id:
            raise ConfigurationError("zone id is required to list access rules")

        path = f"/zones/{self.zone_id}/firewall/access_rules/rules"
        rules = []
        page = 1
        while True:
            data = self._request(
                "GET",
                path,
                "list access rules",
                page=page,
                params={"page": page, "per_page": PER_PAGE},
            )
            results = data.get("result") or []
            # no result_info means a single page
            total_pages = (data.get("result_info") or {}).get("total_pages") or 1

            for item in results:
                if not item.get("id"):
                    raise ProviderError("list access rules", f"rule without id: {item}", page=page)
                rules.append(AccessRule.from_api(item))

            if not results or page >= total_pages:
                break
            page += 1

        logger.debug("Listed %d access rules over %d page(s)", len(rules), page)
        return rules

    def delete_access_rule(self, rule):
        if rule.scope is Scope.ZONE:
            path = f"/zones/{self.zone_id}/firewall/access_rules/rules/{rule.id}"
        elif rule.scope is Scope.ACCOUNT:
            if not self.account_id:
                raise ConfigurationError("account id is required to delete account-scoped rules")
            path = f"/accounts/{self.account_id}/firewall/access_rules/rules/{rule.id}"
        else:
            raise UnsupportedScopeError(rule.scope)
        return self._request("DELETE", path, "delete access rule")
