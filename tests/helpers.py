"""Fake Cloudflare responses and gateways shared by the tests."""
from unittest.mock import MagicMock


def make_response(payload=None, status_code=200, json_error=None):
    """Fake requests.Response carrying a Cloudflare envelope."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = "" if payload is None else str(payload)
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


def rules_page(items, page=1, total_pages=1):
    return make_response(
        {
            "success": True,
            "errors": [],
            "result": items,
            "result_info": {"page": page, "total_pages": total_pages},
        }
    )


def api_rule(rule_id, value, mode="block", notes=""):
    return {
        "id": rule_id,
        "mode": mode,
        "notes": notes,
        "configuration": {"target": "ip", "value": value},
    }


class FakeClient:
    """Records delete calls; fails for the ids in fail_ids."""

    def __init__(self, fail_ids=(), error=None):
        self.fail_ids = set(fail_ids)
        self.error = error
        self.deleted = []

    def delete_access_rule(self, rule):
        self.deleted.append(rule.id)
        if rule.id in self.fail_ids:
            raise self.error
        return {"success": True, "result": {"id": rule.id}}


