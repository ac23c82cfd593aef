import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .client import DEFAULT_TIMEOUT, CloudflareClient
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_API_TOKEN = "CLOUDFLARE_API_TOKEN"
ENV_ZONE_ID = "CLOUDFLARE_ZONE_ID"
ENV_ZONE_NAME = "CLOUDFLARE_ZONE_NAME"
ENV_ACCOUNT_ID = "CLOUDFLARE_ACCOUNT_ID"


#----------------------
# Load config from file
#----------------------
def load_config(path: str) -> dict:
    """
    Load .ini config file and return a nested dict.
    Example:
        cfg['cloudflare']['api_token']
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    parser = configparser.ConfigParser()
    parser.optionxform = str  # keep key case
    parser.read(config_path, encoding="utf-8")

    cfg = {section: dict(parser.items(section)) for section in parser.sections()}
    return cfg


@dataclass
class Config:
    api_token: str
    zone_id: str = ""
    zone_name: str = ""
    account_id: str = ""
    dry_run: bool = False
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "WARNING"

    def validate(self):
        if not self.api_token:
            raise ConfigurationError(
                f"API token is required. Set {ENV_API_TOKEN} environment variable "
                "or use --token flag (not recommended)"
            )
        if not self.zone_id and not self.zone_name:
            raise ConfigurationError("either --zone-id or --zone-name must be specified")
        return self


def build_config(args, environ=None) -> Config:
    """
    Merge flags, environment and the optional --config file.

    Flags win over the environment, the environment wins over the file.
    """
    if environ is None:
        environ = os.environ

    file_cfg = {}
    config_path = getattr(args, "config", None)
    if config_path:
        file_cfg = load_config(config_path).get("cloudflare", {})

    def pick(flag, env_key, file_key):
        value = getattr(args, flag, None) or environ.get(env_key) or file_cfg.get(file_key) or ""
        return value.strip()

    timeout = file_cfg.get("timeout")
    try:
        timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
    except ValueError as e:
        raise ConfigurationError(f"invalid timeout in config file: {timeout!r}") from e
    if not timeout > 0:
        raise ConfigurationError(f"timeout must be greater than 0, got {timeout}")

    config = Config(
        api_token=pick("token", ENV_API_TOKEN, "api_token"),
        zone_id=pick("zone_id", ENV_ZONE_ID, "zone_id"),
        zone_name=pick("zone_name", ENV_ZONE_NAME, "zone_name"),
        account_id=pick("account_id", ENV_ACCOUNT_ID, "account_id"),
        dry_run=bool(getattr(args, "dry_run", False)),
        timeout=timeout,
        log_level=getattr(args, "log_level", None) or file_cfg.get("log_level", "").strip().upper() or "WARNING",
    )
    return config.validate()


# -------------------------------
# Rule filters
# -------------------------------
def filter_by_prefix(rules, prefix):
    """Rules whose target starts with prefix (case-sensitive, no IP normalisation)."""
    return [rule for rule in rules if rule.target.startswith(prefix)]


def filter_by_target(rules, target):
    return [rule for rule in rules if rule.target == target]


def filter_by_notes(rules, text):
    """Rules whose notes contain text anywhere."""
    return [rule for rule in rules if text in rule.notes]


# -------------------------------
# Zone resolution
# -------------------------------
def setup_client(config):
    """
    Return (zone_id, client) for the configured zone.

    A zone id is used as given. Otherwise a client without a zone resolves the
    zone name once, and the real client is built with the result.
    """
    zone_id = config.zone_id
    if not zone_id and config.zone_name:
        lookup = CloudflareClient(config.api_token, "", timeout=config.timeout)
        zone_id = lookup.resolve_zone_id(config.zone_name)

    client = CloudflareClient(
        config.api_token,
        zone_id,
        account_id=config.account_id,
        timeout=config.timeout,
    )
    return zone_id, client
