"""Clean Cloudflare IP Access rules by prefix, target or note."""

__version__ = "0.1.0"
