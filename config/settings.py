"""
Configuration constants for regreddit.
"""
import os
from pathlib import Path

NAME = "regreddit"
VERSION = "0.1.0"

# Reddit endpoints
TOKEN_URL = "https://www.reddit.com/api/v1/access_token"
OAUTH_BASE = "https://oauth.reddit.com"

# Listing pages (Reddit caps `limit` at 100)
LISTING_LIMIT = 100

# Seconds before a token is considered expired when the API omits expires_in
DEFAULT_TOKEN_LIFETIME = 3600

# Paths
DEFAULT_CONFIG_PATH = Path.cwd() / ".regreddit.toml"

# Environment Variables (with defaults)
REGREDDIT_CONFIG = os.getenv("REGREDDIT_CONFIG", "")
USER_AGENT = os.getenv("REGREDDIT_USER_AGENT", f"{NAME}/{VERSION}")
REQUEST_TIMEOUT = float(os.getenv("REGREDDIT_REQUEST_TIMEOUT", "30"))
LOG_DIR = os.getenv("REGREDDIT_LOG_DIR", "")
