"""
Credentials loading and validation from the regreddit TOML config file.
"""
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from regreddit.errors import ConfigError
from regreddit.utils.logging import get_logger

logger = get_logger(__name__)

# Required keys of the [credentials] table
REQUIRED_FIELDS = ["client_id", "secret", "username", "password"]


@dataclass(frozen=True)
class Credentials:
    """Reddit script-app credentials."""

    client_id: str
    secret: str = field(repr=False)
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Settings:
    """Loaded configuration: credentials plus the subreddit whitelist."""

    credentials: Credentials
    whitelist: frozenset = frozenset()
    whitelist_case_sensitive: bool = False


def normalize_subreddit(name: str, case_sensitive: bool = False) -> str:
    """
    Normalize a subreddit name for whitelist comparison.

    Strips whitespace and a leading "r/" or "/r/"; folds case unless
    case_sensitive is set.
    """
    name = name.strip()
    for prefix in ("/r/", "r/"):
        if name.lower().startswith(prefix):
            name = name[len(prefix):]
            break
    return name if case_sensitive else name.casefold()


class CredentialsLoader:
    """Loads and validates the regreddit configuration file."""

    def __init__(self, config_path: Union[str, Path]):
        """
        Initialize CredentialsLoader with path to the config file.

        Args:
            config_path: Path to the TOML config file
        """
        self.config_path = Path(config_path)
        self.config_data: Optional[dict] = None

    def load(self) -> Settings:
        """
        Load settings from the TOML file.

        Returns:
            Settings instance

        Raises:
            ConfigError: If the file is missing, unreadable, or malformed
        """
        if not self.config_path.is_file():
            raise ConfigError(
                f"Config file not found: {self.config_path}\n"
                "Create it with a [credentials] table holding client_id, secret, "
                "username and password."
            )

        try:
            with open(self.config_path, "rb") as f:
                self.config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in config file {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read config file {self.config_path}: {e}") from e

        credentials = self._parse_credentials(self.config_data)
        case_sensitive = self._parse_case_sensitivity(self.config_data)
        whitelist = self._parse_whitelist(self.config_data, case_sensitive)

        logger.info(f"Loaded config from {self.config_path}")
        logger.debug(f"Whitelist: {sorted(whitelist) or 'empty'}")

        return Settings(
            credentials=credentials,
            whitelist=whitelist,
            whitelist_case_sensitive=case_sensitive,
        )

    def _parse_credentials(self, data: dict) -> Credentials:
        section = data.get("credentials")
        if not isinstance(section, dict):
            raise ConfigError(f"Missing [credentials] table in {self.config_path}")

        missing = [name for name in REQUIRED_FIELDS if not self._is_filled(section.get(name))]
        if missing:
            raise ConfigError(
                f"Missing or empty credential fields in {self.config_path}: {', '.join(missing)}"
            )

        return Credentials(**{name: section[name].strip() for name in REQUIRED_FIELDS})

    def _parse_case_sensitivity(self, data: dict) -> bool:
        value = data.get("whitelist_case_sensitive", False)
        if not isinstance(value, bool):
            raise ConfigError("'whitelist_case_sensitive' must be true or false")
        return value

    def _parse_whitelist(self, data: dict, case_sensitive: bool) -> frozenset:
        entries = data.get("whitelist", [])
        if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
            raise ConfigError("'whitelist' must be an array of subreddit name strings")

        names = {normalize_subreddit(e, case_sensitive) for e in entries}
        names.discard("")
        return frozenset(names)

    @staticmethod
    def _is_filled(value: Any) -> bool:
        return isinstance(value, str) and bool(value.strip())


def load_settings(config_path: Union[str, Path]) -> Settings:
    """
    Load regreddit settings from a TOML file.

    Args:
        config_path: Path to the config file

    Returns:
        Settings instance

    Raises:
        ConfigError: If the file is missing or malformed
    """
    return CredentialsLoader(config_path).load()
