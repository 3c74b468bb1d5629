"""
Configuration loading, authentication and session management modules.
"""
from regreddit.auth.api_session import ApiSession
from regreddit.auth.credentials import Credentials, CredentialsLoader, Settings, load_settings
from regreddit.auth.session_manager import SessionManager
from regreddit.auth.session_validator import SessionValidator
from regreddit.auth.token_client import AccessToken, TokenClient

__all__ = [
    "AccessToken",
    "ApiSession",
    "Credentials",
    "CredentialsLoader",
    "SessionManager",
    "SessionValidator",
    "Settings",
    "TokenClient",
    "load_settings",
]
