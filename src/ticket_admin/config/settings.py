"""
Centralized settings for the admin console client.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional


ENV_PREFIX = 'TICKET_ADMIN_'


@dataclass(frozen=True)
class Settings:
    """Application settings with sensible defaults."""

    # Admin backend
    api_base_url: str = 'http://localhost:8080'
    timeout: float = 10.0

    # CSRF protection (header name/token pair issued by the backend page)
    csrf_header: str = 'X-CSRF-TOKEN'
    csrf_token: Optional[str] = None

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Load settings from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        raw_timeout = env.get(f'{ENV_PREFIX}TIMEOUT')
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}TIMEOUT must be a number, got {raw_timeout!r}")
        else:
            timeout = defaults.timeout

        return cls(
            api_base_url=env.get(f'{ENV_PREFIX}API_URL', defaults.api_base_url).rstrip('/'),
            timeout=timeout,
            csrf_header=env.get(f'{ENV_PREFIX}CSRF_HEADER', defaults.csrf_header),
            csrf_token=env.get(f'{ENV_PREFIX}CSRF_TOKEN') or None,
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
