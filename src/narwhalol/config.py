"""API key resolution, validation and :class:`~narwhalol.models.ClientConfig` construction.

Configuration comes from the environment:

* ``RIOT_API_KEY`` -- the Riot developer or production key. Required for
  the League API, unused by DDragon.
* ``NARWHALOL_TIMEOUT`` -- request timeout in seconds (default ``10``).
* ``NARWHALOL_VERIFY_SSL`` -- ``0``/``false``/``no`` disables certificate
  verification.

Every failure raises :class:`~narwhalol.exceptions.MalformedConfigError`
while the client is being constructed, never on first use.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from pydantic import ValidationError

from narwhalol.constants import Region
from narwhalol.exceptions import MalformedConfigError
from narwhalol.models import ClientConfig

API_KEY_ENV = "RIOT_API_KEY"
TIMEOUT_ENV = "NARWHALOL_TIMEOUT"
VERIFY_SSL_ENV = "NARWHALOL_VERIFY_SSL"

API_KEY_MARKER = "RGAPI"
API_KEY_LENGTH = 42

DDRAGON_ROOT = "https://ddragon.leagueoflegends.com"

_FALSE_VALUES = {"0", "false", "no", "off"}


def league_base_url(region: Region) -> str:
    """Return the League API base URL for *region*, e.g. ``https://na1.api.riotgames.com/lol``."""
    return f"https://{region.platform.lower()}.api.riotgames.com/lol"


def check_token(token: str) -> None:
    """Validate the shape of a Riot API key.

    A key must contain the ``RGAPI`` marker and be exactly 42 characters
    long (``RGAPI-`` followed by a UUID).

    Raises:
        MalformedConfigError: If the key does not have that shape.
    """
    if API_KEY_MARKER not in token or len(token) != API_KEY_LENGTH:
        raise MalformedConfigError(
            f"Provided token {_mask(token)!r} is not a correct Riot API token"
        )


def resolve_api_key(api_key: Optional[str] = None, env_var: str = API_KEY_ENV) -> str:
    """Return a validated API key from *api_key* or the environment.

    Args:
        api_key: Explicit key. When given, the environment is not read.
        env_var: Environment variable to read otherwise.

    Raises:
        MalformedConfigError: If no key is available or it is malformed.
    """
    if api_key is None:
        api_key = os.environ.get(env_var)
        if not api_key:
            raise MalformedConfigError(
                f"Please provide the {env_var} environment variable with your Riot API key"
            )
    api_key = api_key.strip()
    check_token(api_key)
    return api_key


def resolve_request_settings() -> dict[str, Any]:
    """Read timeout and TLS settings from the environment.

    Returns:
        A ``dict`` with ``timeout`` and/or ``verify_ssl`` keys for the
        variables that are set.

    Raises:
        MalformedConfigError: If ``NARWHALOL_TIMEOUT`` is not a positive number.
    """
    settings: dict[str, Any] = {}
    raw_timeout = os.environ.get(TIMEOUT_ENV)
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise MalformedConfigError(
                f"{TIMEOUT_ENV} must be a number of seconds, got {raw_timeout!r}"
            ) from exc
        if timeout <= 0:
            raise MalformedConfigError(f"{TIMEOUT_ENV} must be positive, got {raw_timeout!r}")
        settings["timeout"] = timeout
    raw_verify = os.environ.get(VERIFY_SSL_ENV)
    if raw_verify:
        settings["verify_ssl"] = raw_verify.strip().lower() not in _FALSE_VALUES
    return settings


def build_league_config(
    region: Region,
    api_key: Optional[str] = None,
    **overrides: Any,
) -> ClientConfig:
    """Build the config for a League API client.

    Args:
        region: Target region; selects the platform host.
        api_key: Explicit key, otherwise ``RIOT_API_KEY`` is used.
        **overrides: ``timeout`` / ``verify_ssl`` values taking precedence
            over the environment.

    Raises:
        MalformedConfigError: For a missing or malformed key or setting.
    """
    key = resolve_api_key(api_key)
    settings = {**resolve_request_settings(), **overrides}
    return _make_config(
        base_url=league_base_url(region), api_key=key, region=region, **settings
    )


def build_ddragon_config(**overrides: Any) -> ClientConfig:
    """Build the config for a standalone DDragon client (no API key).

    The base URL is the DDragon root; versioned data URLs are derived by
    :class:`~narwhalol.api.DDragonClient` once the version is known.
    """
    settings = {**resolve_request_settings(), **overrides}
    return _make_config(base_url=DDRAGON_ROOT, **settings)


def _make_config(**fields: Any) -> ClientConfig:
    try:
        return ClientConfig(**fields)
    except ValidationError as exc:
        raise MalformedConfigError(f"Invalid client configuration: {exc}") from exc


def _mask(token: str) -> str:
    """Hide all but the first few characters of a credential."""
    if len(token) <= 8:
        return "*" * len(token)
    return token[:8] + "*" * (len(token) - 8)
