from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from msoauth.oauth2.client import OAuth2Client
from msoauth.oauth2.config import ProviderConfig
from msoauth.oauth2.exceptions import IdentityProviderError
from msoauth.oauth2.interfaces import ProviderDefinition
from msoauth.oauth2.token import AccessToken

from . import urls
from .models import MicrosoftResourceOwner

logger = logging.getLogger(__name__)


def authorize_url(config: ProviderConfig) -> str:
    return config.url_authorize or urls.AUTHORIZE_URL


def access_token_url(config: ProviderConfig, params: Mapping[str, Any]) -> str:
    return config.url_access_token or urls.ACCESS_TOKEN_URL


def resource_owner_details_url(config: ProviderConfig, token: AccessToken) -> str:
    return config.url_resource_owner_details or urls.RESOURCE_OWNER_DETAILS_URL


def create_resource_owner(
    data: Mapping[str, Any], token: AccessToken
) -> MicrosoftResourceOwner:
    return MicrosoftResourceOwner(dict(data))


def check_response(status_code: int, reason: str | None, data: Any) -> None:
    """Raise if a decoded response body carries an error.

    Microsoft returns ``{"error": {"code": ..., "message": ...}}``; plain
    RFC 6749 errors (``{"error": "invalid_grant", ...}``) are accepted too.

    Args:
        status_code: HTTP status of the response.
        reason: HTTP reason phrase, used when the error has no message.
        data: Decoded response body.

    Raises:
        IdentityProviderError: If ``data`` has an ``error`` entry.
    """
    if not isinstance(data, Mapping) or "error" not in data:
        return

    error = data["error"]
    if isinstance(error, Mapping):
        code = error.get("code")
        message = error.get("message") or reason or ""
    else:
        code = str(error) if error else None
        message = data.get("error_description") or code or reason or ""

    raise IdentityProviderError(message, status_code, data, code=code)


MICROSOFT = ProviderDefinition(
    name="microsoft",
    authorize_url=authorize_url,
    access_token_url=access_token_url,
    resource_owner_details_url=resource_owner_details_url,
    create_resource_owner=create_resource_owner,
    check_response=check_response,
    default_scopes=urls.DEFAULT_SCOPES,
    scope_separator=urls.SCOPE_SEPARATOR,
)


def get_client(config: ProviderConfig | None = None, **settings: Any) -> OAuth2Client:
    """Construct an :class:`OAuth2Client` for Microsoft accounts.

    Args:
        config: Provider configuration. If ``None``, one is built from
            ``settings`` and the environment.
        **settings: Configuration values (e.g. ``clientId``, ``redirectUri``,
            ``urlAuthorize``); only used when ``config`` is ``None``.

    Returns:
        A client wired to the Microsoft endpoints.
    """
    if config is not None and settings:
        raise ValueError("Pass either config or keyword settings, not both.")
    cfg = config or ProviderConfig(**settings)
    logger.debug(
        "Creating Microsoft OAuth2 client (authorize=%s, token=%s).",
        authorize_url(cfg),
        access_token_url(cfg, {}),
    )
    return OAuth2Client(MICROSOFT, cfg)
