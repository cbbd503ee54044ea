from __future__ import annotations

from enum import Enum

from pydantic import AliasChoices, Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccessTokenType(str, Enum):
    """How access tokens are attached to authenticated requests."""

    NONE = "none"
    BEARER = "bearer"


class ProviderConfig(BaseSettings):
    """Configuration for an OAuth2 provider client.

    Values can be passed as keyword arguments (snake_case or the camelCase
    names, e.g. ``clientId``) or read from the environment.

    Environment variables:
        - CLIENT_ID
        - CLIENT_SECRET
        - REDIRECT_URI
        - URL_AUTHORIZE
        - URL_ACCESS_TOKEN
        - URL_RESOURCE_OWNER_DETAILS
        - ACCESS_TOKEN_TYPE
        - TIMEOUT

    The URL overrides replace the provider's default endpoints when set.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # validation_alias replaces the field name as input key, so the field name
    # is repeated in every AliasChoices.

    client_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("client_id", "clientId", "CLIENT_ID"),
    )
    client_secret: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("client_secret", "clientSecret", "CLIENT_SECRET"),
    )
    redirect_uri: str | None = Field(
        default=None,
        validation_alias=AliasChoices("redirect_uri", "redirectUri", "REDIRECT_URI"),
    )
    url_authorize: str | None = Field(
        default=None,
        validation_alias=AliasChoices("url_authorize", "urlAuthorize", "URL_AUTHORIZE"),
    )
    url_access_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "url_access_token", "urlAccessToken", "URL_ACCESS_TOKEN"
        ),
    )
    url_resource_owner_details: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "url_resource_owner_details",
            "urlResourceOwnerDetails",
            "URL_RESOURCE_OWNER_DETAILS",
        ),
    )
    access_token_type: AccessTokenType = Field(
        default=AccessTokenType.NONE,
        validation_alias=AliasChoices(
            "access_token_type", "accessTokenType", "ACCESS_TOKEN_TYPE"
        ),
    )
    timeout: float | None = Field(
        default=10.0,
        validation_alias=AliasChoices("timeout", "TIMEOUT"),
    )

    @field_validator(
        "redirect_uri",
        "url_authorize",
        "url_access_token",
        "url_resource_owner_details",
        mode="before",
    )
    @classmethod
    def _blank_as_unset(cls, v: str | None) -> str | None:
        """Treat empty strings (e.g. ``URL_AUTHORIZE=``) as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _cross_field_validation(self) -> "ProviderConfig":
        """Reject a client secret that has no client to belong to."""
        if self.client_secret is not None and not self.client_id:
            raise ValueError("client_secret requires client_id.")
        return self
