from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Protocol

if TYPE_CHECKING:
    from .config import ProviderConfig
    from .token import AccessToken


class ResourceOwner(Protocol):
    """Protocol for the authenticated end user returned by a provider."""

    @property
    def id(self) -> Any:
        """Return the provider's identifier for the user."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Return the profile data as a plain mapping."""
        raise NotImplementedError


@dataclass(frozen=True)
class ProviderDefinition:
    """Everything that makes a provider different from another.

    A definition is a set of plain functions over a :class:`ProviderConfig`;
    :class:`~msoauth.oauth2.client.OAuth2Client` runs the generic flow with
    them, so providers never subclass the client.
    """

    name: str
    authorize_url: Callable[["ProviderConfig"], str]
    access_token_url: Callable[["ProviderConfig", Mapping[str, Any]], str]
    resource_owner_details_url: Callable[["ProviderConfig", "AccessToken"], str]
    create_resource_owner: Callable[[Mapping[str, Any], "AccessToken"], ResourceOwner]
    check_response: Callable[[int, str | None, Any], None]
    default_scopes: tuple[str, ...] = ()
    scope_separator: str = " "
    resource_owner_id_key: str | None = None
