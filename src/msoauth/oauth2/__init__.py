"""Generic OAuth2 client plumbing shared by providers.

Public API:
- OAuth2Client (generic client, driven by a ProviderDefinition)
- ProviderDefinition, ResourceOwner (provider contract)
- ProviderConfig, AccessTokenType (settings)
- AccessToken (token value object)
- IdentityProviderError (error envelope returned by a provider)
- join_scopes() (scope helper)
"""

from .client import OAuth2Client
from .config import AccessTokenType, ProviderConfig
from .exceptions import IdentityProviderError
from .interfaces import ProviderDefinition, ResourceOwner
from .scopes import join_scopes
from .token import AccessToken

__all__ = [
    "OAuth2Client",
    "ProviderDefinition",
    "ResourceOwner",
    "ProviderConfig",
    "AccessTokenType",
    "AccessToken",
    "IdentityProviderError",
    "join_scopes",
]
