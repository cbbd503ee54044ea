from typing import Final

AUTHORIZE_URL: Final[str] = "https://login.live.com/oauth20_authorize.srf"
ACCESS_TOKEN_URL: Final[str] = "https://login.live.com/oauth20_token.srf"
RESOURCE_OWNER_DETAILS_URL: Final[str] = "https://apis.live.net/v5.0/me"

DEFAULT_SCOPES: Final[tuple[str, ...]] = ("wl.basic", "wl.emails")

# Microsoft accounts expect a comma between scopes, not the RFC 6749 space.
SCOPE_SEPARATOR: Final[str] = ","
