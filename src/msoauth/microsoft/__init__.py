"""OAuth2 provider for Microsoft accounts (login.live.com).

Public API:
- get_client() → OAuth2Client wired to the Microsoft endpoints
- MICROSOFT (provider definition)
- MicrosoftResourceOwner (user profile)
"""

from .models import MicrosoftResourceOwner
from .provider import MICROSOFT, get_client

__all__ = [
    "get_client",
    "MICROSOFT",
    "MicrosoftResourceOwner",
]
