from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Mapping

# Keys lifted into typed fields; everything else lands in ``values``.
_RESERVED = frozenset(
    {"access_token", "refresh_token", "expires_in", "expires_at", "expires"}
)


@dataclass(frozen=True)
class AccessToken:
    """Access token issued by a provider's token endpoint."""

    token: str
    expires: int | None = None
    refresh_token: str | None = None
    resource_owner_id: Any = None
    values: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(
        cls,
        data: Mapping[str, Any],
        resource_owner_id_key: str | None = None,
    ) -> "AccessToken":
        """Build a token from a decoded token-endpoint response.

        Accepts either the raw response or authlib's ``OAuth2Token``, which
        has already turned ``expires_in`` into an absolute ``expires_at``.

        Args:
            data: Token response mapping.
            resource_owner_id_key: Response key holding the resource owner id,
                if the provider returns one.

        Raises:
            ValueError: If ``access_token`` is missing or the expiry is not numeric.
        """
        token = data.get("access_token")
        if not token:
            raise ValueError('Required option not passed: "access_token"')

        expires: int | None = None
        if data.get("expires_at"):
            expires = _as_int(data["expires_at"], "expires_at")
        elif data.get("expires_in"):
            expires = int(time.time()) + _as_int(data["expires_in"], "expires_in")
        elif data.get("expires"):
            expires = _as_int(data["expires"], "expires")

        resource_owner_id = None
        if resource_owner_id_key is not None:
            resource_owner_id = data.get(resource_owner_id_key)

        skip = _RESERVED | ({resource_owner_id_key} if resource_owner_id_key else set())
        values = {k: v for k, v in data.items() if k not in skip}

        return cls(
            token=str(token),
            expires=expires,
            refresh_token=data.get("refresh_token") or None,
            resource_owner_id=resource_owner_id,
            values=values,
        )

    def has_expired(self) -> bool:
        if self.expires is None:
            raise ValueError('"expires" is not set on the token')
        return self.expires < time.time()

    def to_dict(self) -> dict[str, Any]:
        """Return the token as a mapping suitable for an authlib session."""
        out: dict[str, Any] = dict(self.values)
        out["access_token"] = self.token
        if self.refresh_token:
            out["refresh_token"] = self.refresh_token
        if self.expires is not None:
            out["expires_at"] = self.expires
        return out

    def __str__(self) -> str:
        return self.token


def _as_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} value must be an integer") from exc
