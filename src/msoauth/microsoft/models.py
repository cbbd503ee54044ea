from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class MicrosoftResourceOwner:
    """Profile of a Microsoft account user.

    Wraps the decoded profile document; accessors return ``None`` for fields
    the document does not carry.
    """

    response: Mapping[str, Any] = field(default_factory=dict)

    def _get(self, key: str) -> Any:
        return self.response.get(key)

    @property
    def id(self) -> Any:
        return self._get("id")

    @property
    def display_name(self) -> str | None:
        return self._get("displayName")

    @property
    def name(self) -> str | None:
        """Alias of :attr:`display_name`."""
        return self.display_name

    @property
    def given_name(self) -> str | None:
        return self._get("givenName")

    @property
    def first_name(self) -> str | None:
        """Alias of :attr:`given_name`."""
        return self.given_name

    @property
    def surname(self) -> str | None:
        return self._get("surname")

    @property
    def last_name(self) -> str | None:
        """Alias of :attr:`surname`."""
        return self.surname

    @property
    def email(self) -> str | None:
        return self._get("mail")

    @property
    def principal_name(self) -> str | None:
        return self._get("userPrincipalName")

    @property
    def urls(self) -> None:
        # The profile schema has no profile link.
        return None

    def to_dict(self) -> dict[str, Any]:
        """Return the profile document together with its normalized aliases."""
        out = dict(self.response)
        out.update(
            {
                "id": self.id,
                "name": self.name,
                "first_name": self.first_name,
                "last_name": self.last_name,
                "email": self.email,
                "link": self.urls,
            }
        )
        return out
