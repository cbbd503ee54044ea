from typing import Iterable


def join_scopes(scopes: str | Iterable[str] | None, separator: str = " ") -> str:
    """Serialize scopes into the single string a provider expects.

    Args:
        scopes: A pre-formatted scope string, or an iterable of scopes.
        separator: Provider-specific separator (RFC 6749 uses a space).

    Returns:
        The scopes joined exactly as given, blank entries included. A string
        input is returned unchanged; ``None`` gives an empty string.
    """
    if scopes is None:
        return ""
    if isinstance(scopes, str):
        return scopes
    return separator.join(scopes)
