"""URL normalisation."""

from __future__ import annotations

DEFAULT_SCHEME = "https://"
_KNOWN_SCHEMES = ("http://", "https://")


def normalize_url(url: str) -> str:
    """Return *url* with an explicit scheme, prefixing ``https://`` when absent.

    The input is otherwise left alone: no whitespace trimming and no host
    validation.
    """
    if url.startswith(_KNOWN_SCHEMES):
        return url
    return DEFAULT_SCHEME + url
