"""Application search – free-text query normalisation.

Turns user input into the terms used by the token-relevance predicate.
Characters with a meaning in PostgreSQL ``tsquery`` syntax (``& | ! ( ) : *``
and friends) are stripped so arbitrary input can never produce a malformed
query; terms that end up empty are dropped.
"""
from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^\w\-.@/]+", re.UNICODE)
_EDGE_PUNCTUATION = "-./@"


def normalize_search_terms(text: str | None) -> list[str]:
    """Split *text* on whitespace into lowercased, query-safe terms.

    >>> normalize_search_terms("  Test-10  rack:(A) ")
    ['test-10', 'racka']
    >>> normalize_search_terms("***")
    []
    """
    if not text:
        return []
    terms: list[str] = []
    for raw in text.split():
        term = _DISALLOWED.sub("", raw.lower()).strip(_EDGE_PUNCTUATION)
        if term:
            terms.append(term)
    return terms


def to_tsquery_text(terms: list[str]) -> str:
    """Join *terms* conjunctively for ``to_tsquery`` (every term must match)."""
    return " & ".join(terms)


def substring_text(text: str | None) -> str | None:
    """Return the text used for partial matches, or ``None`` when blank."""
    if text is None:
        return None
    stripped = text.strip()
    return stripped or None


__all__ = ["normalize_search_terms", "substring_text", "to_tsquery_text"]
