"""SQLAlchemy adapter – free-text search predicates.

:func:`search_predicate` builds::

    <token relevance over all columns> OR col1 ILIKE %q% OR col2 ILIKE %q% ...

The relevance half is a :class:`TokenMatch` clause. On PostgreSQL it
compiles to ``to_tsvector(lang, doc) @@ to_tsquery(lang, 't1 & t2')``; on
any other dialect every term must be contained in the lowercased document.
The ILIKE half catches partial words and punctuation that the tokenizer
discards.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import String, and_, cast, func, literal, or_
from sqlalchemy.dialects.postgresql import REGCONFIG
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import ColumnElement
from sqlalchemy.types import Boolean

from inventory_db.application.search import normalize_search_terms, substring_text, to_tsquery_text

DEFAULT_SEARCH_LANGUAGE = "english"
_LIKE_ESCAPE = "/"


def _as_text(column: Any) -> Any:
    expression = getattr(column, "expression", column)
    if isinstance(expression.type, String):
        return column
    return cast(column, String)


def _document(columns: Sequence[Any]) -> Any:
    parts = [func.coalesce(column, literal(" ", String()), type_=String()) for column in columns]
    document = parts[0]
    for part in parts[1:]:
        document = document + literal(" ", String()) + part
    return document


def _escape_like(text: str) -> str:
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


class TokenMatch(ColumnElement[bool]):
    """Conjunctive token match of ``terms`` against the concatenated ``columns``."""

    inherit_cache = False
    type = Boolean()

    def __init__(self, columns: Sequence[Any], terms: Sequence[str], *, language: str = DEFAULT_SEARCH_LANGUAGE) -> None:
        if not columns:
            raise ValueError("TokenMatch requires at least one column")
        if not terms:
            raise ValueError("TokenMatch requires at least one term")
        self.columns = tuple(columns)
        self.terms = tuple(terms)
        self.language = language
        self.document = _document(self.columns)


@compiles(TokenMatch)
def _compile_token_match(element: TokenMatch, compiler: Any, **kw: Any) -> str:
    document = func.lower(element.document, type_=String())
    clause = and_(
        *(document.like(f"%{_escape_like(term)}%", escape=_LIKE_ESCAPE) for term in element.terms)
    )
    return compiler.process(clause, **kw)


@compiles(TokenMatch, "postgresql")
def _compile_token_match_postgresql(element: TokenMatch, compiler: Any, **kw: Any) -> str:
    language = cast(literal(element.language), REGCONFIG)
    vector = func.to_tsvector(language, element.document)
    query = func.to_tsquery(language, to_tsquery_text(list(element.terms)))
    return compiler.process(vector.op("@@", return_type=Boolean())(query), **kw)


def search_predicate(
    text: str | None,
    columns: Sequence[Any],
    *,
    language: str = DEFAULT_SEARCH_LANGUAGE,
) -> ColumnElement[bool] | None:
    """Return the search clause for *text*, or ``None`` when there is nothing to search.

    ``None``, ``""`` and input that normalises to zero terms all mean "do not
    filter by search"; they never produce a match-nothing clause.
    """
    terms = normalize_search_terms(text)
    if not terms:
        return None
    if not columns:
        raise ValueError("search_predicate requires at least one column")

    text_columns = [_as_text(column) for column in columns]
    partial = f"%{_escape_like(substring_text(text) or '')}%"
    return or_(
        TokenMatch(text_columns, terms, language=language),
        *(column.ilike(partial, escape=_LIKE_ESCAPE) for column in text_columns),
    )


__all__ = ["DEFAULT_SEARCH_LANGUAGE", "TokenMatch", "search_predicate"]
