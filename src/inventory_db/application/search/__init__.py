"""Application search – query normalisation for relevance + substring matching."""
from inventory_db.application.search.normalizer import (
    normalize_search_terms,
    substring_text,
    to_tsquery_text,
)

__all__ = ["normalize_search_terms", "substring_text", "to_tsquery_text"]
