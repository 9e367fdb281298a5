"""Header normalization and answered-flag detection."""

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")

# Spellings accepted as "yes" in the Respondida column
_YES_TOKENS = frozenset({"si", "sí", "yes", "true", "1"})


def normalize_header(header: str) -> str:
    """Case-fold, strip accents and collapse whitespace in a header name.

    "  Petición  Académica" → "peticion academica"
    """
    text = "" if header is None else str(header)
    text = text.strip().lower()
    text = unicodedata.normalize("NFD", text)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    return _WHITESPACE_RE.sub(" ", text)


def normalize_row(row: dict) -> dict[str, str]:
    """Re-key a raw CSV row by normalized header.

    When two headers normalize to the same key, the later one wins.
    """
    out = {}
    for key, value in row.items():
        out[normalize_header(key)] = "" if value is None else value
    return out


def is_affirmative(value) -> bool:
    """Check if a free-text answered flag means yes."""
    text = "" if value is None else str(value)
    return text.strip().lower() in _YES_TOKENS
