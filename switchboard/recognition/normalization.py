"""Message normalization shared by every classifier."""

import re
import unicodedata

_PUNCTUATION = re.compile(r"[^\w\s:/]")
# ':' and '/' survive only between digits (14:00, 25/12)
_LOOSE_SEPARATOR = re.compile(r"(?<!\d)[:/]|[:/](?!\d)")
_WHITESPACE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_message(message: str) -> str:
    """Lower-case, strip accents and punctuation, collapse whitespace.

    >>> normalize_message("Socorro! É uma emergência!")
    'socorro e uma emergencia'
    >>> normalize_message("Amanhã às 14:00")
    'amanha as 14:00'
    """
    text = strip_accents(message.lower())
    text = _PUNCTUATION.sub(" ", text)
    text = _LOOSE_SEPARATOR.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(normalized: str) -> set[str]:
    return set(normalized.split())


def contains_term(normalized: str, term: str) -> bool:
    """Whether ``term`` occurs in ``normalized`` on word boundaries."""
    return re.search(rf"(?<!\w){re.escape(term)}(?!\w)", normalized) is not None
