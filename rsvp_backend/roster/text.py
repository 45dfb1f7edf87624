"""Normalization helpers for semi-structured sheet cells."""
import re

_WHITESPACE = re.compile(r"\s+")


def norm(value) -> str:
    """Return the cell as trimmed text; None becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def norm_lower(value) -> str:
    return norm(value).lower()


def parse_list(cell, delimiter: str = ";") -> list[str]:
    """
    Split a delimited cell into its non-empty pieces.

    Each piece is trimmed and empty pieces are dropped; order is kept.

        >>> parse_list(" Smith, John ;; Smith, Jane ")
        ['Smith, John', 'Smith, Jane']
    """
    return [piece.strip() for piece in norm(cell).split(delimiter) if piece.strip()]


def normalize_postal_code(value) -> str:
    """Remove all whitespace from a postal code.

    Leading zeros and any other characters (such as the dash of a ZIP+4)
    are kept.
    """
    return _WHITESPACE.sub("", norm(value))
