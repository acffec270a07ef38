"""Line and token cleanup applied before any pattern matching."""

from __future__ import annotations

from typing import List, Optional

from .rules import COLUMN_SPLIT_RE, WHITESPACE_SPLIT_RE

_TRANSLATE = str.maketrans({
    "\u00a0": " ",    # NBSP -> space
    '"': None,
    "\u201c": None,   # left double quote
    "\u201d": None,   # right double quote
    "\u200e": None,   # LRM
    "\u200f": None,   # RLM
    "\u202a": None,   # LRE
    "\u202b": None,   # RLE
    "\u202c": None,   # PDF
    "\u202d": None,   # LRO
    "\u202e": None,   # RLO
    "\u2066": None,   # LRI
    "\u2067": None,   # RLI
    "\u2068": None,   # FSI
    "\u2069": None,   # PDI
    "\ufeff": None,   # BOM / ZWNBSP
})


def sanitize_token(text: Optional[str]) -> str:
    """Replace NBSPs, drop quotes, bidi marks and BOMs, then trim."""
    if not text:
        return ""
    return text.translate(_TRANSLATE).strip()


def split_lines(raw: str) -> List[str]:
    """Split raw pasted text into sanitized lines, keeping blanks as ``""``."""
    return [sanitize_token(line) for line in raw.replace("\r", "").split("\n")]


def split_columns(line: str) -> List[str]:
    """Split on runs of spaces/tabs and sanitize each cell."""
    parts = (sanitize_token(p) for p in COLUMN_SPLIT_RE.split(line))
    return [p for p in parts if p]


def split_whitespace(line: str) -> List[str]:
    parts = (sanitize_token(p) for p in WHITESPACE_SPLIT_RE.split(line))
    return [p for p in parts if p]


def is_single_token(line: str) -> bool:
    return " " not in line and "\t" not in line
