"""
Zone code digit padding.

Rules:
- Only ever adds leading zeros, and only to a 1-2 digit run.
- A suffix after the digits (e.g. "-3") disables padding to keep the user's format.
- 3 and 4 digit runs are left alone.
- Anything that is not shaped like a zone comes back unchanged.
"""

from __future__ import annotations

from typing import Optional

from .rules import ZONE_DIGITS_PAD_WIDTH, ZONE_PARTS_RE


def add_zeros(zone: Optional[str]) -> Optional[str]:
    if not zone:
        return zone

    m = ZONE_PARTS_RE.fullmatch(zone)
    if m is None:
        return zone

    prefix, digits, rest = m.group(1), m.group(2), m.group(3)
    if rest or len(digits) >= ZONE_DIGITS_PAD_WIDTH:
        return zone

    return prefix + digits.zfill(ZONE_DIGITS_PAD_WIDTH)
