"""
Shape detectors for pasted contract / zone data.

Each detector takes the sanitized lines (blank lines kept as ``""``) and either
returns rows or ``None`` to decline, so the dispatcher can try the next one.
Declining is normal and never an error.
"""

from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence

from loguru import logger

from .classify import TokenClass, all_of_class, classify_token, is_zone_candidate
from .models import Row
from .rules import BLOCK_PERMUTATIONS, COLUMNS, OUTPUT_DELIMITER, VERTICAL_MIN_TOKENS
from .sanitize import is_single_token, split_columns, split_whitespace
from .signals import LENGTH_MISMATCH, SignalSink
from .zones import add_zeros


class VerticalBlocks(NamedTuple):
    contracts: List[str]
    olds: List[str]
    news: List[str]


class Phase(Enum):
    CONTRACTS = "contracts"
    OLD_ZONES = "old_zones"
    NEW_ZONES = "new_zones"


# phase -> (class that stays in phase, next phase)
_PHASE_TABLE = {
    Phase.CONTRACTS: (TokenClass.CONTRACT, Phase.OLD_ZONES),
    Phase.OLD_ZONES: (TokenClass.OLD_ZONE, Phase.NEW_ZONES),
    Phase.NEW_ZONES: (TokenClass.NEW_ZONE, None),
}


def make_row(contract: str, zone_old: str, zone_new: str) -> Row:
    return Row(contract=contract, zone_old=add_zeros(zone_old), zone_new=add_zeros(zone_new))


def _row_from_parts(parts: Sequence[str]) -> Row:
    # contract, old zone, ..., new zone (last)
    return make_row(parts[0], parts[1], parts[-1])


def _classified(blocks: VerticalBlocks) -> bool:
    return (
        all_of_class(blocks.contracts, TokenClass.CONTRACT)
        and all_of_class(blocks.olds, TokenClass.OLD_ZONE)
        and all_of_class(blocks.news, TokenClass.NEW_ZONE)
    )


# ------------------------------------------------------------------ vertical


def _split_on_blanks(lines: Sequence[str]) -> Optional[List[List[str]]]:
    groups: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if line == "":
            if current:
                groups.append(current)
                current = []
            continue
        if not is_single_token(line):
            return None
        current.append(line)
    if current:
        groups.append(current)
    return groups


def _match_permutation(groups: List[List[str]]) -> Optional[VerticalBlocks]:
    for order in BLOCK_PERMUTATIONS:
        blocks = VerticalBlocks(*(groups[i] for i in order))
        if _classified(blocks):
            return blocks
    return None


def _stream_phases(tokens: Sequence[str]) -> Optional[VerticalBlocks]:
    """Forward-only contracts -> old zones -> new zones state machine."""
    buckets = {phase: [] for phase in Phase}
    phase = Phase.CONTRACTS

    for token in tokens:
        token_class = classify_token(token)
        stay_class, next_phase = _PHASE_TABLE[phase]
        if token_class is stay_class:
            buckets[phase].append(token)
            continue
        if next_phase is not None and token_class is _PHASE_TABLE[next_phase][0] and buckets[phase]:
            phase = next_phase
            buckets[phase].append(token)
            continue
        return None

    if all(buckets.values()):
        return VerticalBlocks(
            buckets[Phase.CONTRACTS], buckets[Phase.OLD_ZONES], buckets[Phase.NEW_ZONES]
        )
    return None


def _equal_thirds(tokens: Sequence[str]) -> Optional[VerticalBlocks]:
    size = len(tokens) // COLUMNS
    blocks = VerticalBlocks(
        list(tokens[:size]), list(tokens[size:size * 2]), list(tokens[size * 2:])
    )
    return blocks if _classified(blocks) else None


def detect_vertical_blocks(lines: Sequence[str]) -> Optional[VerticalBlocks]:
    """
    Recognize three pasted columns stacked one after another.

    Tried in order:
    1. exactly three blank-separated groups, in any of the six orders
    2. one stream of tokens whose classes run contracts -> old -> new
    3. equal thirds of the token list

    Any non-blank line holding whitespace means this is not a vertical paste.
    """
    groups = _split_on_blanks(lines)
    if groups is None:
        logger.debug("[VerticalBlocks] multi-column line found, declining")
        return None

    if len(groups) == COLUMNS:
        blocks = _match_permutation(groups)
        if blocks is not None:
            logger.debug("[VerticalBlocks] matched blank-separated groups")
            return blocks

    tokens = [line for line in lines if line]
    if len(tokens) < VERTICAL_MIN_TOKENS:
        return None

    blocks = _stream_phases(tokens)
    if blocks is not None:
        logger.debug("[VerticalBlocks] matched streaming phases")
        return blocks

    if len(tokens) % COLUMNS == 0:
        blocks = _equal_thirds(tokens)
        if blocks is not None:
            logger.debug("[VerticalBlocks] matched equal thirds")
            return blocks

    return None


def arrange_vertical(blocks: VerticalBlocks, sink: SignalSink) -> List[Row]:
    """Zip the blocks by index, truncating to the shortest with a warning."""
    lengths = (len(blocks.contracts), len(blocks.olds), len(blocks.news))
    n = min(lengths)
    if len(set(lengths)) > 1:
        sink.warning(LENGTH_MISMATCH, {
            "contracts": lengths[0],
            "old": lengths[1],
            "new": lengths[2],
            "rows_used": n,
        })
    return [make_row(c, o, z) for c, o, z in zip(blocks.contracts, blocks.olds, blocks.news)]


def vertical_strategy(lines: Sequence[str], sink: SignalSink) -> Optional[List[Row]]:
    blocks = detect_vertical_blocks(lines)
    if blocks is None:
        return None
    return arrange_vertical(blocks, sink)


# ------------------------------------------------------------------ row shapes


def detect_single_line_bulk(lines: Sequence[str], sink: Optional[SignalSink] = None) -> Optional[List[Row]]:
    """One line holding every triple back to back (spreadsheet row paste)."""
    cleaned = [line for line in lines if line]
    if len(cleaned) != 1:
        return None

    parts = split_columns(cleaned[0])
    if not parts or len(parts) % COLUMNS:
        return None

    return [make_row(*parts[i:i + COLUMNS]) for i in range(0, len(parts), COLUMNS)]


def detect_rowwise(lines: Sequence[str], sink: Optional[SignalSink] = None) -> Optional[List[Row]]:
    """Every non-blank line already has 3+ columns; all or nothing."""
    cleaned = [line for line in lines if line]
    rows = []
    for line in cleaned:
        parts = split_columns(line)
        if len(parts) < COLUMNS:
            logger.debug(f"[Rowwise] line with {len(parts)} column(s), declining")
            return None
        rows.append(_row_from_parts(parts))
    return rows or None


# ------------------------------------------------------------------ fallback


def legacy_merge(lines: Sequence[str]) -> List[str]:
    """Glue a lone zone token onto the previous emitted line when that line has two columns."""
    merged: List[str] = []
    for line in lines:
        if line == "":
            continue
        tokens = split_whitespace(line)
        if len(tokens) == 1 and is_zone_candidate(tokens[0]) and merged:
            prev = merged[-1]
            if len(split_whitespace(prev)) == 2:
                merged[-1] = prev + OUTPUT_DELIMITER + tokens[0]
                continue
        merged.append(line)
    return merged


def arrange_free_form(merged: Sequence[str]) -> List[Row]:
    """Last resort: any line with 3+ tokens becomes a row, the rest is dropped."""
    rows = []
    for line in merged:
        parts = split_whitespace(line)
        if len(parts) >= COLUMNS:
            rows.append(_row_from_parts(parts))
    return rows


def legacy_merge_strategy(lines: Sequence[str], sink: Optional[SignalSink] = None) -> List[Row]:
    return arrange_free_form(legacy_merge(lines))
