"""
Core arrangement logic.

Responsibilities:
- decoding uploaded bytes to text
- line sanitation
- shape detection, first matching strategy wins
- zone padding
- warning / error reporting
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from charset_normalizer import from_bytes
from loguru import logger

from .detect import (
    detect_rowwise,
    detect_single_line_bulk,
    legacy_merge_strategy,
    vertical_strategy,
)
from .models import Row
from .rules import ROW_SEPARATOR
from .sanitize import sanitize_token, split_lines
from .signals import NO_ROWS_RECOGNIZED, ReportCollector, SignalSink

Strategy = Callable[[Sequence[str], SignalSink], Optional[List[Row]]]

# Priority order. The last one always runs and may legitimately return [].
STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("vertical_blocks", vertical_strategy),
    ("single_line_bulk", detect_single_line_bulk),
    ("rowwise", detect_rowwise),
    ("legacy_merge", legacy_merge_strategy),
)


def decode_text(raw: bytes) -> Tuple[str, Dict[str, Any]]:
    """
    Decode pasted/uploaded bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - If decode with the guess fails, try UTF-8, then UTF-8 with replacement characters.
    - A UTF-8 BOM is dropped.
    """
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    decode_fallback = False
    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError):
        decode_fallback = True
        try:
            text = raw.decode("utf-8")
            decode_used = "utf-8"
        except UnicodeDecodeError:
            text = raw.decode("utf-8", errors="replace")
            decode_used = "utf-8"

    text = text.lstrip("\ufeff")

    if decode_fallback:
        logger.warning(f"[Decode] could not decode as {detected}, used {decode_used}")

    return text, {
        "detected": detected,
        "decode_used": decode_used,
        "decode_fallback": decode_fallback,
    }


def arrange_rows(raw: str, sink: SignalSink) -> Tuple[List[Row], Optional[str]]:
    """Run the strategy cascade; returns the rows and the name of the strategy that produced them."""
    lines = split_lines(raw)

    for name, strategy in STRATEGIES:
        rows = strategy(lines, sink)
        if rows:
            logger.info(f"[Dispatcher] {name} matched, {len(rows)} row(s)")
            return rows, name
        logger.debug(f"[Dispatcher] {name} declined")

    return [], None


def _arrange(raw: str, sink: SignalSink) -> Tuple[List[Row], Optional[str], str]:
    """Rows, winning strategy and output text for ``raw``."""
    if not sanitize_token(raw):
        return [], None, raw

    rows, strategy = arrange_rows(raw, sink)
    if not rows:
        sink.error(NO_ROWS_RECOGNIZED)
        return [], None, raw
    return rows, strategy, ROW_SEPARATOR.join(row.as_line() for row in rows)


def arrange_text(raw: str, sink: Optional[SignalSink] = None) -> str:
    """
    Arrange pasted text into ``CONTRACT<TAB>ZONE_OLD<TAB>ZONE_NEW`` lines.

    Blank input comes back unchanged without any signal. When nothing is
    recognized the sink gets one ``no_rows_recognized`` error and the input
    comes back unchanged.
    """
    _, _, output = _arrange(raw, sink if sink is not None else SignalSink())
    return output


def arrange_payload(raw: str, decoding: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Arrange ``raw`` and build the API response envelope.
    """
    collector = ReportCollector()
    rows, strategy, output = _arrange(raw, collector)
    lines = split_lines(raw)

    normalizations: Dict[str, Any] = {
        "strategy": strategy,
        "lines": {
            "total": len(lines),
            "non_blank": sum(1 for line in lines if line),
        },
        "blank_input": not sanitize_token(raw),
    }
    if decoding is not None:
        normalizations["encoding"] = decoding

    return {
        "output": output,
        "rows": [row.model_dump() for row in rows],
        "report": {
            "summary": {
                "rows": len(rows),
                "strategy": strategy,
                "warnings": len(collector.warnings),
                "errors": len(collector.errors),
                "deterministic": True,
            },
            "normalizations": normalizations,
            "warnings": collector.warnings,
            "errors": collector.errors,
        },
    }
