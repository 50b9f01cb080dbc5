"""
Directive Parser
================
Extracts `@{ <expression> ; key=value ... }` blocks from free-form text.

Why is this file needed?
------------------------
1. Extraction: Directive blocks can appear anywhere in the editor text, mixed
   with notes and other prose.
2. Validation: Every block is checked once, here. Problems are recorded as
   human-readable messages on the record instead of being raised, so a single
   malformed block never prevents the rest of the document from rendering.
3. Typing: Error-free records carry a resolved `CurveStyle`.

Syntax:
    @{ y = sin(x) ; stroke=#ff0000 ; width=2 ; fill=#00ff00 ; alpha=0.5 }

Recognized keys: stroke (required, #RRGGBB), width (required, > 0),
fill (optional, #RRGGBB), alpha (optional, 0..1). Keys are case-insensitive.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from mathcanvas.model.style import CurveStyle, Rgba, is_hex_color, parse_number

logger = logging.getLogger(__name__)

RECOGNIZED_KEYS: tuple[str, ...] = ("stroke", "width", "fill", "alpha")

BLOCK_PATTERN = re.compile(r"@\{([\s\S]*?)\}")

# Boundary between the expression and the property clauses
PROPERTY_BOUNDARY = re.compile(r";(?=\s*(?:stroke|width|fill|alpha)\s*=)", re.IGNORECASE)

# Boundary between two property clauses (any `key=` may follow)
CLAUSE_BOUNDARY = re.compile(r";(?=\s*[A-Za-z_][\w-]*\s*=)")


@dataclass
class DirectiveRecord:
    """
    One parsed `@{...}` block.

    Style fields keep the raw (trimmed) strings from the source text; `style`
    holds the validated values and is only set when `errors` is empty.
    """
    index: int
    expression: str = ""
    stroke: Optional[str] = None
    width: Optional[str] = None
    fill: Optional[str] = None
    alpha: Optional[str] = None
    errors: list[str] = field(default_factory=list)
    style: Optional[CurveStyle] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


def parse(raw_text: str) -> list[DirectiveRecord]:
    """
    Parse every directive block of `raw_text`, in order of appearance.

    Never raises: malformed blocks are returned with a non-empty `errors` list.

    Args:
        raw_text: The whole editor document.

    Returns:
        Records with strictly increasing `index` starting at 0.
    """
    records: list[DirectiveRecord] = []
    for index, match in enumerate(BLOCK_PATTERN.finditer(raw_text)):
        records.append(_parse_block(index, match.group(1)))

    n_invalid = sum(1 for r in records if r.errors)
    logger.debug(f"Parsed {len(records)} directive(s), {n_invalid} with errors.")
    return records


def _parse_block(index: int, content: str) -> DirectiveRecord:
    record = DirectiveRecord(index=index)
    content = content.strip()

    boundary = PROPERTY_BOUNDARY.search(content)
    if boundary:
        record.expression = content[:boundary.start()].strip()
        properties = content[boundary.end():]
    else:
        record.expression = content
        properties = ""

    for key, value in _split_clauses(properties):
        if key not in RECOGNIZED_KEYS:
            record.errors.append(f"Unknown key: {key}")
        else:
            # last write wins
            setattr(record, key, value)

    record.errors.extend(_validate(record))
    if not record.errors:
        record.style = _resolve_style(record)
    return record


def _split_clauses(properties: str) -> list[tuple[str, str]]:
    """Split `key=value;key=value` into trimmed (lowercase key, value) pairs."""
    pairs: list[tuple[str, str]] = []
    for clause in CLAUSE_BOUNDARY.split(properties):
        clause = clause.strip()
        if not clause:
            continue
        key, _, value = clause.partition("=")
        pairs.append((key.strip().lower(), value.strip()))
    return pairs


def _validate(record: DirectiveRecord) -> list[str]:
    """All applicable messages, in a fixed order."""
    errors: list[str] = []

    if not record.stroke:
        errors.append("Missing stroke")
    if not record.width:
        errors.append("Missing width")

    if record.stroke and not is_hex_color(record.stroke):
        errors.append("Bad stroke hex")
    if record.fill and not is_hex_color(record.fill):
        errors.append("Bad fill hex")

    if record.width:
        width = parse_number(record.width)
        if width is None or width <= 0.0:
            errors.append("Bad width")

    if record.alpha:
        alpha = parse_number(record.alpha)
        if alpha is None or not 0.0 <= alpha <= 1.0:
            errors.append("Bad alpha")

    return errors


def _resolve_style(record: DirectiveRecord) -> CurveStyle:
    alpha = parse_number(record.alpha) if record.alpha else 1.0
    return CurveStyle(
        stroke=Rgba.from_hex(record.stroke, alpha),
        width=parse_number(record.width),
        fill=Rgba.from_hex(record.fill, alpha) if record.fill else None,
    )
