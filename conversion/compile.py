"""
conversion/compile.py — Markdown -> index-addressed edit operations.

Architecture:
  markdown.split("\\n") -> line.strip()
  -> blank   : InsertText("\\n")
  -> "#"*n   : InsertText(text + "\\n") + SetParagraphStyle(HEADING_n)
  -> other   : inline pass (bold stage, then italic stage)
               InsertText(stripped + "\\n") + SetTextStyle per span

A single cursor, starting at `start_index`, is the only index bookkeeping;
the compiler never looks at document state, so every offset in a batch is
computed before any of the batch's insertions is applied.

Tables, links, images and list markers are not recognised: such lines are
inserted verbatim.

Public API:
  compile_markdown(markdown, start_index) -> CompiledBatch
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from data_model import (
    EditOperation,
    InsertText,
    SetParagraphStyle,
    SetTextStyle,
    TextStyle,
    heading_style,
)

from .index import FIRST_INDEX, advance, rune_length

# Each span is the shortest run not containing the marker character.
_BOLD_RE   = re.compile(r"\*\*([^*]+)\*\*|__([^_]+)__")
_ITALIC_RE = re.compile(r"\*([^*]+)\*|_([^_]+)_")


@dataclass(slots=True)
class CompiledBatch:
    operations: list[EditOperation] = field(default_factory=list)
    length:     int = 0     # document length delta of the batch

    def __iter__(self):
        return iter(self.operations)

    def __len__(self) -> int:
        return len(self.operations)


@dataclass(slots=True, frozen=True)
class _Span:
    """Styled span in local, post-strip coordinates of one line."""
    start: int
    end:   int


def compile_markdown(markdown: str, start_index: int = FIRST_INDEX) -> CompiledBatch:
    """
    Compiles Markdown into operations that insert it at `start_index`.

    Never fails: unrecognised syntax is inserted as literal text.
    """
    ops: list[EditOperation] = []
    cursor = start_index

    for raw_line in markdown.split("\n"):
        line = raw_line.strip()

        if not line:
            ops.append(InsertText(cursor, "\n"))
            cursor = advance(cursor, "\n")
            continue

        if line.startswith("#"):
            level = len(line) - len(line.lstrip("#"))
            inserted = line[level:].strip() + "\n"
            end = advance(cursor, inserted)
            ops.append(InsertText(cursor, inserted))
            ops.append(SetParagraphStyle(cursor, end, named_style=heading_style(level)))
            cursor = end
            continue

        plain, bold, italic = parse_inline(line)
        ops.append(InsertText(cursor, plain + "\n"))
        for span in bold:
            ops.append(SetTextStyle(cursor + span.start, cursor + span.end, TextStyle(bold=True)))
        for span in italic:
            ops.append(SetTextStyle(cursor + span.start, cursor + span.end, TextStyle(italic=True)))
        cursor = advance(cursor, plain + "\n")

    return CompiledBatch(operations=ops, length=cursor - start_index)


# ---------------------------------------------------------------------------
# Inline pass
# ---------------------------------------------------------------------------

def parse_inline(line: str) -> tuple[str, list[_Span], list[_Span]]:
    """
    Strips bold markers, then italic markers from the bold-stripped text.

    Returns (plain_text, bold_spans, italic_spans). Bold spans are expressed
    against the bold-stripped text and are not shifted again for italic
    markers removed afterwards; interleaved markers therefore resolve
    lexically, stage by stage.
    """
    bold, text = _strip_stage(_BOLD_RE, line)
    italic, text = _strip_stage(_ITALIC_RE, text)
    return text, bold, italic


def _strip_stage(pattern: re.Pattern[str], text: str) -> tuple[list[_Span], str]:
    spans: list[_Span] = []
    removed = 0     # marker runes removed by earlier matches of this stage
    for m in pattern.finditer(text):
        content = _content(m)
        content_len = rune_length(content)
        start = rune_length(text[:m.start()]) - removed
        spans.append(_Span(start, start + content_len))
        removed += rune_length(m.group(0)) - content_len
    return spans, pattern.sub(_content, text)


def _content(m: re.Match[str]) -> str:
    return m.group(1) if m.group(1) is not None else m.group(2)
