"""
conversion — translation between the structured document model and Markdown.

Public API:
  rune_length(text)                        -> int
  render_markdown(doc, options)            -> str
  compile_markdown(markdown, start_index)  -> CompiledBatch
  parse_color(text)                        -> RgbColor | None
  require_color(text)                      -> RgbColor
"""

from .index import FIRST_INDEX, advance, rune_length
from .colors import parse_color, require_color
from .render import RenderOptions, render_markdown
from .compile import CompiledBatch, compile_markdown, parse_inline

__all__ = [
    "FIRST_INDEX",
    "advance",
    "rune_length",
    "parse_color",
    "require_color",
    "RenderOptions",
    "render_markdown",
    "CompiledBatch",
    "compile_markdown",
    "parse_inline",
]
