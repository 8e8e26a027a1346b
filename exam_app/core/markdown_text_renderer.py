"""Markdown to plain-text rendering for the terminal.

Architecture note:
    Question bodies and answer texts are authored as Markdown so the same
    source reads well in any future rich client. The console cannot show
    markup, so the renderer walks the markdown-it token stream and keeps only
    the readable text: emphasis markers disappear, list items keep a bullet,
    code blocks are passed through verbatim. Math delimiters such as ``$x$``
    are plain text to commonmark and survive untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt
from markdown_it.token import Token

_BULLET = "- "


@dataclass(slots=True)
class MarkdownTextRenderer:
    """Flattens Markdown into plain text lines suitable for a terminal."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render(self, markdown_text: str) -> str:
        """Render a markdown string into plain text."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""

        blocks: list[str] = []
        prefix = ""
        for token in self._markdown.parse(sanitized):
            if token.type == "list_item_open":
                prefix = f"{token.info}. " if token.info else _BULLET
            elif token.type == "inline":
                blocks.append(prefix + _flatten_inline(token.children or []))
                prefix = ""
            elif token.type in ("fence", "code_block"):
                blocks.append(token.content.rstrip("\n"))
        return "\n".join(block for block in blocks if block)


def _flatten_inline(children: list[Token]) -> str:
    parts: list[str] = []
    for child in children:
        if child.type in ("text", "code_inline", "html_inline", "image"):
            parts.append(child.content)
        elif child.type == "softbreak":
            parts.append(" ")
        elif child.type == "hardbreak":
            parts.append("\n")
    return "".join(parts)


renderer = MarkdownTextRenderer()
# Shared instance; MarkdownIt is safe to reuse for read-only renders.
