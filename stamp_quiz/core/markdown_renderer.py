"""Markdown rendering helpers for question labels.

Labels are authored in Markdown inside the quiz file and rendered to an
HTML fragment that Qt's rich-text labels can display directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown label text into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html, "breaks": True})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str | None) -> str:
        """Render a markdown string into an HTML fragment, or '' for an empty label."""

        sanitized = (markdown_text or "").strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)

    def render_with_font_size(self, markdown_text: str | None, font_size: int) -> str:
        """Render a label wrapped in a div that sets the display font size."""

        fragment = self.render_fragment(markdown_text)
        if not fragment:
            return ""
        return f'<div style="font-size: {font_size}pt;">{fragment}</div>'


renderer = MarkdownRenderer()
# Shared instance to avoid rebuilding MarkdownIt for every question.
