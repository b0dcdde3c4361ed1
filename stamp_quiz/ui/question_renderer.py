"""Label rendering utilities for displaying quiz items."""

from __future__ import annotations

from stamp_quiz.core.markdown_renderer import renderer


def render_item_label(label: str | None, font_size: int = 16) -> str:
    """Render an item label as HTML for a rich-text QLabel.

    Args:
        label: The label text (supports Markdown), may be empty
        font_size: Font size in points for the label text

    Returns:
        HTML string, or an empty string when the item has no label
    """
    return renderer.render_with_font_size(label, font_size)
