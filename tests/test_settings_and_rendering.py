import pytest

from stamp_quiz.core.errors import InvalidConfiguration
from stamp_quiz.core.markdown_renderer import MarkdownRenderer
from stamp_quiz.core.settings import QuizSettings


def test_default_settings() -> None:
    settings = QuizSettings()
    assert settings.total_seconds == 480.0
    assert (settings.start_key, settings.next_key, settings.prev_key) == ("Return", "Right", "Left")


def test_with_changes_validates() -> None:
    settings = QuizSettings()
    assert settings.with_changes(total_seconds=60.0).total_seconds == 60.0
    with pytest.raises(InvalidConfiguration):
        settings.with_changes(next_key="Left")
    with pytest.raises(InvalidConfiguration):
        settings.with_changes(total_seconds=0)


def test_render_label_markdown() -> None:
    renderer = MarkdownRenderer()
    html = renderer.render_fragment("**森** is three trees")
    assert "<strong>森</strong>" in html


def test_empty_label_renders_nothing() -> None:
    renderer = MarkdownRenderer()
    assert renderer.render_fragment(None) == ""
    assert renderer.render_with_font_size("   ", 18) == ""


def test_render_with_font_size() -> None:
    html = MarkdownRenderer().render_with_font_size("日 + 月", 18)
    assert html.startswith('<div style="font-size: 18pt;">')
    assert "日 + 月" in html
