"""Tests for result HTML rendering."""

from dictionary_plus.gui.result_formatter import format_result_html
from dictionary_plus.models import Definition, LookupResult, Meaning


def _make_result():
    return LookupResult(
        word="run",
        phonetic="/ɹʌn/",
        meanings=[
            Meaning(
                "verb",
                [Definition("To move swiftly.", "Run home!")],
                synonyms=["sprint"],
            ),
            Meaning(None, [Definition("A <brisk> pace.")]),
        ],
    )


class TestFormatResultHtml:
    """Tests for format_result_html."""

    def test_header_always_rendered(self):
        html = format_result_html(_make_result(), show_description=False)
        assert "<h1>run" in html
        assert "/ɹʌn/" in html
        assert "To move swiftly." not in html

    def test_meanings_rendered_when_revealed(self):
        html = format_result_html(_make_result(), show_description=True)
        assert "<h3>Verb</h3>" in html
        assert "To move swiftly." in html
        assert "Run home!" in html
        assert "sprint" in html

    def test_text_is_escaped(self):
        html = format_result_html(_make_result())
        assert "&lt;brisk&gt;" in html
        assert "<brisk>" not in html

    def test_no_phonetic(self):
        html = format_result_html(LookupResult(word="x"))
        assert 'class="phonetic"' not in html
