"""HTML rendering of lookup results for the result view."""

import html

from dictionary_plus.models import Definition, LookupResult, Meaning


def format_result_html(result: LookupResult, show_description: bool = True) -> str:
    """Render a lookup result as rich text.

    The header (word and phonetic) is always rendered; meanings only once
    ``show_description`` is set, so the UI can reveal them after the header.

    Args:
        result: Entry to render
        show_description: Whether to include the meaning cards

    Returns:
        HTML fragment for a QTextBrowser
    """
    parts = [f"<h1>{html.escape(result.word)}"]
    if result.phonetic:
        parts.append(f' <span class="phonetic">{html.escape(result.phonetic)}</span>')
    parts.append("</h1>")

    if show_description:
        parts.extend(format_meaning_html(meaning) for meaning in result.meanings)

    return "".join(parts)


def format_meaning_html(meaning: Meaning) -> str:
    """Render one meaning as a card with its definitions."""
    parts = ['<div class="meaning">']
    if meaning.part_of_speech:
        parts.append(f"<h3>{html.escape(meaning.part_of_speech.capitalize())}</h3>")
    if meaning.definitions:
        parts.append("<ol>")
        parts.extend(f"<li>{format_definition_html(d)}</li>" for d in meaning.definitions)
        parts.append("</ol>")
    if meaning.synonyms:
        parts.append(f"<p><i>Synonyms:</i> {html.escape(', '.join(meaning.synonyms))}</p>")
    if meaning.antonyms:
        parts.append(f"<p><i>Antonyms:</i> {html.escape(', '.join(meaning.antonyms))}</p>")
    parts.append("</div>")
    return "".join(parts)


def format_definition_html(definition: Definition) -> str:
    text = html.escape(definition.text)
    if definition.example:
        text += f'<br><span class="example">{html.escape(definition.example)}</span>'
    return text
