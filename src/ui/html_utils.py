"""Utilities for preparing HTML snippets before rendering in Streamlit."""
from html import escape
from textwrap import dedent
from typing import Iterable


def html_block(template: str) -> str:
    """
    Normalize multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Streamlit's Markdown renderer interprets lines with >=4 leading spaces as
    code blocks. We dedent and strip leading whitespace on each line to avoid
    that while keeping the markup intact.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def section_header_html(icon: str, title: str, subtitle: str = "") -> str:
    """Heading used at the top of each form section."""
    subtitle_html = f"<p class='section-subtitle'>{escape(subtitle)}</p>" if subtitle else ""
    return html_block(f"""
        <div class="form-section-header">
            <span class="section-icon">{icon}</span>
            <h3>{escape(title)}</h3>
            {subtitle_html}
        </div>
    """)


def field_error_html(message: str) -> str:
    """Small red message rendered under an invalid field."""
    return f"<p class='field-error'>{escape(message)}</p>"


def chip_list_html(items: Iterable[str]) -> str:
    """Render a sequence of labels as inline chips."""
    chips = "".join(f"<span class='chip'>{escape(item)}</span>" for item in items)
    return f"<div class='chip-list'>{chips}</div>"
