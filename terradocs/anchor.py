"""Named anchors for Markdown and AsciiDoc documents."""

from __future__ import annotations

from terradocs.sanitizer import sanitize_name
from terradocs.settings import Settings


def create_anchor_markdown(section_type: str, name: str, settings: Settings) -> str:
    """Return ``name`` as a Markdown link to its own anchor, if anchors are shown."""
    sanitized_name = sanitize_name(name, settings)
    if not settings.show_anchor:
        return sanitized_name
    anchor_name = f"{section_type}_{name}"
    sanitized_anchor = sanitize_name(anchor_name, settings)
    # The <a> name is left unescaped; escaping it breaks Markdown formatting.
    return f'<a name="{anchor_name}"></a> [{sanitized_name}](#{sanitized_anchor})'


def create_anchor_asciidoc(section_type: str, name: str, settings: Settings) -> str:
    """Return ``name`` as an AsciiDoc cross reference to its own anchor."""
    sanitized_name = sanitize_name(name, settings)
    if not settings.show_anchor:
        return sanitized_name
    sanitized_anchor = sanitize_name(f"{section_type}_{name}", settings)
    return f"[[{sanitized_anchor}]] <<{sanitized_anchor},{sanitized_name}>>"