"""Rendering settings and section selection for a documented module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

_MANAGED = "managed"
_DATA = "data"


@dataclass
class Settings:
    """Options that control which sections are shown and how they are rendered.

    Field defaults are the documented defaults of every option.
    """

    escape_characters: bool = True
    indent_level: int = 2
    output_values: bool = False
    show_anchor: bool = True
    show_color: bool = True
    show_data_sources: bool = True
    show_default: bool = True
    show_description: bool = False
    show_footer: bool = False
    show_header: bool = True
    show_html: bool = True
    show_inputs: bool = True
    show_module_calls: bool = True
    show_outputs: bool = True
    show_providers: bool = True
    show_required: bool = True
    show_sensitivity: bool = True
    show_requirements: bool = True
    show_resources: bool = True
    show_type: bool = True


def default_settings() -> Settings:
    """Return a new Settings instance holding the default values."""
    return Settings()


_SECTION_FLAGS = (
    ("show_header", "header"),
    ("show_footer", "footer"),
    ("show_inputs", "inputs"),
    ("show_module_calls", "module_calls"),
    ("show_outputs", "outputs"),
    ("show_providers", "providers"),
    ("show_requirements", "requirements"),
)


def copy_sections(settings: Settings, src: Any, dest: Any) -> None:
    """Copy the sections enabled in ``settings`` from ``src`` onto ``dest``."""
    for flag, attribute in _SECTION_FLAGS:
        if getattr(settings, flag):
            setattr(dest, attribute, getattr(src, attribute))
    if settings.show_resources or settings.show_data_sources:
        dest.resources = filter_resources_by_mode(settings, src.resources)


def filter_resources_by_mode(settings: Settings, resources: Iterable[Any]) -> list:
    """Keep managed resources and/or data sources, as the settings ask."""
    return [
        resource
        for resource in resources
        if (settings.show_resources and resource.mode == _MANAGED)
        or (settings.show_data_sources and resource.mode == _DATA)
    ]