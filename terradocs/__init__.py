"""Settings, comment extraction, section templating and Markdown/AsciiDoc sanitizing for module documentation."""

__version__ = "0.1.0"