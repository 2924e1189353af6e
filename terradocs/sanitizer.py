"""Conversion of free text into Markdown and AsciiDoc safe representations."""

from __future__ import annotations

import functools
import re
from typing import Callable

from terradocs.settings import Settings

SegmentCallback = Callable[[str, bool, bool], str]

_CODE_FENCE = "```"
_INLINE_CODE = "`"
_NOT_AVAILABLE = "n/a"
_PLACEHOLDER = "‡‡‡DONTESCAPE‡‡‡"

# Whitespace as understood by the Markdown conventions used here (ASCII only).
_WS = r"[\t\n\f\r ]"
_NON_WS = r"[^\t\n\f\r ]"
_WORD = r"[0-9A-Za-z_]"

_LINE_CONTINUATION = re.compile(rf"({_NON_WS}*)(\r?\n)({_WS}*)({_WORD}+)")
_ASSIGNMENT = re.compile(rf"({_WS}*)=({_WS}*)")
_URL = re.compile(
    r"(?:[A-Za-z][A-Za-z0-9+.\-]*://|mailto:|tel:|sms:|xmpp:|magnet:)[^\s<>\"'`]+"
)
_URL_TRAILING = ".,:;!?'\""


def sanitize_name(name: str, settings: Settings) -> str:
    """Escape underscores, which have a special meaning in Markdown."""
    if settings.escape_characters:
        return name.replace("_", "\\_")
    return name


def _wrap_code_fence(segment: str, first: bool, last: bool) -> str:
    line_break = "" if segment.endswith("\n") else "\n"
    return f"{_CODE_FENCE}{segment}{line_break}{_CODE_FENCE}"


def _sanitize_block(s: str, settings: Settings, is_header: bool) -> str:
    if s == "":
        return _NOT_AVAILABLE

    def normal(segment: str, first: bool, last: bool) -> str:
        segment = escape_illegal_characters(segment, settings, False)
        segment = convert_multi_line_text(segment, False, is_header, settings.show_html)
        return normalize_urls(segment, settings)

    return process_segments(s, _CODE_FENCE, normal, _wrap_code_fence)


def sanitize_section(s: str, settings: Settings) -> str:
    """Prepare a header or footer section; line endings are kept as given."""
    return _sanitize_block(s, settings, True)


def sanitize_document(s: str, settings: Settings) -> str:
    """Prepare text for use in a Markdown or AsciiDoc document."""
    return _sanitize_block(s, settings, False)


def sanitize_markdown_table(s: str, settings: Settings) -> str:
    """Prepare text for use inside a single Markdown table cell."""
    if s == "":
        return _NOT_AVAILABLE

    def normal(segment: str, first: bool, last: bool) -> str:
        segment = escape_illegal_characters(segment, settings, True)
        segment = convert_multi_line_text(segment, True, False, settings.show_html)
        return normalize_urls(segment, settings)

    def code(segment: str, first: bool, last: bool) -> str:
        segment = segment.strip()
        if settings.show_html:
            line_break, code_start, code_end = "<br>", "<pre>", "</pre>"
        else:
            line_break = ""
            code_start = _CODE_FENCE if first else " " + _CODE_FENCE
            code_end = _CODE_FENCE if last else _CODE_FENCE + " "
            segment = convert_one_line_code_block(segment)
        segment = segment.replace("\n", line_break).replace("\r", "")
        return f"{code_start}{segment}{code_end}"

    return process_segments(s, _CODE_FENCE, normal, code)


def sanitize_asciidoc_table(s: str, settings: Settings) -> str:
    """Prepare text for use inside a single AsciiDoc table cell."""
    if s == "":
        return _NOT_AVAILABLE

    def normal(segment: str, first: bool, last: bool) -> str:
        segment = escape_illegal_characters(segment, settings, True)
        return normalize_urls(segment, settings)

    def code(segment: str, first: bool, last: bool) -> str:
        return f"[source]\n----\n{segment.strip()}\n----"

    return process_segments(s, _CODE_FENCE, normal, code)


def convert_multi_line_text(s: str, is_table: bool, is_header: bool, show_html: bool) -> str:
    """Convert multi-line text into its Markdown representation.

    A line break followed by a line starting with a word becomes the Markdown
    hard break (two spaces and a newline); lists are left alone. In tables all
    line breaks become ``<br>`` or a space.
    """
    if is_table:
        s = s.strip()

    if not is_header:
        s = _LINE_CONTINUATION.sub(r"\1  \2\3\4", s)
        s = s.replace("    \n", "  \n")
        s = s.replace("  \n\n", "\n\n")
        s = s.replace("\n  \n", "\n\n")

    if not is_table:
        return s

    line_break = "<br>" if show_html else " "
    return s.replace("  \n", line_break).replace("\n", line_break)


def convert_one_line_code_block(s: str) -> str:
    """Join the non-blank lines of a code block into one line."""
    return " ".join(
        _ASSIGNMENT.sub(" = ", line).lstrip()
        for line in s.split("\n")
        if line.strip()
    )


@functools.lru_cache(maxsize=None)
def _protection_patterns(char: str) -> tuple[tuple[re.Pattern, tuple[int, ...]], ...]:
    c = re.escape(char)
    return (
        (re.compile(rf"^({_WS}*)({c}+)({_WS}+)(.*)"), (2,)),
        (
            re.compile(
                rf"({_WS}+)({c}+)([^\t\n\f\r {c}])(.*)([^\t\n\f\r {c}])({c}+)({_WS}+)"
            ),
            (6, 2),
        ),
    )


def _escape_char(line: str, char: str) -> str:
    """Escape ``char`` in ``line`` except where it marks emphasis or a list."""
    for pattern, groups in _protection_patterns(char):
        for match in list(pattern.finditer(line)):
            for group in groups:
                start, end = match.span(group)
                protected = match.group(group).replace(char, _PLACEHOLDER)
                line = line[:start] + protected + line[end:]
    return line.replace(char, "\\" + char).replace(_PLACEHOLDER, char)


def _wrap_inline_code(segment: str, first: bool, last: bool) -> str:
    return f"{_INLINE_CODE}{segment}{_INLINE_CODE}"


def escape_illegal_characters(s: str, settings: Settings, escape_pipe: bool) -> str:
    """Escape characters with a special meaning in Markdown, outside inline code."""
    if escape_pipe:
        s = process_segments(
            s,
            _INLINE_CODE,
            lambda segment, first, last: segment.replace("|", "\\|"),
            _wrap_inline_code,
        )

    if settings.escape_characters:
        s = process_segments(
            s,
            _INLINE_CODE,
            lambda segment, first, last: execute_per_line(
                segment, lambda line: _escape_char(line, "_")
            ),
            _wrap_inline_code,
        )

    return s


def normalize_urls(s: str, settings: Settings) -> str:
    """Remove escaping backslashes that an earlier step put inside URLs."""
    if not settings.escape_characters:
        return s
    for found in _URL.findall(s):
        url = found.rstrip(_URL_TRAILING)
        if url:
            s = s.replace(url, url.replace("\\", ""))
    return s


def process_segments(
    s: str, prefix: str, normal_fn: SegmentCallback, code_fn: SegmentCallback
) -> str:
    """Split ``s`` on ``prefix`` and handle text and code segments in turn.

    Each callback receives the segment and whether it is the first or last
    non-blank piece around it. Empty segments are dropped without switching
    between text and code.
    """
    in_code = s.startswith(prefix)
    segments = s.split(prefix)
    result: list[str] = []
    for index, segment in enumerate(segments):
        if not segment:
            continue
        first = index == 0 or not segments[index - 1].strip()
        last = index == len(segments) - 1 or not segments[index + 1].strip()
        handler = code_fn if in_code else normal_fn
        result.append(handler(segment, first, last))
        in_code = not in_code
    return "".join(result)


def execute_per_line(s: str, fn: Callable[[str], str]) -> str:
    """Apply ``fn`` to every line of ``s`` and join the results back."""
    return "\n".join(fn(line) for line in s.split("\n"))