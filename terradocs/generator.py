"""Generated documentation sections and optional content templating."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Protocol

_COMPATIBLE_FORMATTERS = frozenset(
    {"asciidoc document", "asciidoc table", "markdown document", "markdown table"}
)

_TEMPLATE_FIELDS = {
    "Header": "header",
    "Footer": "footer",
    "Inputs": "inputs",
    "Modules": "modules",
    "Outputs": "outputs",
    "Providers": "providers",
    "Requirements": "requirements",
    "Resources": "resources",
}

_ACTION = re.compile(r"\{\{(?P<lt>-\s)?(?P<body>.*?)(?P<rt>\s-)?\}\}", re.DOTALL)
_LEXEME = re.compile(
    r"\s*(?:"
    r'(?P<str>"(?:[^"\\\n]|\\.)*")'
    r"|(?P<raw>`[^`]*`)"
    r"|(?P<field>\.[A-Za-z_]\w*)"
    r"|(?P<pipe>\|)"
    r"|(?P<ident>[A-Za-z_]\w*)"
    r")"
)
_ESCAPE = re.compile(r"\\(.)")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\", "'": "'"}
_TRIM = " \t\r\n"
_MISSING = object()

_Lexeme = tuple[str, str]


class TemplateError(Exception):
    """Raised when a content template cannot be parsed or executed."""


class Engine(Protocol):
    """A format engine that renders a module into a Generator."""

    def generate(self, module: Any) -> "Generator": ...


@dataclass
class Generator:
    """All generated sections of a module plus the combined content.

    With a content template the sections can be arranged freely, but only for
    the asciidoc and markdown document and table formatters.
    """

    formatter: str
    header: str = ""
    footer: str = ""
    inputs: str = ""
    modules: str = ""
    outputs: str = ""
    providers: str = ""
    requirements: str = ""
    resources: str = ""
    path: str = ""
    content: str = ""

    def set_path(self, root: str | Path) -> None:
        """Set the module directory used to resolve ``include`` calls."""
        self.path = str(root)

    def is_compatible(self) -> bool:
        """Whether the formatter supports custom content templates."""
        return self.formatter in _COMPATIBLE_FORMATTERS

    def execute_template(self, template: str) -> str:
        """Render ``template`` against the sections, or return the content as is."""
        if not self.is_compatible() or template == "":
            return self.content
        return self._render(template)

    def _render(self, template: str) -> str:
        parts: list[str] = []
        pos = 0
        trim_next = False
        for match in _ACTION.finditer(template):
            text = template[pos : match.start()]
            if trim_next:
                text = text.lstrip(_TRIM)
            if match.group("lt"):
                text = text.rstrip(_TRIM)
            parts.append(text)
            parts.append(self._evaluate(match.group("body")))
            trim_next = bool(match.group("rt"))
            pos = match.end()
        tail = template[pos:]
        if "{{" in tail:
            raise TemplateError("unclosed action")
        if trim_next:
            tail = tail.lstrip(_TRIM)
        parts.append(tail)
        return "".join(parts)

    def _evaluate(self, body: str) -> str:
        stripped = body.strip()
        if stripped.startswith("/*") and stripped.endswith("*/"):
            return ""
        commands = _split_pipeline(_lex(body))
        value: Any = _MISSING
        for command in commands:
            value = self._run_command(command, value)
        return str(value)

    def _run_command(self, lexemes: list[_Lexeme], piped: Any) -> Any:
        kind, text = lexemes[0]
        if kind == "ident":
            args = [self._argument(item) for item in lexemes[1:]]
            if piped is not _MISSING:
                args.append(piped)
            return self._call(text, args)
        if len(lexemes) > 1 or piped is not _MISSING:
            raise TemplateError(f"can't give argument to non-function {text}")
        return self._argument(lexemes[0])

    def _argument(self, item: _Lexeme) -> Any:
        kind, text = item
        if kind == "str":
            return _unquote(text)
        if kind == "raw":
            return text[1:-1]
        if kind == "field":
            name = text[1:]
            attribute = _TEMPLATE_FIELDS.get(name)
            if attribute is None:
                raise TemplateError(f"can't evaluate field {name}")
            return getattr(self, attribute)
        raise TemplateError(f"unexpected {text!r} in operand")

    def _call(self, name: str, args: list[Any]) -> Any:
        if name != "include":
            raise TemplateError(f'function "{name}" not defined')
        if len(args) != 1:
            raise TemplateError(f"wrong number of args for include: want 1 got {len(args)}")
        target = Path(self.path) / str(args[0])
        try:
            return target.read_text(encoding="utf-8")
        except OSError as err:
            raise TemplateError(f"error calling include: {err}") from err


def _lex(body: str) -> list[_Lexeme]:
    lexemes: list[_Lexeme] = []
    pos = 0
    end = len(body.rstrip())
    while pos < end:
        match = _LEXEME.match(body, pos)
        if match is None or match.end() == pos:
            raise TemplateError(f"unexpected character in action: {body[pos:].strip()!r}")
        kind = match.lastgroup
        lexemes.append((kind, match.group(kind)))
        pos = match.end()
    if not lexemes:
        raise TemplateError("missing value for command")
    return lexemes


def _split_pipeline(lexemes: list[_Lexeme]) -> list[list[_Lexeme]]:
    commands: list[list[_Lexeme]] = [[]]
    for item in lexemes:
        if item[0] == "pipe":
            commands.append([])
        else:
            commands[-1].append(item)
    if any(not command for command in commands):
        raise TemplateError("missing command in pipeline")
    return commands


def _unquote(literal: str) -> str:
    def replace(match: re.Match) -> str:
        char = match.group(1)
        if char not in _ESCAPES:
            raise TemplateError(f"unknown escape sequence: \\{char}")
        return _ESCAPES[char]

    return _ESCAPE.sub(replace, literal[1:-1])


GenerateFunc = Callable[[Generator], None]
GeneratorCallback = Callable[[str], GenerateFunc]


def _assign(attribute: str, value: str) -> GenerateFunc:
    def apply(generator: Generator) -> None:
        setattr(generator, attribute, value)

    return apply


def with_content(content: str) -> GenerateFunc:
    """Set the combined content of the Generator."""
    return _assign("content", content)


def with_header(header: str) -> GenerateFunc:
    """Set the header section."""
    return _assign("header", header)


def with_footer(footer: str) -> GenerateFunc:
    """Set the footer section."""
    return _assign("footer", footer)


def with_inputs(inputs: str) -> GenerateFunc:
    """Set the inputs section."""
    return _assign("inputs", inputs)


def with_modules(modules: str) -> GenerateFunc:
    """Set the modules section."""
    return _assign("modules", modules)


def with_outputs(outputs: str) -> GenerateFunc:
    """Set the outputs section."""
    return _assign("outputs", outputs)


def with_providers(providers: str) -> GenerateFunc:
    """Set the providers section."""
    return _assign("providers", providers)


def with_requirements(requirements: str) -> GenerateFunc:
    """Set the requirements section."""
    return _assign("requirements", requirements)


def with_resources(resources: str) -> GenerateFunc:
    """Set the resources section."""
    return _assign("resources", resources)


def new_generator(name: str, *args: GenerateFunc) -> Generator:
    """Create a Generator for formatter ``name`` and apply each configurer."""
    generator = Generator(formatter=name)
    for apply in args:
        apply(generator)
    return generator


_SECTIONS: dict[str, GeneratorCallback] = {
    "all": with_content,
    "header": with_header,
    "footer": with_footer,
    "inputs": with_inputs,
    "modules": with_modules,
    "outputs": with_outputs,
    "providers": with_providers,
    "requirements": with_requirements,
    "resources": with_resources,
}


def for_each(callback: Callable[[str, GeneratorCallback], None]) -> None:
    """Call ``callback`` with every section name and its configurer factory.

    An exception raised by the callback stops the iteration and propagates.
    """
    for name, factory in _SECTIONS.items():
        callback(name, factory)