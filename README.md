# terradocs

Building blocks for producing documentation of infrastructure-as-code
modules in Markdown and AsciiDoc. The package has no dependencies beyond
the Python standard library (Python 3.10 or later).

## Modules

### `terradocs.settings`

- `Settings` – a dataclass with every print option (`escape_characters`,
  `indent_level`, `show_anchor`, `show_html`, `show_header`, `show_footer`,
  `show_inputs`, `show_module_calls`, `show_outputs`, `show_providers`,
  `show_requirements`, `show_resources`, `show_data_sources`, and so on).
  The field defaults are the default values; `show_footer`,
  `show_description` and `output_values` are off, the rest of the flags on,
  and `indent_level` is 2.
- `default_settings()` – a fresh `Settings` with those defaults.
- `copy_sections(settings, src, dest)` – copies `header`, `footer`,
  `inputs`, `module_calls`, `outputs`, `providers` and `requirements` from
  one module object to another when the matching `show_*` flag is set, and
  `resources` (filtered) when resources or data sources are shown.
- `filter_resources_by_mode(settings, resources)` – keeps resources whose
  `mode` is `"managed"` (if `show_resources`) or `"data"` (if
  `show_data_sources`), in their original order.

### `terradocs.lines`

`Lines(condition, parser, file_name="", line_num=-1)` collects a run of
matching lines, such as a leading comment block.

- `extract()` reads `file_name`; `extract_from(stream)` reads an open text
  stream.
- With `line_num == -1` lines are read from the start and reading stops at
  the first line for which `condition` is false.
- With any other `line_num`, the lines before line `line_num` are read and
  only the block of matching lines directly above it is kept.
- `parser(line)` returns `(text, capture)`; `text` is kept when `capture`
  is true.
- `LinesError` (a `ValueError`) is raised for too short input, with the
  messages `"no lines in file"`, `"only 1 line"` or `"only N lines"`.
  A missing file raises the usual `OSError`.

### `terradocs.generator`

- `Generator` – a dataclass holding the name of the formatter, the
  rendered sections (`header`, `footer`, `inputs`, `modules`, `outputs`,
  `providers`, `requirements`, `resources`), the combined `content` and the
  module `path`.
- `Generator.is_compatible()` – true only for the formatters
  `"asciidoc document"`, `"asciidoc table"`, `"markdown document"` and
  `"markdown table"`.
- `Generator.execute_template(template)` – returns `content` unchanged when
  the template is empty or the formatter is not compatible; otherwise
  renders the template. Templates understand `{{ .Header }}`,
  `{{ .Footer }}`, `{{ .Inputs }}`, `{{ .Modules }}`, `{{ .Outputs }}`,
  `{{ .Providers }}`, `{{ .Requirements }}`, `{{ .Resources }}`,
  `{{ include "file" }}` (read relative to the path set with
  `Generator.set_path(root)`), string literals, pipelines with `|`,
  `{{-`/`-}}` whitespace trimming and `{{/* comments */}}`. Unknown
  fields, unknown functions, unreadable include files and malformed
  actions raise `TemplateError`.
- `with_content`, `with_header`, `with_footer`, `with_inputs`,
  `with_modules`, `with_outputs`, `with_providers`, `with_requirements`,
  `with_resources` – each returns a function that sets that part of a
  `Generator`.
- `new_generator(name, *funcs)` – creates a `Generator` for formatter
  `name` and applies the given setters.
- `for_each(callback)` – calls `callback(name, setter_factory)` for the
  sections `all`, `header`, `footer`, `inputs`, `modules`, `outputs`,
  `providers`, `requirements` and `resources`; an exception from the
  callback stops the loop and propagates.
- `Engine` – a protocol for objects with a `generate(module)` method that
  returns a `Generator`.

### `terradocs.sanitizer`

- `sanitize_name(name, settings)` – escapes `_` as `\_` when
  `escape_characters` is on.
- `sanitize_section(s, settings)` and `sanitize_document(s, settings)` –
  prepare free text for a document; code fenced with triple backticks is
  left alone. The section variant keeps line breaks exactly as given.
- `sanitize_markdown_table(s, settings)` – prepares text for one Markdown
  table cell: pipes are escaped, line breaks become `<br>` (or spaces when
  `show_html` is off), and code blocks become `<pre>…</pre>` (or one-line
  inline code).
- `sanitize_asciidoc_table(s, settings)` – prepares text for one AsciiDoc
  table cell; code blocks become `[source]` listings.
- All four return `"n/a"` for an empty string.
- Lower-level helpers: `convert_multi_line_text`,
  `convert_one_line_code_block`, `escape_illegal_characters`,
  `normalize_urls` (removes escaping backslashes from URLs),
  `process_segments` and `execute_per_line`.

### `terradocs.anchor`

- `create_anchor_markdown(section_type, name, settings)` and
  `create_anchor_asciidoc(section_type, name, settings)` – return the
  (escaped) name, wrapped in a link to an anchor named
  `<section_type>_<name>` when `show_anchor` is on.

## Installation

```
pip install terradocs
```

## Examples

```python
from terradocs.settings import default_settings
from terradocs.anchor import create_anchor_markdown
from terradocs.sanitizer import sanitize_markdown_table

settings = default_settings()
print(create_anchor_markdown("module", "my_module", settings))
# <a name="module_my_module"></a> [my\_module](#module\_my\_module)

print(sanitize_markdown_table("First line\n\n| a | b |", settings))
# First line<br><br>\| a \| b \|
```

Extracting a leading comment block:

```python
from terradocs.lines import Lines

reader = Lines(
    file_name="main.tf",
    line_num=-1,
    condition=lambda line: line.strip().startswith("#"),
    parser=lambda line: (line.strip().lstrip("#").strip(), True),
)
print(" ".join(reader.extract()))
```

Combining sections with a content template:

```python
from terradocs.generator import new_generator, with_header, with_inputs

gen = new_generator("markdown table", with_header("# Title"), with_inputs("..."))
print(gen.execute_template("{{ .Header }}\n\n{{ .Inputs }}"))
# # Title
#
# ...
```

## What the package does not do

It is a library of pieces, not a finished documentation tool. It has no
command-line program, it does not read module source files to discover
variables, outputs, providers or resources, and it has no formatters that
turn such a module into complete Markdown, AsciiDoc, JSON or YAML output.
The sections a `Generator` holds have to be rendered by the caller, and
`copy_sections` works on any objects that carry the listed attributes.

## Running the tests

```
pip install terradocs[test]
pytest
```