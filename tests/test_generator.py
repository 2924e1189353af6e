import pytest

from terradocs.generator import (
    TemplateError,
    for_each,
    new_generator,
    with_content,
    with_footer,
    with_header,
    with_inputs,
    with_modules,
    with_outputs,
    with_providers,
    with_requirements,
    with_resources,
)

HEADER = "this is the header"
FOOTER = "this is the footer"
MD_CONTENT = "this is the header\nthis is the footer"
YAML_CONTENT = 'header: "this is the header"\nfooter: "this is the footer"'


@pytest.mark.parametrize(
    "name, expected",
    [
        ("asciidoc document", True),
        ("asciidoc table", True),
        ("markdown document", True),
        ("markdown table", True),
        ("markdown", False),
        ("markdown-table", False),
        ("md", False),
        ("md tbl", False),
        ("md-tbl", False),
        ("json", False),
        ("yaml", False),
        ("xml", False),
    ],
)
def test_is_compatible(name, expected):
    assert new_generator(name).is_compatible() is expected


def _generator(name, content):
    generator = new_generator(name)
    generator.content = content
    generator.header = HEADER
    generator.footer = FOOTER
    return generator


@pytest.mark.parametrize(
    "name, content, template, expected",
    [
        ("markdown table", MD_CONTENT, "", MD_CONTENT),
        ("markdown table", MD_CONTENT, "{{ .Header }}", "this is the header"),
        ("markdown table", MD_CONTENT, "{{ .Inputs }}", ""),
        ("yaml", YAML_CONTENT, "", YAML_CONTENT),
        ("yaml", YAML_CONTENT, "{{ .Header }}", YAML_CONTENT),
    ],
)
def test_execute_template(name, content, template, expected):
    assert _generator(name, content).execute_template(template) == expected


def test_execute_template_unknown_section():
    with pytest.raises(TemplateError):
        _generator("markdown table", MD_CONTENT).execute_template("{{ .Unknown }}")


def test_execute_template_include_file(tmp_path):
    (tmp_path / "testdata").mkdir()
    (tmp_path / "testdata" / "sample-file.txt").write_text(
        "Sample file to be included.\n", encoding="utf-8"
    )
    generator = _generator("markdown table", MD_CONTENT)
    generator.set_path(tmp_path)
    result = generator.execute_template('{{ include "testdata/sample-file.txt" }}')
    assert result == "Sample file to be included.\n"


def test_execute_template_include_unknown_file(tmp_path):
    generator = _generator("markdown table", MD_CONTENT)
    generator.set_path(tmp_path)
    with pytest.raises(TemplateError):
        generator.execute_template('{{ include "file-not-found" }}')


def test_execute_template_trim_markers():
    generator = _generator("markdown document", MD_CONTENT)
    result = generator.execute_template("  {{- .Header -}}  \n\n{{ .Footer }}")
    assert result == "this is the header" + "this is the footer"


def test_execute_template_text_around_actions():
    generator = _generator("asciidoc table", MD_CONTENT)
    result = generator.execute_template("# {{ .Header }}\n\n{{ .Footer }}\n")
    assert result == "# this is the header\n\nthis is the footer\n"


def test_execute_template_unknown_function():
    with pytest.raises(TemplateError):
        _generator("markdown table", MD_CONTENT).execute_template("{{ missing }}")


@pytest.mark.parametrize(
    "fn, attribute",
    [
        (with_content, "content"),
        (with_header, "header"),
        (with_footer, "footer"),
        (with_inputs, "inputs"),
        (with_modules, "modules"),
        (with_outputs, "outputs"),
        (with_providers, "providers"),
        (with_requirements, "requirements"),
        (with_resources, "resources"),
    ],
)
def test_generator_funcs(fn, attribute):
    generator = new_generator(attribute, fn("foo"))
    assert getattr(generator, attribute) == "foo"


def test_for_each():
    fns = []
    for_each(lambda name, fn: fns.append(fn(name)))
    generator = new_generator("foo", *fns)
    assert generator.content == "all"
    assert generator.header == "header"
    assert generator.footer == "footer"
    assert generator.inputs == "inputs"
    assert generator.modules == "modules"
    assert generator.outputs == "outputs"
    assert generator.providers == "providers"
    assert generator.requirements == "requirements"
    assert generator.resources == "resources"


def test_for_each_stops_on_error():
    seen = []

    def callback(name, fn):
        seen.append(name)
        raise RuntimeError(name)

    with pytest.raises(RuntimeError):
        for_each(callback)
    assert len(seen) == 1