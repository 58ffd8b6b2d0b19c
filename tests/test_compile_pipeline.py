from pathlib import Path

import pytest

from htmlisp.compile_pipeline import compile_file, compile_source, compile_with_config
from htmlisp.config import CompilerConfig
from htmlisp.errors import (
    CompileError,
    CreateOutputError,
    HtmlispSyntaxError,
    ParseInputError,
    ReadInputError,
)

SOURCE = '(div (class "greeting") "Hello, " (b "world") "!")'


def test_compile_source_modes() -> None:
    assert compile_source(SOURCE) == '<div class="greeting">Hello, <b>world</b>!</div>'
    assert compile_source(SOURCE, prettify=True, indent="\t") == (
        '<div class="greeting">\n\tHello, \n\t<b>world</b>\n\t!\n</div>\n'
    )


def test_compile_source_propagates_syntax_errors() -> None:
    with pytest.raises(HtmlispSyntaxError):
        compile_source("(div")


def test_compile_file_creates_parent_directories(tmp_path: Path) -> None:
    source = tmp_path / "page.htmlisp"
    source.write_text(SOURCE, encoding="utf-8")
    output = tmp_path / "out" / "nested" / "page.html"

    result = compile_file(source, output)

    assert output.read_text(encoding="utf-8") == result.html
    assert result.input_file == source
    assert result.output_file == output


def test_compile_file_overwrites_existing_output(tmp_path: Path) -> None:
    source = tmp_path / "page.htmlisp"
    source.write_text('(p "new")', encoding="utf-8")
    output = tmp_path / "page.html"
    output.write_text("old content that is longer", encoding="utf-8")

    compile_file(source, output)

    assert output.read_text(encoding="utf-8") == "<p>new</p>"


def test_missing_input_is_a_read_error(tmp_path: Path) -> None:
    with pytest.raises(ReadInputError) as excinfo:
        compile_file(tmp_path / "missing.htmlisp", tmp_path / "out.html")
    assert str(excinfo.value).startswith("Failed to read input file\n(")
    assert not (tmp_path / "out.html").exists()


def test_syntax_error_leaves_no_output(tmp_path: Path) -> None:
    source = tmp_path / "bad.htmlisp"
    source.write_text('(p "x"', encoding="utf-8")
    output = tmp_path / "out.html"

    with pytest.raises(ParseInputError) as excinfo:
        compile_file(source, output)

    assert str(excinfo.value).startswith("Failed to parse input file")
    assert isinstance(excinfo.value.cause, HtmlispSyntaxError)
    assert not output.exists()


def test_unwritable_output_location_is_a_create_error(tmp_path: Path) -> None:
    source = tmp_path / "page.htmlisp"
    source.write_text('(p "x")', encoding="utf-8")
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(CreateOutputError) as excinfo:
        compile_file(source, blocker / "page.html")
    assert isinstance(excinfo.value, CompileError)
    assert str(excinfo.value).startswith("Failed to create output file")


def test_compile_with_config_uses_prettify_and_indent(tmp_path: Path) -> None:
    source = tmp_path / "page.htmlisp"
    source.write_text('(ul "x" (li "a"))', encoding="utf-8")
    output = tmp_path / "page.html"
    config = CompilerConfig(input_file=source, output_file=output, prettify=True, indent=4)

    compile_with_config(config)

    assert output.read_text(encoding="utf-8") == "<ul>\n    x\n    <li>a</li>\n</ul>\n"


def test_compile_file_handles_deep_nesting(tmp_path: Path) -> None:
    depth = 2000
    source = tmp_path / "deep.htmlisp"
    source.write_text("(div " * depth + ")" * depth, encoding="utf-8")
    output = tmp_path / "deep.html"

    compile_file(source, output)

    assert output.read_text(encoding="utf-8") == "<div>" * depth + "</div>" * depth
