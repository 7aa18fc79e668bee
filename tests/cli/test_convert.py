# topmark:header:start
#
#   project      : MarkOut
#   file         : test_convert.py
#   file_relpath : tests/cli/test_convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `convert` command, including its exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from markout.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit_code, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

DOC: bytes = b'<html><head><meta charset="utf-8"/></head><body><p>caf\xc3\xa9</p></body></html>'


def _write_doc(tmp_path: Path, data: bytes = DOC, name: str = "doc.xml") -> Path:
    path: Path = tmp_path / name
    path.write_bytes(data)
    return path


@mark_cli
@parametrize(
    "props, expected",
    [
        ([], '<html><head><meta charset="utf-8"/></head><body><p>café</p></body></html>'),
        (
            ["-p", "method=html", "-p", "html-version=5"],
            '<!DOCTYPE html>\n<html><head><meta charset="utf-8"></head>'
            "<body><p>café</p></body></html>",
        ),
        (["-p", "method=text"], "café"),
        (
            ["-p", "method=json"],
            '{"html":{"#children":[{"head":{"#children":[{"meta":{"@attributes":'
            '{"charset":"utf-8"}}}]}},{"body":{"#children":[{"p":"café"}]}}]}}',
        ),
    ],
)
def test_convert_to_stdout(tmp_path: Path, props: list[str], expected: str) -> None:
    """The document is written to standard output in the selected format."""
    _write_doc(tmp_path)

    result = run_cli_in(tmp_path, ["convert", "doc.xml", *props])

    assert_SUCCESS(result)
    assert result.stdout_bytes.decode("utf-8") == expected


@mark_cli
def test_output_is_encoded(tmp_path: Path) -> None:
    """Markup output uses character references for unencodable characters."""
    _write_doc(tmp_path, "<r>€</r>".encode())

    result = run_cli_in(tmp_path, ["convert", "doc.xml", "-p", "encoding=ISO-8859-1"])

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"<r>&#8364;</r>"


@mark_cli
def test_stdin_input(tmp_path: Path) -> None:
    """``-`` reads the document from standard input."""
    result = run_cli_in(tmp_path, ["convert", "-", "-p", "method=text"], input_bytes=b"<a>hi</a>")

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"hi"


@mark_cli
def test_output_file(tmp_path: Path) -> None:
    """-o writes the result to a file and -v reports it."""
    _write_doc(tmp_path, b"<a>x</a>")

    result = run_cli_in(
        tmp_path, ["--no-color", "-v", "convert", "doc.xml", "-p", "method=json", "-o", "out.json"]
    )

    assert_SUCCESS(result)
    assert (tmp_path / "out.json").read_bytes() == b'{"a":"x"}'
    assert "Wrote out.json" in result.output


@mark_cli
def test_local_property_file(tmp_path: Path) -> None:
    """./markout.toml supplies properties for convert as well."""
    _write_doc(tmp_path, b"<a>x<b>y</b></a>")
    (tmp_path / "markout.toml").write_text('[output]\nmethod = "text"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["convert", "doc.xml"])

    assert_SUCCESS(result)
    assert result.stdout_bytes == b"xy"


@mark_cli
def test_missing_input(tmp_path: Path) -> None:
    """A missing input file exits with FILE_NOT_FOUND."""
    result = run_cli_in(tmp_path, ["convert", "absent.xml"])

    assert_exit_code(result, ExitCode.FILE_NOT_FOUND)


@mark_cli
def test_malformed_input(tmp_path: Path) -> None:
    """Input that is not well-formed exits with INPUT_ERROR."""
    _write_doc(tmp_path, b"<a><b></a>")

    result = run_cli_in(tmp_path, ["convert", "doc.xml"])

    assert_exit_code(result, ExitCode.INPUT_ERROR)
    assert "not well-formed" in result.output


@mark_cli
@parametrize(
    "data, props",
    [
        (b"<a><!--c--></a>", ["-p", "method=microxml"]),
        (b"<br>x</br>", ["-p", "method=html5"]),
        ("<a>€</a>".encode(), ["-p", "method=text", "-p", "encoding=US-ASCII"]),
    ],
)
def test_unserializable_input(tmp_path: Path, data: bytes, props: list[str]) -> None:
    """Events the format cannot express exit with SERIALIZATION_ERROR."""
    _write_doc(tmp_path, data)

    result = run_cli_in(tmp_path, ["convert", "doc.xml", *props])

    assert_exit_code(result, ExitCode.SERIALIZATION_ERROR)


@mark_cli
def test_invalid_property_file(tmp_path: Path) -> None:
    """A broken --config file exits with CONFIG_ERROR."""
    _write_doc(tmp_path)
    (tmp_path / "bad.toml").write_text("output = [\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["convert", "doc.xml", "--config", "bad.toml"])

    assert_exit_code(result, ExitCode.CONFIG_ERROR)
