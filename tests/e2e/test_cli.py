"""End-to-end tests for the connectflow command line."""

from pathlib import Path

from click.testing import CliRunner

from connectflow.__main__ import main

SCENE = """\
scene
A[0, 0, 100, 50] "Start"
B[200, 0, 100, 50] "End"
C[0, 100, 50, 50]
A --> B
A.bottom -->|orthogonal| C
"""


def run(args: list[str], stdin: str | None = SCENE):
    return CliRunner().invoke(main, args, input=stdin)


def test_svg_from_stdin():
    result = run([])
    assert result.exit_code == 0
    assert result.output.startswith("<svg ")
    assert result.output.count("<rect ") == 3
    assert result.output.count("<path ") == 2


def test_paths_listing():
    result = run(["--paths"])
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "A -> B: M 100 25 L 200 25",
        "A -> C: M 50 50 L 50 75 L 25 75 L 25 100",
    ]


def test_type_override_keeps_per_connector_types():
    result = run(["--paths", "--type", "orthogonal"])
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "A -> B: M 100 25 L 150 25 L 150 25 L 200 25"


def test_curve_paths_use_cubic_segments():
    result = run(["--paths", "-t", "curve"])
    assert result.exit_code == 0
    assert " C " in result.output.splitlines()[0]


def test_input_file_and_output_file(tmp_path: Path):
    src = tmp_path / "scene.txt"
    src.write_text(SCENE)
    out = tmp_path / "scene.svg"
    result = run([str(src), "-o", str(out), "--color", "#336699"], stdin=None)
    assert result.exit_code == 0
    assert result.output == ""
    svg = out.read_text()
    assert 'stroke="#336699"' in svg
    assert "<text " in svg


def test_parse_error_exits_nonzero():
    result = run([], stdin="A[0, 0, 10]\n")
    assert result.exit_code == 1
    assert "parse error" in result.output


def test_undeclared_shape_exits_nonzero():
    result = run([], stdin="A[0, 0, 10, 10]\nA --> Z\n")
    assert result.exit_code == 1
    assert "undeclared shape 'Z'" in result.output


def test_invalid_color_exits_nonzero():
    result = run(["--color", "blue"])
    assert result.exit_code == 1
    assert "Invalid color" in result.output


def test_unknown_type_rejected_by_cli():
    result = run(["--type", "zigzag"])
    assert result.exit_code == 2
