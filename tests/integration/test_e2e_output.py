"""End-to-end tests that run the CLI on scene files and check the markup."""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from typer.testing import CliRunner

from svgdoc import __version__
from svgdoc.cli.app import app

runner = CliRunner()

SCENE = {
    "shapes": [
        {"type": "circle", "center": [20, 30], "radius": 15},
        {"type": "polyline", "points": [[0, 0], [10, 10]]},
        {
            "type": "text",
            "position": [35, 20],
            "offset": [0, 6],
            "font_size": 12,
            "font_family": "Verdana",
            "data": "Tom & 'Jerry' <3",
        },
    ]
}


@pytest.fixture
def scene_path(tmp_path: Path) -> Path:
    path = tmp_path / "drawing.json"
    path.write_text(json.dumps(SCENE), encoding="utf-8")
    return path


def test_renders_next_to_scene(scene_path: Path) -> None:
    """Test default output goes to {name}.svg in insertion order."""
    result = runner.invoke(app, [str(scene_path), "--quiet"])
    assert result.exit_code == 0

    output = scene_path.with_suffix(".svg").read_text(encoding="utf-8")
    assert output.splitlines() == [
        '<circle cx="20" cy="30" r="15" />',
        '<polyline points="0,0 10,10" />',
        '<text x="35" y="20" dx="0" dy="6" font-size="12" font-family="Verdana">'
        "Tom &amp; &apos;Jerry&apos; &lt;3</text>",
    ]


def test_explicit_output_path(scene_path: Path, tmp_path: Path) -> None:
    """Test --output selects the destination."""
    target = tmp_path / "custom.svg"
    result = runner.invoke(app, [str(scene_path), "-o", str(target)])
    assert result.exit_code == 0
    assert target.exists()
    assert not scene_path.with_suffix(".svg").exists()


def test_stdout_standalone_is_valid_svg(scene_path: Path) -> None:
    """Test standalone output on stdout parses as an SVG document."""
    result = runner.invoke(
        app, [str(scene_path), "--stdout", "--standalone", "--xml-declaration"]
    )
    assert result.exit_code == 0

    root = ET.fromstring(result.stdout.encode("utf-8"))
    ns = "{http://www.w3.org/2000/svg}"
    assert [child.tag for child in root] == [f"{ns}circle", f"{ns}polyline", f"{ns}text"]
    assert root[2].text == "Tom & 'Jerry' <3"
    assert result.stdout.splitlines()[2].startswith("  <circle ")


def test_indent_step_option(scene_path: Path) -> None:
    """Test --indent-step controls nesting inside the root."""
    result = runner.invoke(
        app, [str(scene_path), "--stdout", "--standalone", "--indent-step", "4"]
    )
    assert result.exit_code == 0
    assert result.stdout.splitlines()[1].startswith("    <circle ")


def test_missing_scene(tmp_path: Path) -> None:
    """Test a missing scene file fails with exit code 1."""
    result = runner.invoke(app, [str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_invalid_scene(tmp_path: Path) -> None:
    """Test an invalid scene fails with exit code 1 and writes nothing."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"shapes": [{"type": "hexagon"}]}), encoding="utf-8")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 1
    assert not path.with_suffix(".svg").exists()


def test_verbose_and_quiet_conflict(scene_path: Path) -> None:
    """Test --verbose and --quiet cannot be combined."""
    result = runner.invoke(app, [str(scene_path), "-v", "-q"])
    assert result.exit_code == 1


def test_invalid_log_level(scene_path: Path) -> None:
    """Test unknown log levels are rejected."""
    result = runner.invoke(app, [str(scene_path), "--log-level", "LOUD"])
    assert result.exit_code == 1


def test_unwritable_output(scene_path: Path, tmp_path: Path) -> None:
    """Test an unwritable destination fails with exit code 1."""
    result = runner.invoke(app, [str(scene_path), "-o", str(tmp_path / "no" / "out.svg")])
    assert result.exit_code == 1


def test_version() -> None:
    """Test --version prints the version."""
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_verbose_summary(scene_path: Path) -> None:
    """Test verbose mode reports the rendered elements per type."""
    result = runner.invoke(app, [str(scene_path), "--verbose"])
    assert result.exit_code == 0
    assert "polyline" in result.output
    assert "3 elements" in result.output


@pytest.mark.parametrize(
    "entry",
    [
        {"type": "text", "data": 42},
        {"type": "text", "font_family": 3},
        {"type": "circle", "radius": "five"},
    ],
)
def test_badly_typed_values(tmp_path: Path, entry: dict) -> None:
    """Test wrongly typed shape values exit with code 1 and write nothing."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"shapes": [entry]}), encoding="utf-8")

    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert not path.with_suffix(".svg").exists()

    result = runner.invoke(app, [str(path), "--stdout"])
    assert result.exit_code == 1
    assert "<" not in result.stdout


def test_error_for_path_with_brackets(tmp_path: Path, monkeypatch) -> None:
    """Test error messages for paths with brackets are printed as-is."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["[/x]/missing.json"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "[/x]" in result.output
