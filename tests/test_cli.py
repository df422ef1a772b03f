import json

from typer.testing import CliRunner

from motionicon.cli import app

runner = CliRunner()


def test_presets_lists_every_motion_type():
    result = runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    assert "heartbeat" in result.output
    assert "Infinity" in result.output


def test_resolve_prints_json():
    result = runner.invoke(app, ["resolve", "--motion-type", "pulse", "--trigger", "loop", "--label", "Alerts"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["animation"]["isAnimated"] is True
    assert data["animation"]["transition"]["repeat"] == "Infinity"
    assert data["attributes"]["aria-label"] == "Alerts"


def test_resolve_honours_reduced_motion():
    result = runner.invoke(app, ["resolve", "--reduced-motion"])
    assert json.loads(result.output)["animation"]["isAnimated"] is False

    result = runner.invoke(app, ["resolve", "--reduced-motion", "--animated"])
    assert json.loads(result.output)["animation"]["isAnimated"] is True


def test_css_injects_into_svg_file(tmp_path):
    svg = tmp_path / "bell.svg"
    svg.write_text('<svg xmlns="http://www.w3.org/2000/svg"><path d="M1 1" /></svg>', encoding="utf-8")
    result = runner.invoke(app, ["css", "--svg", str(svg)])
    assert result.exit_code == 0
    assert "motionicon-css-animations" in result.output


def test_css_without_svg_prints_stylesheet():
    result = runner.invoke(app, ["css"])
    assert result.exit_code == 0
    assert "@keyframes motionicon-scale" in result.output


def test_css_missing_file_fails(tmp_path):
    result = runner.invoke(app, ["css", "--svg", str(tmp_path / "missing.svg")])
    assert result.exit_code != 0
