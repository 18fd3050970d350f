from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from spiderchart.cli import app, main

CHART = {
    "options": {"title": "Skills", "width": 120, "height": 120},
    "data": {
        "axes": [{"name": name} for name in ("Speed", "Power", "Range")],
        "series": [{"name": "Probe", "data": {"Speed": 3, "Power": 5, "Range": 2}}],
    },
}


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "chart.json"
    path.write_text(json.dumps(CHART), encoding="utf-8")
    return path


def test_missing_options_is_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 2
    assert "Missing option" in capsys.readouterr().err


def test_render_svg(config_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "out" / "chart.svg"
    status = main(["--config", str(config_file), "--output", str(output), "--fixed-metrics"])
    assert status == 0
    assert output.read_bytes().startswith(b"<?xml")
    assert f"wrote {output}" in capsys.readouterr().out


def test_render_png_with_short_options(config_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "chart.png"
    status = main(["-c", str(config_file), "-o", str(output), "--fixed-metrics", "--dpi", "50"])
    assert status == 0
    assert output.read_bytes()[:4] == b"\x89PNG"


def test_missing_config_reports_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["-c", str(tmp_path / "absent.yaml"), "-o", str(tmp_path / "x.svg"), "--fixed-metrics"])
    assert status == 1
    assert capsys.readouterr().err.startswith("error:")


def test_bad_extension_fails_before_loading(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    status = main(["-c", str(tmp_path / "absent.yaml"), "-o", str(tmp_path / "chart.gif")])
    assert status == 1
    assert "unsupported output format" in capsys.readouterr().err
    assert not (tmp_path / "chart.gif").exists()


def test_invalid_chart_reports_validation_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    payload = json.loads(json.dumps(CHART))
    payload["data"]["axes"] = payload["data"]["axes"][:2]
    config = tmp_path / "bad.json"
    config.write_text(json.dumps(payload), encoding="utf-8")
    status = main(["-c", str(config), "-o", str(tmp_path / "bad.svg"), "--fixed-metrics"])
    assert status == 1
    assert "axes" in capsys.readouterr().err


def test_yaml_config_through_runner(tmp_path: Path) -> None:
    config = tmp_path / "chart.yaml"
    config.write_text(yaml.safe_dump(CHART), encoding="utf-8")
    output = tmp_path / "chart.svg"

    result = CliRunner().invoke(
        app, ["--config", str(config), "--output", str(output), "--fixed-metrics"]
    )

    assert result.exit_code == 0, result.stdout
    assert "wrote" in result.stdout
    assert output.exists()
