"""
Tests de la CLI (typer CliRunner) usando el modo mock del cliente.
"""

import pytest
import yaml
from typer.testing import CliRunner

from trackerprovider.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "projects.yaml"
    path.write_text(yaml.safe_dump({"projects": {"demo": {"name": "Demo", "iteration_length": 2}}}))
    return path


def test_apply_with_mock_writes_state(tmp_path, config_file):
    state = tmp_path / "state.yaml"

    result = runner.invoke(app, ["apply", "--config", str(config_file), "--state", str(state), "--mock"])

    assert result.exit_code == 0, result.output
    assert "Creado demo" in result.output
    data = yaml.safe_load(state.read_text())
    assert data["resources"]["demo"]["id"] == "1"

    shown = runner.invoke(app, ["show", "--state", str(state)])
    assert shown.exit_code == 0
    assert "Demo" in shown.output


def test_missing_token_is_a_config_error(tmp_path, config_file, monkeypatch):
    monkeypatch.delenv("TRACKER_API_TOKEN", raising=False)

    result = runner.invoke(app, ["plan", "--config", str(config_file), "--state", str(tmp_path / "s.yaml")])

    assert result.exit_code == 1
    assert "TRACKER_API_TOKEN" in result.output


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["plan", "--config", str(tmp_path / "nope.yaml"), "--mock"])

    assert result.exit_code == 1
    assert "No existe" in result.output


def test_invalid_project_in_config(tmp_path):
    path = tmp_path / "projects.yaml"
    path.write_text(yaml.safe_dump({"projects": {"demo": {"nombre": "Demo"}}}))

    result = runner.invoke(app, ["plan", "--config", str(path), "--mock"])

    assert result.exit_code == 1
    assert "inválido" in result.output
