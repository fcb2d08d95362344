from __future__ import annotations

import json
import logging

from typer.testing import CliRunner

from election_helpers.cli import app


def _invoke(monkeypatch, tmp_path, args):
    package_logger = logging.getLogger("election_helpers")
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(package_logger, "propagate", True)
    monkeypatch.setattr(package_logger, "level", package_logger.level)
    monkeypatch.setenv("ELECTION_HELPERS_CONFIG", str(tmp_path / "missing.yml"))
    return CliRunner().invoke(app, args)


def test_parse_votes_command(monkeypatch, tmp_path):
    result = _invoke(monkeypatch, tmp_path, ["parse-votes", "1,234,567", "2.5 lakh", "N/A"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"1,234,567": 1234567, "2.5 lakh": 250000, "N/A": 0}


def test_normalize_party_command_uses_config_party_map(monkeypatch, tmp_path):
    config_file = tmp_path / "election_helpers.yml"
    config_file.write_text("party_map:\n  zorp party: ZP\n", encoding="utf-8")
    result = _invoke(
        monkeypatch,
        tmp_path,
        ["normalize-party", "REP", "Zorp Party", "--config", str(config_file)],
    )
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"REP": "R", "Zorp Party": "ZP"}


def test_clean_name_command(monkeypatch, tmp_path):
    result = _invoke(monkeypatch, tmp_path, ["clean-name", "smith, john"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == "John Smith"

    result = _invoke(monkeypatch, tmp_path, ["clean-name", "TOTAL VOTES"])
    assert json.loads(result.stdout) is None

    result = _invoke(monkeypatch, tmp_path, ["clean-name", "john smith", "--capitalize", "upper"])
    assert json.loads(result.stdout) == "JOHN SMITH"


def test_clean_name_command_rejects_bad_mode(monkeypatch, tmp_path):
    result = _invoke(monkeypatch, tmp_path, ["clean-name", "john smith", "--capitalize", "shout"])
    assert result.exit_code == 1


def test_clean_names_command(monkeypatch, tmp_path):
    names_file = tmp_path / "names.txt"
    names_file.write_text("John Smith\nJOHN SMITH\n\nWrite-In\nJane Doe\n", encoding="utf-8")
    result = _invoke(
        monkeypatch, tmp_path, ["clean-names", str(names_file), "--strategy", "number"]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["cleaned"] == ["John Smith", "John Smith (2)", "Jane Doe"]
    assert payload["non_candidates"] == ["Write-In"]
    assert payload["conflicts"] == [
        {"cleaned": "John Smith", "originals": ["John Smith", "JOHN SMITH"]}
    ]


def test_clean_names_command_missing_file(monkeypatch, tmp_path):
    result = _invoke(monkeypatch, tmp_path, ["clean-names", str(tmp_path / "nope.txt")])
    assert result.exit_code == 1


def test_split_name_command(monkeypatch, tmp_path):
    result = _invoke(monkeypatch, tmp_path, ["split-name", "Jean-Pierre de la Fontaine"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["first"] == "Jean-Pierre"
    assert payload["last"] == "de la Fontaine"
    assert payload["confidence"] == 0.85


def test_format_name_command(monkeypatch, tmp_path):
    result = _invoke(
        monkeypatch, tmp_path, ["format-name", "John Smith", "--format", "last-first-initial"]
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "Smith, J."

    result = _invoke(monkeypatch, tmp_path, ["format-name", "John Smith", "--format", "bogus"])
    assert result.exit_code == 1


def test_init_and_show_config(monkeypatch, tmp_path):
    target = tmp_path / "conf" / "election_helpers.yml"
    result = _invoke(monkeypatch, tmp_path, ["init-config", "--path", str(target)])
    assert result.exit_code == 0, result.output
    assert target.exists()

    result = _invoke(monkeypatch, tmp_path, ["init-config", "--path", str(target)])
    assert result.exit_code == 1

    result = _invoke(monkeypatch, tmp_path, ["show-config", "--config", str(target)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["name_cleaning"]["capitalize"] == "title"


def test_show_config_missing_explicit_file(monkeypatch, tmp_path):
    result = _invoke(monkeypatch, tmp_path, ["show-config", "--config", str(tmp_path / "nope.yml")])
    assert result.exit_code == 1
