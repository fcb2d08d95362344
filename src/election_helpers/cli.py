"""CLI for election_helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import Config, default_config, load_config, save_config
from .display import DISPLAY_FORMATS, format_name_for_display
from .logging_utils import setup_logging
from .name_splitter import split_name
from .names import clean_candidate_name, clean_candidate_names
from .party import normalize_party
from .paths import config_path
from .votes import parse_votes

app = typer.Typer(help="Normalize party labels, vote counts and candidate names.")

_CONFIG_OPTION_HELP = "Config YAML (default: $ELECTION_HELPERS_CONFIG or ./election_helpers.yml)."


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _load(config: Optional[Path]) -> Config:
    """Explicit paths must exist; the default path falls back to built-in defaults."""
    path = config or config_path()
    if not path.exists():
        if config is not None:
            _fail(f"Config file not found: {path}")
        return default_config()
    try:
        return load_config(path)
    except (ValidationError, yaml.YAMLError) as exc:
        _fail(f"Invalid config {path}: {exc}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
    log_dir: Optional[Path] = typer.Option(None, help="Also write a rotating log file here."),
) -> None:
    setup_logging(log_dir, logging.DEBUG if verbose else logging.WARNING)


@app.command("parse-votes")
def parse_votes_cmd(values: List[str] = typer.Argument(..., help="Raw vote tokens.")) -> None:
    """Parse raw vote tokens into integers."""
    _echo_json({value: parse_votes(value) for value in values})


@app.command("normalize-party")
def normalize_party_cmd(
    values: List[str] = typer.Argument(..., help="Raw party labels."),
    config: Optional[Path] = typer.Option(None, help=_CONFIG_OPTION_HELP),
) -> None:
    """Normalize party labels to canonical codes (config party_map overrides)."""
    cfg = _load(config)
    _echo_json({value: normalize_party(value, cfg.party_map) for value in values})


@app.command("clean-name")
def clean_name_cmd(
    name: str = typer.Argument(..., help="Raw candidate name."),
    capitalize: Optional[str] = typer.Option(None, help="title, upper, lower or preserve."),
    censor: bool = typer.Option(False, help="Censor detected profanity."),
    config: Optional[Path] = typer.Option(None, help=_CONFIG_OPTION_HELP),
) -> None:
    """Clean a candidate name; prints null for placeholder rows."""
    options = _load(config).name_cleaning.model_dump()
    if capitalize is not None:
        options["capitalize"] = capitalize
    if censor:
        options["security"]["censor_profanity"] = True
    try:
        _echo_json(clean_candidate_name(name, options))
    except ValidationError as exc:
        _fail(f"Invalid option: {exc}")


@app.command("clean-names")
def clean_names_cmd(
    file: Path = typer.Argument(..., help="Text file with one name per line."),
    strategy: Optional[str] = typer.Option(None, help="Conflict strategy: preserve, merge or number."),
    config: Optional[Path] = typer.Option(None, help=_CONFIG_OPTION_HELP),
) -> None:
    """Clean every name in a file and report duplicates and placeholders."""
    if not file.exists():
        _fail(f"File not found: {file}")
    options = _load(config).name_cleaning.model_dump()
    if strategy is not None:
        options["conflict_strategy"] = strategy
    names = [line.strip() for line in file.read_text(encoding="utf-8").splitlines() if line.strip()]
    try:
        result = clean_candidate_names(names, options)
    except ValidationError as exc:
        _fail(f"Invalid option: {exc}")
    _echo_json(result.as_dict())


@app.command("split-name")
def split_name_cmd(
    name: str = typer.Argument(..., help="Full name."),
    config: Optional[Path] = typer.Option(None, help=_CONFIG_OPTION_HELP),
) -> None:
    """Split a name into first/last/suffix with a confidence score."""
    cfg = _load(config)
    try:
        result = split_name(name, cfg.name_splitting)
    except ValueError as exc:
        _fail(str(exc))
    _echo_json(result.as_dict())


@app.command("format-name")
def format_name_cmd(
    name: str = typer.Argument(..., help="Full name."),
    fmt: str = typer.Option(..., "--format", help=f"One of: {', '.join(DISPLAY_FORMATS)}."),
    max_length: Optional[int] = typer.Option(None, help="Truncate longer results with '...'."),
    include_suffix: bool = typer.Option(False, help="Append Jr./Sr./III..."),
    config: Optional[Path] = typer.Option(None, help=_CONFIG_OPTION_HELP),
) -> None:
    """Format a name for display."""
    options = _load(config).display.model_dump()
    if max_length is not None:
        options["max_length"] = max_length
    if include_suffix:
        options["include_suffix"] = True
    try:
        typer.echo(format_name_for_display(name, fmt, options))
    except (ValueError, ValidationError) as exc:
        _fail(str(exc))


@app.command("show-config")
def show_config(config: Optional[Path] = typer.Option(None, help=_CONFIG_OPTION_HELP)) -> None:
    """Print the effective configuration."""
    _echo_json(_load(config).model_dump())


@app.command("init-config")
def init_config(
    path: Optional[Path] = typer.Option(None, help="Where to write (default: config path)."),
    force: bool = typer.Option(False, help="Overwrite an existing file."),
) -> None:
    """Write the default configuration as YAML."""
    target = path or config_path()
    if target.exists() and not force:
        _fail(f"{target} already exists (use --force to overwrite).")
    target.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), target)
    typer.echo(f"Config written to {target}")
