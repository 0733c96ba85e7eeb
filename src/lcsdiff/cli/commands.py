"""CLI command implementations"""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml

from lcsdiff.config import Settings, load_config
from lcsdiff.core.export import build_report
from lcsdiff.core.models import ModifiedPair
from lcsdiff.core.pipeline import run_compare_files
from lcsdiff.core.render import format_summary, render_items, render_pair
from lcsdiff.util.log import setup_logging

logger = logging.getLogger(__name__)


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _use_color(settings: Settings, out: Path = None) -> bool:
    """ANSI colour only when writing to a terminal; files and pipes get text markers."""
    return settings.color and out is None and sys.stdout.isatty()


def compare_cmd(
    original: Annotated[Path, typer.Argument(help="Original text file")],
    modified: Annotated[Path, typer.Argument(help="Modified text file")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="Output format: text or json")] = None,
    color: Annotated[Optional[bool], typer.Option("--color/--no-color", help="Highlight changes with ANSI colours")] = None,
    words: Annotated[Optional[bool], typer.Option("--words/--no-words", help="Word-level highlighting for modified lines")] = None,
    summary: Annotated[Optional[bool], typer.Option("--summary/--no-summary", help="Print the summary line")] = None,
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Max lines per input; 0 = unlimited")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Input file encoding")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write output to this file instead of stdout")] = None,
    ):
    """Compare two text files line by line, highlighting changed words in modified lines."""
    settings = _settings(overrides={
        "output_format": fmt, "color": color, "word_diff": words,
        "show_summary": summary, "max_lines": max_lines, "encoding": encoding,
    })

    try:
        comparison = run_compare_files(original, modified, settings.encoding, settings.max_lines)
    except ValueError as e:
        _fail(str(e))

    if settings.output_format == "json":
        text = json.dumps(build_report(comparison), indent=2, ensure_ascii=False)
    else:
        lines = render_items(comparison.items, _use_color(settings, out), settings.word_diff)
        if settings.show_summary:
            lines.append(format_summary(comparison.summary))
        text = "\n".join(lines)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote comparison to %s", out)
        typer.echo(f"Wrote diff to {out}")
    else:
        typer.echo(text)


def words_cmd(
    old_line: Annotated[str, typer.Argument(help="Original line")],
    new_line: Annotated[str, typer.Argument(help="Modified line")],
    color: Annotated[Optional[bool], typer.Option("--color/--no-color", help="Highlight changes with ANSI colours")] = None,
    ):
    """Show the word-level diff of two lines."""
    settings = _settings(overrides={"color": color})
    old_rendered, new_rendered = render_pair(ModifiedPair(old=old_line, new=new_line), _use_color(settings))
    typer.echo(old_rendered)
    typer.echo(new_rendered)


def config_cmd():
    """Print the effective settings (config.yaml + LCSDIFF_* env vars) as YAML."""
    settings = _settings()
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())
