from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import typer
import yaml

from .config import ComparerConfig, load_config
from .metrics import analyze_text
from .models import ComparisonResult, DisplaySegment
from .pipeline import compare_texts
from .report import format_export, format_score, metric_rows, result_to_dict
from .samples import SAMPLE_AFTER, SAMPLE_BEFORE

logger = logging.getLogger(__name__)

app = typer.Typer(help="Before/After Copy Comparer CLI.", no_args_is_help=True)

_DIRECTION_MARKS = {"improved": "Better", "worsened": "Worse", "neutral": "--"}


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr."
    ),
) -> None:
    """Compare two versions of marketing copy."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def compare(
    before_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    after_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON."),
    export: bool = typer.Option(
        False, "--export", help="Emit the plain-text results block."
    ),
    highlight: bool | None = typer.Option(
        None,
        "--highlight/--no-highlight",
        help="Override config highlight flag for the diff view.",
    ),
) -> None:
    """Diff two text files and report the readability change."""
    cfg = load_config(config)
    if highlight is not None:
        cfg.highlight = highlight
    before = _read_text(before_path)
    after = _read_text(after_path)
    logger.debug("Comparing %s against %s", before_path, after_path)
    result = compare_texts(before, after, cfg)
    _emit(result, cfg, as_json=as_json, export=export)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the readability metrics of a single text file as JSON."""
    cfg = load_config(config)
    metrics = analyze_text(
        _read_text(input_path), words_per_minute=cfg.words_per_minute
    )
    typer.echo(json.dumps(metrics.to_dict(), indent=2))


@app.command()
def example(
    as_json: bool = typer.Option(False, "--json", help="Emit the result as JSON."),
    export: bool = typer.Option(
        False, "--export", help="Emit the plain-text results block."
    ),
) -> None:
    """Run the comparison on the bundled sample copy."""
    cfg = ComparerConfig()
    result = compare_texts(SAMPLE_BEFORE, SAMPLE_AFTER, cfg)
    _emit(result, cfg, as_json=as_json, export=export)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ComparerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _read_text(path: Path) -> str:
    """Read a UTF-8 text file, surfacing decode problems as CLI errors."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text: {exc}") from exc


def _emit(
    result: ComparisonResult, cfg: ComparerConfig, *, as_json: bool, export: bool
) -> None:
    if as_json:
        typer.echo(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
        return
    if export:
        typer.echo(format_export(result))
        return
    _print_report(result, cfg.highlight)


def _print_report(result: ComparisonResult, highlight: bool) -> None:
    """Print the diff panels, metrics table, score and summary."""
    typer.echo("Before:")
    typer.echo(_render_view(result.before_view, removed=True, highlight=highlight))
    typer.echo("")
    typer.echo("After:")
    typer.echo(_render_view(result.after_view, removed=False, highlight=highlight))
    typer.echo("")

    rows = metric_rows(result.before_metrics, result.after_metrics)
    label_width = max(len(row.label) for row in rows)
    before_width = max(len(row.before) for row in rows)
    after_width = max(len(row.after) for row in rows)
    change_width = max(len(row.change) for row in rows)
    for row in rows:
        typer.echo(
            f"{row.label:<{label_width}}  {row.before:>{before_width}}  "
            f"{row.after:>{after_width}}  {row.change:>{change_width}}  "
            f"{_DIRECTION_MARKS[row.direction]}"
        )
    typer.echo("")
    typer.echo(f"Improvement Score: {format_score(result.improvement_score)}")
    typer.echo(result.summary)


def _render_view(
    segments: List[DisplaySegment], *, removed: bool, highlight: bool
) -> str:
    """Join view segments; highlighted words are coloured or bracketed git-style."""
    parts: List[str] = []
    for segment in segments:
        if not segment.highlighted:
            parts.append(segment.text)
        elif highlight:
            parts.append(
                typer.style(
                    segment.text,
                    fg="red" if removed else "green",
                    strikethrough=removed,
                )
            )
        elif removed:
            parts.append(f"[-{segment.text}-]")
        else:
            parts.append(f"{{+{segment.text}+}}")
    return " ".join(parts)


if __name__ == "__main__":
    main()
