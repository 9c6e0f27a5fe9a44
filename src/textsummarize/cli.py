from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich import box
from .config import DEFAULT_CONFIG_PATH, SummarizerConfig, write_default_config
from .exporter import FORMATS, export_summary
from .parser import is_html_path, text_from_html
from .summarizer import SummaryResult, summarize_text

app = typer.Typer(help="Extractive text summarizer")
console = Console()
log = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(level)


@app.callback()
def _main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    _setup_logging("DEBUG" if verbose else "WARNING")


@app.command()
def init(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Where to create config"),
):
    """Create default config."""
    try:
        write_default_config(config_path)
    except FileExistsError as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Created[/green] {config_path}")


def _load_config(path: Path) -> SummarizerConfig:
    try:
        return SummarizerConfig.load(path)
    except ValueError as ex:
        console.print(f"[red]{ex}[/red]")
        raise typer.Exit(code=2)


def _read_input(text: Optional[str], input_path: Optional[Path], html: bool) -> str:
    if input_path is not None:
        try:
            raw = input_path.read_text(encoding="utf-8")
        except OSError as ex:
            console.print(f"[red]Error reading file '{input_path}': {ex}[/red]")
            raise typer.Exit(code=1)
        html = html or is_html_path(input_path.name)
    elif text is not None:
        raw = text
    elif not sys.stdin.isatty():
        raw = sys.stdin.read()
    else:
        raw = ""
    return text_from_html(raw) if html and raw.strip() else raw


def _stats_table(res: SummaryResult) -> Table:
    table = Table(title="Summary Stats", box=box.SIMPLE)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("sentences", f"{res.selected_sentences}/{res.total_sentences}")
    table.add_row("words", f"{res.output_words}/{res.input_words}")
    table.add_row("reduction", f"{res.reduction_ratio:.0%}")
    return table


@app.command()
def summarize(
    text: Optional[str] = typer.Argument(None, help="Text to summarize (reads stdin when omitted)"),
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="Read text from a file"),
    html: bool = typer.Option(False, help="Treat input as HTML and summarize its visible text"),
    sentences: Optional[int] = typer.Option(None, "--sentences", "-n", help="Number of sentences"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Export summary to a file"),
    fmt: Optional[str] = typer.Option(None, help="txt|json"),
    stats: bool = typer.Option(False, help="Show summary statistics"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH),
):
    """Create an extractive summary."""
    cfg = _load_config(config_path)
    raw = _read_input(text, input_path, html)
    if not raw.strip():
        console.print("[yellow]No input text provided[/yellow]")
        raise typer.Exit(code=2)

    fmt = fmt or cfg.export_format
    if fmt not in FORMATS:
        console.print(f"[red]Unknown format {fmt!r}[/red] (use {'|'.join(FORMATS)})")
        raise typer.Exit(code=2)

    n = sentences if sentences is not None else cfg.default_sentences
    if cfg.clamp(n) != n:
        log.info("sentences=%d clamped to %d", n, cfg.clamp(n))
    res = summarize_text(raw, cfg.clamp(n))
    typer.echo(res.summary)

    if stats:
        console.print(_stats_table(res))
    if output is not None:
        export_summary(res, output, fmt)
        console.print(f"[green]Wrote[/green] {output}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None),
    port: Optional[int] = typer.Option(None),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH),
):
    """Run the HTTP API."""
    import uvicorn
    from .server.main import create_app

    cfg = _load_config(config_path)
    _setup_logging(cfg.log_level)
    uvicorn.run(create_app(cfg), host=host or cfg.host, port=port or cfg.port, log_level=cfg.log_level.lower())


def main():
    app()

if __name__ == "__main__":
    main()
