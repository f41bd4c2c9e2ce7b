"""littlesearch CLI: build a keyword index over a collection and query it.

Four commands: validate, index, keywords, search.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from engine.collection import load_collection
from engine.corpus import Corpus, InputUnavailable, load_corpus
from engine.searcher import MAX_RESULTS, top_five
from engine.text import normalize

app = typer.Typer(help="littlesearch: top-5 keyword search over a small corpus.")
console = Console()

DEFAULT_COLLECTION = "collection.json"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(collection_path: str) -> dict:
    config, errors = load_collection(collection_path)
    if config is None:
        for err in errors:
            console.print(f"  [red]✗[/red] {escape(err)}")
        raise typer.Exit(code=1)
    return config


def _build(config: dict) -> Corpus:
    try:
        return load_corpus(config["documents"], config["noise_words"])
    except InputUnavailable as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _keyword(word: str, corpus: Corpus, raw: bool) -> str:
    # A word that is not a keyword is kept as typed and simply matches nothing
    if raw:
        return word
    return normalize(word, corpus.noise_words) or word


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(
    collection_path: str = typer.Argument(DEFAULT_COLLECTION, help="Path to collection JSON"),
):
    """Check a collection file and the files it points to."""
    config, errors = load_collection(collection_path)

    if config is not None:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {escape(err)}")
        raise typer.Exit(code=1)


# ── index ───────────────────────────────────────────────────────────


@app.command()
def index(
    collection_path: str = typer.Argument(DEFAULT_COLLECTION, help="Path to collection JSON"),
):
    """Index every document in a collection and summarize the result."""
    config = _load(collection_path)
    with console.status("[bold blue]Indexing documents..."):
        corpus = _build(config)

    master = corpus.index
    postings = sum(len(master.get(kw)) for kw in master)
    table = Table(title=f"Indexing Summary: {config['name']}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Documents", str(len(corpus.documents)))
    table.add_row("Keywords", str(len(master)))
    table.add_row("Occurrences", str(postings))
    console.print(table)


# ── keywords ────────────────────────────────────────────────────────


@app.command()
def keywords(
    collection_path: str = typer.Argument(DEFAULT_COLLECTION, help="Path to collection JSON"),
    keyword: str = typer.Option("", "--keyword", "-k", help="Show a single keyword"),
    raw: bool = typer.Option(
        False, "--raw", help="Look up --keyword exactly as typed, without normalizing"
    ),
):
    """List keyword occurrence lists, highest frequency first."""
    config = _load(collection_path)
    corpus = _build(config)
    master = corpus.index

    selected = [_keyword(keyword, corpus, raw)] if keyword else master.keywords()
    table = Table()
    table.add_column("Keyword", style="cyan")
    table.add_column("Occurrences (document, frequency)")

    for kw in selected:
        occurrences = master.get(kw)
        if occurrences is None:
            console.print(f"[yellow]'{escape(kw)}' is not indexed[/yellow]")
            raise typer.Exit(code=1)
        table.add_row(kw, " ".join(str(o) for o in occurrences))

    console.print(table)


# ── search ──────────────────────────────────────────────────────────


@app.command()
def search(
    kw1: str = typer.Argument(..., help="First keyword (wins frequency ties)"),
    kw2: str = typer.Argument("", help="Second keyword"),
    collection_path: str = typer.Option(
        DEFAULT_COLLECTION, "--collection", "-c", help="Path to collection JSON"
    ),
    raw: bool = typer.Option(
        False, "--raw", help="Match keywords exactly as typed, without normalizing"
    ),
):
    """Show the top documents containing either keyword."""
    config = _load(collection_path)
    corpus = _build(config)

    kw1 = _keyword(kw1, corpus, raw)
    kw2 = _keyword(kw2, corpus, raw)

    query = f'"{kw1}" or "{kw2}"' if kw2 else f'"{kw1}"'
    console.print(f"\n[bold]Query:[/bold] {escape(query)}")
    results = top_five(corpus.index, kw1, kw2)
    if results is None:
        console.print("[yellow]No matching documents[/yellow]")
        return

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Document", style="cyan", min_width=30)
    for i, doc in enumerate(results, 1):
        table.add_row(str(i), doc)
    console.print(table)
    console.print(f"\n{len(results)} of at most {MAX_RESULTS} results returned")


if __name__ == "__main__":
    app()
