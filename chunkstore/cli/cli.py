import os
import traceback
from typing import Optional

import typer

import chunkstore.cli.cli_config
from chunkstore import __version__
from chunkstore.chunk import random_chunk_name
from chunkstore.chunk_store import ChunkStore
from chunkstore.cli.common import console, print_usage
from chunkstore.config_paths import load_config_path, load_store_config
from chunkstore.exceptions import BadConfigException, ChunkStoreException
from chunkstore.utils import logger
from chunkstore.utils.definitions import format_bytes, parse_bytes
from chunkstore.utils.timer import ThroughputTimer

app = typer.Typer(name="chunkstore")
app.add_typer(chunkstore.cli.cli_config.app, name="config")


@app.command()
def info():
    """Show the resolved store configuration."""
    try:
        store_config = load_store_config()
    except BadConfigException as e:
        console.print(e.pretty_print_str())
        raise typer.Exit(1)
    console.print(f"[bold]chunkstore[/bold] [bright_black]v{__version__}[/bright_black]")
    console.print(f"[white]Config file:[/white] [bright_black]{load_config_path()}[/bright_black]")
    for key in store_config.valid_keys():
        console.print(f"[bold][blue]{key}[/blue] = [italic][green]{store_config.get_value(key)}[/green][/italic][/bold]")


@app.command()
def bench(
    num_chunks: int = typer.Option(64, "--num-chunks", "-n", help="Number of chunks to write"),
    chunk_size: str = typer.Option("1MB", help="Size of each chunk, e.g. 512KB"),
    max_space: Optional[str] = typer.Option(None, help="Override the configured quota, e.g. 1GB"),
    root: Optional[str] = typer.Option(None, help="Override the directory the store is created in"),
    prefix: Optional[str] = typer.Option(None, help="Override the store directory prefix"),
    debug: bool = typer.Option(False, help="Print tracebacks on failure"),
    log_file: Optional[str] = typer.Option(None, help="Append store debug logs to this file"),
):
    """Write, verify and delete random chunks in a scratch store."""
    if log_file is not None:
        logger.open_log_file(log_file)
    try:
        _run_bench(num_chunks, chunk_size, max_space, root, prefix, debug)
    finally:
        logger.close_log_file()


def _run_bench(num_chunks: int, chunk_size: str, max_space: Optional[str], root: Optional[str], prefix: Optional[str], debug: bool):
    try:
        store_config = load_store_config()
        if max_space is not None:
            store_config.set_value("max_space", max_space)
        if root is not None:
            store_config.set_value("root", root)
        if prefix is not None:
            store_config.set_value("prefix", prefix)
        chunk_bytes = parse_bytes(chunk_size)
    except ValueError as e:
        console.print(f"[red]Invalid option: {e}[/red]")
        raise typer.Exit(1)
    except BadConfigException as e:
        console.print(e.pretty_print_str())
        raise typer.Exit(1)

    try:
        with ChunkStore.from_config(store_config) as store:
            console.print(f"[white]Store:[/white] [bright_black]{store.path}[/bright_black]")
            chunks = {random_chunk_name(): os.urandom(chunk_bytes) for _ in range(num_chunks)}
            total = num_chunks * chunk_bytes

            with ThroughputTimer("put", total) as t_put:
                for name, data in chunks.items():
                    store.put(name, data)
            print_usage(store.used_space(), store.max_space())

            with ThroughputTimer("get", total) as t_get:
                mismatched = [name for name, data in chunks.items() if store.get(name) != data]
            if mismatched:
                console.print(f"[red][bold]{len(mismatched)} chunks did not read back correctly[/bold][/red]")
                raise typer.Exit(1)
            if len(store.names()) != len(chunks):
                console.print(f"[red]Expected {len(chunks)} chunks, store lists {len(store.names())}[/red]")
                raise typer.Exit(1)

            with ThroughputTimer("delete", total) as t_delete:
                for name in chunks:
                    store.delete(name)
            print_usage(store.used_space(), store.max_space())
    except ChunkStoreException as e:
        logger.fs.exception(e)
        if debug:
            console.print(f"[bright_black]{traceback.format_exc()}[/bright_black]")
        console.print(e.pretty_print_str())
        raise typer.Exit(1)

    for t in (t_put, t_get, t_delete):
        console.print(f"[white]{t.desc}:[/white] [bright_black]{t.elapsed:.2f}s ({t.rate_str()})[/bright_black]")
    console.print(f"\n:white_check_mark: [bold green]Verified {num_chunks} chunks ({format_bytes(total)})[/bold green]")
