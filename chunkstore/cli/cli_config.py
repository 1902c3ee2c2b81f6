"""
Config interface:
* chunkstore config list
* chunkstore config get <key>
* chunkstore config set <key> <value>

Available keys:
* root (str): Directory new stores are created in
* prefix (str): Name prefix of each store's directory
* max_space (int): Quota in bytes, accepts suffixes such as 64MB
"""

import typer

from chunkstore.cli.common import console
from chunkstore.config_paths import load_config_path, load_store_config

app = typer.Typer(name="chunkstore-config")


@app.command()
def list():
    """List all available config keys"""
    store_config = load_store_config()
    for key in store_config.valid_keys():
        value = store_config.get_value(key)
        console.print(f"[bold][blue]{key}[/blue] = [italic][green]{value}[/green][/italic][/bold]")


@app.command()
def get(key: str):
    """Get a config value."""
    store_config = load_store_config()
    try:
        value = store_config.get_value(key)
        console.print(f"[bold][blue]{key}[/blue] = [italic][green]{value}[/green][/italic]")
    except KeyError:
        console.print(f"[red][bold]{key}[/bold] is not a valid config key[/red]")
        raise typer.Exit(code=1)


@app.command()
def set(key: str, value: str):
    """Set a config value."""
    store_config = load_store_config()
    try:
        old = store_config.get_value(key)
        store_config.set_value(key, value)
    except KeyError:
        console.print(f"[red][bold]{key}[/bold] is not a valid config key[/red]")
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[red]Invalid value for [bold]{key}[/bold]: {e}[/red]")
        raise typer.Exit(code=1)
    new = store_config.get_value(key)
    store_config.to_config_file(load_config_path())
    console.print(f"[bold][blue]{key}[/blue] = [italic][green]{new}[/green][/italic][/bold] [bright_black](was {old})[/bright_black]")
