from rich.console import Console

from chunkstore.utils.definitions import format_bytes

console = Console()


def print_usage(used_space: int, max_space: int):
    console.print(
        f"[white]Used space:[/white] [bright_black]{format_bytes(used_space)} of {format_bytes(max_space)}[/bright_black]"
    )
