from typing import Optional

NOT_ENOUGH_SPACE_ERROR = "Not enough storage space"


class ChunkStoreException(Exception):
    def pretty_print_str(self):
        err = f"[bold][red]ChunkStoreException: {str(self)}[/red][/bold]"
        return err


class ChunkStoreIOException(ChunkStoreException):
    """Wraps the OSError raised by the filesystem; the message is the platform error text."""

    def __init__(self, error: OSError):
        super().__init__(str(error))
        self.error = error

    @property
    def errno(self) -> Optional[int]:
        return self.error.errno

    def pretty_print_str(self):
        err = f"[red][bold]:x: ChunkStoreIOException:[/bold] {str(self)}[/red]"
        return err


class NotEnoughSpaceException(ChunkStoreException):
    def __init__(self, requested: int, used_space: int, max_space: int):
        super().__init__(f"{NOT_ENOUGH_SPACE_ERROR} (requested {requested}, used {used_space} of {max_space} bytes)")
        self.requested = requested
        self.used_space = used_space
        self.max_space = max_space

    def pretty_print_str(self):
        err = f"[red][bold]:x: NotEnoughSpaceException:[/bold] {str(self)}[/red]"
        err += "\n[bold][red]Delete chunks or raise max_space to make room.[/red][/bold]"
        return err


class ChunkNotFoundException(ChunkStoreException):
    def __init__(self, name: bytes):
        super().__init__(f"Chunk not found: {name.hex()}")
        self.name = name

    def pretty_print_str(self):
        err = f"[red][bold]:x: ChunkNotFoundException:[/bold] {str(self)}[/red]"
        return err


class BadConfigException(ChunkStoreException):
    pass
