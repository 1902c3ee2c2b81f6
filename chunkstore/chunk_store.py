import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from chunkstore.chunk import chunk_name_from_hex, chunk_name_to_hex, validate_chunk_data, validate_chunk_name
from chunkstore.exceptions import ChunkNotFoundException, ChunkStoreException, ChunkStoreIOException, NotEnoughSpaceException
from chunkstore.utils import logger
from chunkstore.utils.definitions import PathLike, format_bytes

if TYPE_CHECKING:
    from chunkstore.config import ChunkStoreConfig


class ChunkStore:
    """ChunkStore is a collection for holding data chunks on local disk, capped at `max_space` bytes.

    Each chunk lives in its own file named by the hex encoding of its 32-byte name. The files are kept
    in a temporary directory under `root` whose name starts with `prefix`; the directory and every chunk
    in it are deleted when the store is closed or garbage collected.

    The store is not thread-safe. Wrap it in a LockedChunkStore to share it between threads.
    """

    def __init__(self, root: PathLike, prefix: str, max_space: int):
        try:
            Path(root).mkdir(parents=True, exist_ok=True)
            self._tempdir: Optional[tempfile.TemporaryDirectory] = tempfile.TemporaryDirectory(prefix=prefix, dir=str(root))
        except OSError as e:
            raise ChunkStoreIOException(e) from e
        self.chunk_dir = Path(self._tempdir.name)
        self._max_space = max_space
        self._used_space = 0
        logger.fs.debug(f"[ChunkStore] Created store at {self.chunk_dir} with max_space={format_bytes(max_space)}")

    @classmethod
    def new(cls, prefix: str, max_space: int) -> "ChunkStore":
        """Create a store inside the system temp directory."""
        return cls(tempfile.gettempdir(), prefix, max_space)

    @classmethod
    def from_config(cls, config: "ChunkStoreConfig") -> "ChunkStore":
        config.check_config()
        return cls(config.root, config.prefix, config.max_space)

    @property
    def path(self) -> Path:
        self._check_open()
        return self.chunk_dir

    @property
    def closed(self) -> bool:
        return self._tempdir is None

    def close(self):
        """Delete the storage directory and every chunk in it."""
        if self._tempdir is not None:
            logger.fs.debug(f"[ChunkStore] Removing store at {self.chunk_dir}")
            try:
                self._tempdir.cleanup()
            except FileNotFoundError:
                logger.fs.warning(f"[ChunkStore] Store directory {self.chunk_dir} was already removed")
            except OSError as e:
                raise ChunkStoreIOException(e) from e
            finally:
                self._tempdir = None
                self._used_space = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_typ, exc_val, exc_tb):
        self.close()

    def __repr__(self):
        return f"ChunkStore({self.chunk_dir}, used={self._used_space}, max={self._max_space})"

    def put(self, name: bytes, value: bytes):
        """Store `value` under `name`, replacing any existing chunk with that name.

        :raises NotEnoughSpaceException: if `value` does not fit; nothing is modified
        :raises ChunkStoreIOException: if writing the file fails; used_space is not modified
        """
        self._check_open()
        name = validate_chunk_name(name)
        value = validate_chunk_data(value)
        if not self.has_space(len(value)):
            raise NotEnoughSpaceException(len(value), self._used_space, self._max_space)

        # drop the old copy first so its size is not counted twice
        try:
            self.delete(name)
        except ChunkStoreException as e:
            logger.fs.warning(f"[ChunkStore] Ignoring failure to remove stale chunk {name.hex()}: {e}")

        # partial writes only ever exist under the .tmp name
        path = self._chunk_file_path(name)
        tmp_path = path.with_suffix(".tmp")
        try:
            with open(tmp_path, "wb") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
                size = os.fstat(f.fileno()).st_size
            os.replace(tmp_path, path)
        except OSError as e:
            self._remove_partial(tmp_path)
            raise ChunkStoreIOException(e) from e
        self._used_space += size
        logger.fs.debug(f"[ChunkStore] Put chunk {name.hex()} ({format_bytes(size)}), used {format_bytes(self._used_space)}")

    def delete(self, name: bytes):
        """Remove the chunk stored under `name`. Deleting a missing chunk is a no-op."""
        self._check_open()
        name = validate_chunk_name(name)
        path = self._dir_entry(name)
        if path is None:
            return

        try:
            size = os.path.getsize(path)
        except OSError as e:
            logger.fs.warning(f"[ChunkStore] Could not stat chunk {name.hex()}, used_space left unchanged: {e}")
        else:
            self._used_space -= min(size, self._used_space)

        try:
            path.unlink()
        except OSError as e:
            raise ChunkStoreIOException(e) from e
        logger.fs.debug(f"[ChunkStore] Deleted chunk {name.hex()}, used {format_bytes(self._used_space)}")

    def get(self, name: bytes) -> bytes:
        """Return the contents of the chunk stored under `name`.

        :raises ChunkNotFoundException: if no such chunk exists
        """
        self._check_open()
        name = validate_chunk_name(name)
        path = self._dir_entry(name)
        if path is None:
            raise ChunkNotFoundException(name)
        try:
            return path.read_bytes()
        except OSError as e:
            raise ChunkStoreIOException(e) from e

    def has_chunk(self, name: bytes) -> bool:
        self._check_open()
        return self._dir_entry(validate_chunk_name(name)) is not None

    def names(self) -> List[bytes]:
        """List the names of all stored chunks, in directory order. Entries that are not chunk files are skipped."""
        self._check_open()
        try:
            with os.scandir(self.chunk_dir) as entries:
                hex_names = [entry.name for entry in entries if entry.is_file()]
        except OSError as e:
            logger.fs.warning(f"[ChunkStore] Failed to list {self.chunk_dir}: {e}")
            return []
        return [name for name in map(chunk_name_from_hex, hex_names) if name is not None]

    def max_space(self) -> int:
        return self._max_space

    def used_space(self) -> int:
        return self._used_space

    def has_space(self, required_space: int) -> bool:
        return self._used_space + required_space <= self._max_space

    def _chunk_file_path(self, name: bytes) -> Path:
        return self.chunk_dir / chunk_name_to_hex(name)

    def _dir_entry(self, name: bytes) -> Optional[Path]:
        path = self._chunk_file_path(name)
        return path if path.is_file() else None

    def _remove_partial(self, tmp_path: Path):
        try:
            tmp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.fs.warning(f"[ChunkStore] Could not remove partial write {tmp_path}: {e}")

    def _check_open(self):
        if self._tempdir is None:
            raise ValueError("I/O operation on closed ChunkStore")
