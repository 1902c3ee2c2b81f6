import threading
from typing import List

from chunkstore.chunk_store import ChunkStore


class LockedChunkStore:
    """Thread-safe wrapper around a ChunkStore.

    Every call holds one lock for its whole duration, so the used_space counter and the files on disk
    change together even when several threads share the store.
    """

    def __init__(self, store: ChunkStore):
        self.store = store
        self.lock = threading.RLock()

    def put(self, name: bytes, value: bytes):
        with self.lock:
            self.store.put(name, value)

    def delete(self, name: bytes):
        with self.lock:
            self.store.delete(name)

    def get(self, name: bytes) -> bytes:
        with self.lock:
            return self.store.get(name)

    def has_chunk(self, name: bytes) -> bool:
        with self.lock:
            return self.store.has_chunk(name)

    def names(self) -> List[bytes]:
        with self.lock:
            return self.store.names()

    def max_space(self) -> int:
        return self.store.max_space()

    def used_space(self) -> int:
        with self.lock:
            return self.store.used_space()

    def has_space(self, required_space: int) -> bool:
        with self.lock:
            return self.store.has_space(required_space)

    def close(self):
        with self.lock:
            self.store.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_typ, exc_val, exc_tb):
        self.close()
