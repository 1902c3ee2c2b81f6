from pathlib import Path

from chunkstore import exceptions
from chunkstore.chunk import CHUNK_NAME_LEN, random_chunk_name
from chunkstore.chunk_store import ChunkStore
from chunkstore.config import ChunkStoreConfig
from chunkstore.locked_chunk_store import LockedChunkStore

__version__ = "0.1.0"
__root__ = Path(__file__).parent.parent
__all__ = [
    "__version__",
    "__root__",
    # modules
    "exceptions",
    # API
    "ChunkStore",
    "LockedChunkStore",
    "ChunkStoreConfig",
    "CHUNK_NAME_LEN",
    "random_chunk_name",
]
