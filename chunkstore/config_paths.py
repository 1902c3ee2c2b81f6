import os
from pathlib import Path

from chunkstore.config import ChunkStoreConfig

__config_root__ = Path("~/.chunkstore").expanduser()


def load_config_path() -> Path:
    if "CHUNKSTORE_CONFIG" in os.environ:
        return Path(os.environ["CHUNKSTORE_CONFIG"]).expanduser()
    return __config_root__ / "config"


def load_store_config(path=None) -> ChunkStoreConfig:
    path = Path(path) if path is not None else load_config_path()
    if path.exists():
        return ChunkStoreConfig.load_config(path)
    else:
        return ChunkStoreConfig.default_config()
