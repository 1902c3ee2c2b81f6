import configparser
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from typing import Any

from chunkstore.exceptions import BadConfigException
from chunkstore.utils.definitions import GB, parse_bytes

_SECTION = "store"

_KEY_TYPES = {
    "root": str,
    "prefix": str,
    "max_space": int,
}

_DEFAULT_VALUES = {
    "root": tempfile.gettempdir(),
    "prefix": "chunkstore-",
    "max_space": 1 * GB,
}


def _map_type(value, val_type):
    if val_type is int:
        return parse_bytes(value) if isinstance(value, str) else int(value)
    else:
        return val_type(value)


@dataclass
class ChunkStoreConfig:
    root: str = _DEFAULT_VALUES["root"]
    prefix: str = _DEFAULT_VALUES["prefix"]
    max_space: int = _DEFAULT_VALUES["max_space"]

    @classmethod
    def default_config(cls) -> "ChunkStoreConfig":
        return cls()

    @classmethod
    def load_config(cls, path) -> "ChunkStoreConfig":
        """Load from a config file."""
        path = Path(path)
        config = configparser.ConfigParser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        config.read(path)

        store_config = cls.default_config()
        if _SECTION in config:
            for key in _KEY_TYPES:
                if key in config[_SECTION]:
                    try:
                        store_config.set_value(key, config.get(_SECTION, key))
                    except ValueError as e:
                        raise BadConfigException(f"Invalid value for {key} in {path}: {e}") from e
        return store_config

    def to_config_file(self, path):
        path = Path(path)
        config = configparser.ConfigParser()
        if path.exists():
            config.read(os.path.expanduser(path))

        if _SECTION not in config:
            config.add_section(_SECTION)
        for key in _KEY_TYPES:
            config.set(_SECTION, key, str(getattr(self, key)))

        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w") as f:
            config.write(f)

    def valid_keys(self):
        return list(_KEY_TYPES.keys())

    def get_value(self, key):
        if key not in self.valid_keys():
            raise KeyError(f"Invalid key: {key}")
        return getattr(self, key)

    def set_value(self, key, value: Any):
        if key not in self.valid_keys():
            raise KeyError(f"Invalid key: {key}")
        setattr(self, key, _map_type(value, _KEY_TYPES[key]))

    def check_config(self):
        valid_config = True
        if self.max_space < 0:
            valid_config = False
        if not self.prefix or os.sep in self.prefix or (os.altsep and os.altsep in self.prefix):
            valid_config = False
        if not self.root:
            valid_config = False
        if not valid_config:
            raise BadConfigException("Invalid configuration")
