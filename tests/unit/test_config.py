import os
import tempfile

import pytest

from chunkstore.config import ChunkStoreConfig
from chunkstore.config_paths import load_config_path, load_store_config
from chunkstore.exceptions import BadConfigException
from chunkstore.utils.definitions import GB, MB


def test_default_config():
    config = ChunkStoreConfig.default_config()
    assert config.root == tempfile.gettempdir()
    assert config.prefix == "chunkstore-"
    assert config.max_space == 1 * GB
    config.check_config()


def test_config_file_round_trip(tmp_path):
    path = tmp_path / "nested" / "config"
    config = ChunkStoreConfig(root=str(tmp_path / "data"), prefix="node-", max_space=64 * MB)
    config.to_config_file(path)
    assert path.exists()
    assert ChunkStoreConfig.load_config(path) == config


def test_load_config_accepts_sizes(tmp_path):
    path = tmp_path / "config"
    path.write_text("[store]\nmax_space = 64MB\nprefix = a-\n")
    config = ChunkStoreConfig.load_config(path)
    assert config.max_space == 64 * MB
    assert config.prefix == "a-"
    assert config.root == tempfile.gettempdir()


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ChunkStoreConfig.load_config(tmp_path / "missing")


def test_load_config_bad_value(tmp_path):
    path = tmp_path / "config"
    path.write_text("[store]\nmax_space = lots\n")
    with pytest.raises(BadConfigException):
        ChunkStoreConfig.load_config(path)


def test_get_and_set_value():
    config = ChunkStoreConfig.default_config()
    assert config.valid_keys() == ["root", "prefix", "max_space"]
    config.set_value("max_space", "2KB")
    assert config.get_value("max_space") == 2048
    config.set_value("max_space", 10)
    assert config.max_space == 10
    with pytest.raises(KeyError):
        config.get_value("compress")
    with pytest.raises(KeyError):
        config.set_value("compress", "true")
    with pytest.raises(ValueError):
        config.set_value("max_space", "-1")


def test_check_config():
    ChunkStoreConfig(max_space=0).check_config()
    for bad in [ChunkStoreConfig(max_space=-1), ChunkStoreConfig(prefix=""), ChunkStoreConfig(prefix=f"a{os.sep}b"), ChunkStoreConfig(root="")]:
        with pytest.raises(BadConfigException):
            bad.check_config()


def test_load_config_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("CHUNKSTORE_CONFIG", str(tmp_path / "custom"))
    assert load_config_path() == tmp_path / "custom"
    assert load_store_config() == ChunkStoreConfig.default_config()

    ChunkStoreConfig(prefix="env-").to_config_file(tmp_path / "custom")
    assert load_store_config().prefix == "env-"
