import os
from typing import Optional

CHUNK_NAME_LEN = 32  # bytes; hex-encoded file names are twice as long


def validate_chunk_name(name) -> bytes:
    """Normalize a chunk identifier to bytes, raising ValueError unless it is exactly CHUNK_NAME_LEN bytes."""
    if not isinstance(name, (bytes, bytearray, memoryview)):
        raise ValueError(f"Chunk name must be bytes, got {type(name).__name__}")
    name = bytes(name)
    if len(name) != CHUNK_NAME_LEN:
        raise ValueError(f"Chunk name must be {CHUNK_NAME_LEN} bytes, got {len(name)}")
    return name


def chunk_name_to_hex(name: bytes) -> str:
    return validate_chunk_name(name).hex()


def chunk_name_from_hex(hex_name: str) -> Optional[bytes]:
    """Decode a chunk file name. Returns None unless hex_name is the canonical lowercase encoding of a chunk name."""
    if len(hex_name) != 2 * CHUNK_NAME_LEN:
        return None
    try:
        name = bytes.fromhex(hex_name)
    except ValueError:
        return None
    if name.hex() != hex_name:
        return None
    return name


def random_chunk_name() -> bytes:
    return os.urandom(CHUNK_NAME_LEN)


def validate_chunk_data(value) -> bytes:
    """Normalize chunk contents to bytes so that len() is the number of bytes written."""
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ValueError(f"Chunk data must be bytes, got {type(value).__name__}")
    return bytes(value)
