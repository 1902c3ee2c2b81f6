import os
import re
from pathlib import Path
from typing import Union

KB = 1024
MB = 1024 * 1024
GB = 1024 * 1024 * 1024

PathLike = Union[str, Path]

_UNITS = {"": 1, "B": 1, "KB": KB, "MB": MB, "GB": GB}
_SIZE_RE = re.compile(r"^\s*(\d+)\s*([a-zA-Z]*)\s*$")


def format_bytes(bytes_int: int):
    if bytes_int < KB:
        return f"{bytes_int}B"
    elif bytes_int < MB:
        return f"{bytes_int / KB:.2f}KB"
    elif bytes_int < GB:
        return f"{bytes_int / MB:.2f}MB"
    else:
        return f"{bytes_int / GB:.2f}GB"


def parse_bytes(text: str) -> int:
    """Parse a size such as "512", "64KB" or "1gb" into a number of bytes."""
    match = _SIZE_RE.match(str(text))
    if match is None or match.group(2).upper() not in _UNITS:
        raise ValueError(f"Invalid size: {text}")
    return int(match.group(1)) * _UNITS[match.group(2).upper()]


is_verbose_env = os.environ.get("CHUNKSTORE_VERBOSE", None) == "1"
