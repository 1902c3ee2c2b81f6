import time
from typing import Optional

from chunkstore.utils import logger
from chunkstore.utils.definitions import format_bytes


class ThroughputTimer:
    """Times one phase of chunk I/O that moves `num_bytes` bytes and reports its rate."""

    def __init__(self, desc: str, num_bytes: int, clock=time.perf_counter):
        self.desc = desc
        self.num_bytes = num_bytes
        self._clock = clock
        self.start: Optional[float] = None
        self.end: Optional[float] = None

    def __enter__(self):
        self.start = self._clock()
        return self

    def __exit__(self, exc_typ, exc_val, exc_tb):
        self.end = self._clock()
        logger.fs.debug(f"[{self.desc}] {format_bytes(self.num_bytes)} in {self.elapsed:.3f}s ({self.rate_str()})")

    @property
    def elapsed(self) -> float:
        if self.start is None:
            return 0.0
        end = self.end if self.end is not None else self._clock()
        return end - self.start

    @property
    def rate(self) -> Optional[float]:
        """Bytes per second, or None when the phase took no measurable time."""
        elapsed = self.elapsed
        return self.num_bytes / elapsed if elapsed > 0 else None

    def rate_str(self) -> str:
        rate = self.rate
        return f"{format_bytes(int(rate))}/s" if rate is not None else "n/a"
