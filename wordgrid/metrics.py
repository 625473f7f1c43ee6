import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("wordgrid")


class SolveTimer:
    """Wall-clock timings for the stages of one solve run, in ms."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.timings[name] = round((time.perf_counter() - t0) * 1000, 1)
            logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict[str, float]:
        return {**self.timings, "total": self.total_ms}

    def report(self, found: int) -> str:
        return f"Found: {found} words in {self.total_ms} ms"
