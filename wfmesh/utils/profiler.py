"""
Контекст‑менеджер профайлинга – измеряет время выполнения блока кода.
"""

import time
from wfmesh.utils.logger import logger


class Profiler:
    """Контекст‑менеджер для измерения времени выполнения.

    После выхода из блока ``elapsed`` содержит длительность в секундах.
    """
    def __init__(self, name: str):
        self.name = name
        self._start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._start
        logger.debug(f"[Profiler] {self.name}: {self.elapsed * 1000.0:.2f} ms")
