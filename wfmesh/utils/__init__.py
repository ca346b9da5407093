# wfmesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – готовый объект logging.Logger (с level INFO)
    * LoaderConfig – настройки загрузчика
    * Profiler    – замер времени блока кода
"""

from .logger import logger
from .config import LoaderConfig
from .profiler import Profiler
from .file_utils import read_file_to_string

__all__ = ["logger", "LoaderConfig", "Profiler", "read_file_to_string"]
