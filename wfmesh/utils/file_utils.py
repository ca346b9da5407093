"""
Чтение файла целиком в строку.
"""

from pathlib import Path
from wfmesh.utils.logger import logger


def read_file_to_string(file_path) -> str:
    """Прочитать текстовый файл целиком (UTF‑8, битые байты заменяются)."""
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(str(path))
    with path.open("r", encoding="utf-8", errors="replace") as f:
        text = f.read()
    logger.debug(f"[FileUtils] Read {len(text)} chars from '{path}'.")
    return text
