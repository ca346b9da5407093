"""
Ошибки разбора OBJ. Все несут номер строки (с 1) и её текст.
"""


class OBJParseError(ValueError):
    def __init__(self, message: str, line_number: int = None, line: str = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message} ({line!r})"
        super().__init__(message)


class MalformedNumberError(OBJParseError):
    """Нечисловое значение там, где ожидается float/int (strict_numbers)."""


class MalformedFaceError(OBJParseError):
    """Грань меньше чем из 3 углов или угол без индекса позиции."""


class IndexOutOfRangeError(OBJParseError):
    """Ссылка на позицию/UV/нормаль вне накопленного списка."""
