"""
Модуль: `utils/errors.py`.
Назначение: Типы ошибок ядра работы с цветом и их структурное представление для API.
"""


class PaletteError(ValueError):
    """Базовая ошибка предметной области: код, сообщение и HTTP-статус."""

    code = "palette_error"
    default_message = "Ошибка обработки палитры"
    status = 400

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message, "code": self.code}


class InvalidColor(PaletteError):
    """HEX-строка не состоит ровно из 6 шестнадцатеричных цифр."""

    code = "invalid_color"
    default_message = "Некорректный HEX-цвет"


class EmptyPalette(PaletteError):
    code = "empty_palette"
    default_message = "Палитра не содержит цветов"


class UnsupportedFormat(PaletteError):
    code = "unsupported_format"
    default_message = "Неподдерживаемый формат экспорта"


class ExtractionFailure(PaletteError):
    """Сбой внешнего извлечения цветов; причина остаётся непрозрачной для ядра."""

    code = "extraction_failure"
    default_message = "Не удалось обработать изображение"
