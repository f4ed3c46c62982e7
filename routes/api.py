"""
Программа: «Paleta» – инструменты для работы с цветовыми палитрами.
Модуль: routes/api.py – REST-подобные API-маршруты.

Назначение модуля:
- Извлечение доминирующих цветов из изображения с интерпретацией каждого цвета.
- Генерация гармоний, интерпретация отдельного цвета и проверка контрастности.
- Экспорт палитры в CSS, SCSS, PNG и SVG.
"""

import io

from flask import current_app, jsonify, request, send_file
from flask_babel import gettext as _

from utils.color_space import int_to_hex, normalize_hex
from utils.contrast import check_contrast
from utils.errors import PaletteError
from utils.export_handler import export_palette_data
from utils.harmony import generate_harmony
from utils.image_processor import extract_dominant_colors, validate_image
from utils.rate_limit import get_client_identifier

API_PREFIX = "/api/v1"


def _api_error(message: str, status: int = 400):
    return jsonify({"success": False, "error": message}), status


def _palette_error(error: PaletteError):
    payload = error.to_dict()
    payload["error"] = _(error.message)
    return jsonify(payload), error.status


def _rate_limited(bucket: str, limit_key: str = "RATE_LIMIT_DEFAULT") -> bool:
    if not current_app.config["RATE_LIMIT_ENABLED"]:
        return False

    limiter = current_app.extensions.get("rate_limiter")
    if limiter is None:
        return False

    rate_key = f"{bucket}:{get_client_identifier()}"
    return not limiter.is_allowed(rate_key, current_app.config[limit_key])


def _interpreter():
    return current_app.extensions["color_interpreter"]


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _clamp_color_count(raw_value: int | None) -> int:
    config = current_app.config
    if raw_value is None:
        return config["EXTRACT_COLOR_COUNT"]
    return max(config["MIN_COLOR_COUNT"], min(config["MAX_COLOR_COUNT"], raw_value))


def register_routes(app):
    @app.route(f"{API_PREFIX}/extract", methods=["POST"])
    def extract_colors():
        """Извлекает доминирующие цвета загруженного изображения и интерпретирует их."""
        try:
            if _rate_limited("extract", "RATE_LIMIT_EXTRACT"):
                return _api_error(_("Слишком много загрузок. Попробуйте позже."), 429)

            file = request.files.get("image")
            if file is None or file.filename == "":
                return _api_error(_("Файл не был загружен"), 400)

            image_bytes = file.read()
            validate_image(
                image_bytes,
                current_app.config["ALLOWED_IMAGE_FORMATS"],
                current_app.config["MAX_IMAGE_PIXELS"],
            )

            color_count = _clamp_color_count(request.form.get("color_count", type=int))
            try:
                packed_colors = extract_dominant_colors(image_bytes, color_count)
            except PaletteError:
                current_app.logger.exception("Ошибка извлечения цветов из изображения")
                raise

            hex_colors = [int_to_hex(packed) for packed in packed_colors]
            annotated = _interpreter().annotate_many(hex_colors)
            return jsonify({"dominant_colors": [item.to_dict() for item in annotated]})

        except PaletteError as error:
            return _palette_error(error)
        except Exception:
            current_app.logger.exception("Критическая ошибка обработки изображения")
            return _api_error(_("Внутренняя ошибка сервера"), 500)

    @app.route(f"{API_PREFIX}/harmony", methods=["POST"])
    def harmony():
        try:
            if _rate_limited("harmony"):
                return _api_error(_("Слишком много запросов. Попробуйте позже."), 429)

            base_color = _json_body().get("base_color")
            if not isinstance(base_color, str) or not base_color:
                return _api_error(_("Не передан базовый цвет"), 400)

            harmony_set = generate_harmony(base_color, _interpreter())
            return jsonify(harmony_set.to_dict())

        except PaletteError as error:
            return _palette_error(error)
        except Exception:
            current_app.logger.exception("Ошибка генерации гармонии")
            return _api_error(_("Внутренняя ошибка сервера"), 500)

    @app.route(f"{API_PREFIX}/meaning", methods=["POST"])
    def color_meaning():
        try:
            if _rate_limited("meaning"):
                return _api_error(_("Слишком много запросов. Попробуйте позже."), 429)

            color = _json_body().get("color")
            if not isinstance(color, str) or not color:
                return _api_error(_("Не передан цвет"), 400)

            # Валидация до интерпретации: некорректный цвет – это 400, а не текст-заглушка
            normalize_hex(color)
            clean = color.lstrip("#")
            return jsonify({"color": f"#{clean}", "meaning": _interpreter().interpret(clean)})

        except PaletteError as error:
            return _palette_error(error)
        except Exception:
            current_app.logger.exception("Ошибка интерпретации цвета")
            return _api_error(_("Внутренняя ошибка сервера"), 500)

    @app.route(f"{API_PREFIX}/contrast", methods=["POST"])
    def contrast():
        try:
            if _rate_limited("contrast"):
                return _api_error(_("Слишком много запросов. Попробуйте позже."), 429)

            data = _json_body()
            foreground = data.get("foreground")
            background = data.get("background")
            if not isinstance(foreground, str) or not isinstance(background, str):
                return _api_error(_("Не переданы цвета для проверки контраста"), 400)

            return jsonify(check_contrast(foreground, background).to_dict())

        except PaletteError as error:
            return _palette_error(error)
        except Exception:
            current_app.logger.exception("Ошибка проверки контрастности")
            return _api_error(_("Внутренняя ошибка сервера"), 500)

    @app.route(f"{API_PREFIX}/export", methods=["POST"])
    def export_palette():
        try:
            if _rate_limited("export", "RATE_LIMIT_EXPORT"):
                return _api_error(_("Слишком много экспортов. Попробуйте позже."), 429)

            data = _json_body()
            colors = data.get("colors")
            format_type = data.get("format")

            if not isinstance(colors, list) or not isinstance(format_type, str):
                return _api_error(_("Не переданы цвета палитры или формат"), 400)

            content, filename, mimetype = export_palette_data(colors, format_type)
            return send_file(
                io.BytesIO(content),
                mimetype=mimetype,
                as_attachment=True,
                download_name=filename,
            )

        except PaletteError as error:
            return _palette_error(error)
        except Exception:
            current_app.logger.exception("Ошибка экспорта палитры")
            return _api_error(_("Внутренняя ошибка сервера"), 500)
