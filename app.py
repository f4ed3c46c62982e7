"""
Название: «Paleta»
Язык: Python (Flask)
Краткое описание: веб-сервис для извлечения, интерпретации, проверки контраста
и экспорта цветовых палитр
"""

import logging
import os

from flask import Flask, request
from flask_babel import gettext as _

from config import Config
from extensions import babel, cors
from routes.api import _api_error, register_routes as register_api_routes
from utils.i18n import resolve_request_language
from utils.interpreter import ColorInterpreter, load_meaning_table
from utils.rate_limit import InMemoryRateLimiter


def create_app(config_object=Config) -> Flask:
    """Фабрика приложения, собирающая все модули воедино."""
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    def select_locale() -> str:
        return resolve_request_language(
            request=request,
            supported_languages=app.config["SUPPORTED_LANGUAGES"],
            cookie_name=app.config["LANG_COOKIE_NAME"],
            default_language=app.config["DEFAULT_LANGUAGE"],
        )

    babel.init_app(app, locale_selector=select_locale)

    if app.config["CORS_ENABLED"]:
        cors.init_app(
            app,
            resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        )

    # Справочник загружается один раз и дальше только читается
    meanings = load_meaning_table(app.config["COLOR_MEANINGS_PATH"])
    app.extensions["color_interpreter"] = ColorInterpreter(meanings)
    app.extensions["rate_limiter"] = InMemoryRateLimiter(
        window_seconds=app.config["RATE_LIMIT_WINDOW_SECONDS"]
    )

    register_api_routes(app)

    @app.errorhandler(413)
    def handle_too_large(error):
        return _api_error(_("Файл слишком большой"), 413)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return _api_error(_("Метод не поддерживается"), 405)

    @app.errorhandler(404)
    def handle_not_found(error):
        return _api_error(_("Ресурс не найден"), 404)

    @app.after_request
    def apply_security_headers(response):
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        return response

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    return app


app = create_app()


if __name__ == "__main__":
    is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
    app.run(debug=not is_production)
