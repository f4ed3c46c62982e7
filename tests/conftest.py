import io
import json

import pytest
from PIL import Image

from app import create_app
from config import Config
from utils.interpreter import ColorInterpreter


TEST_MEANINGS = {
    "#112233": "Фирменный тёмно-синий. Используется в логотипе.",
    "abcdef": "Фирменный светло-голубой.",
}


@pytest.fixture
def meanings_file(tmp_path):
    path = tmp_path / "color_meanings.json"
    path.write_text(json.dumps(TEST_MEANINGS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def app(meanings_file):
    class TestConfig(Config):
        TESTING = True
        COLOR_MEANINGS_PATH = str(meanings_file)
        RATE_LIMIT_ENABLED = True
        RATE_LIMIT_EXTRACT = 1000
        RATE_LIMIT_EXPORT = 1000
        RATE_LIMIT_DEFAULT = 1000
        CORS_ENABLED = False

    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def interpreter():
    return ColorInterpreter({"112233": TEST_MEANINGS["#112233"]})


@pytest.fixture
def make_image():
    def _make(bands, size=(40, 20), image_format="PNG"):
        """Собирает изображение из вертикальных полос [(ширина, (r, g, b)), ...]."""
        image = Image.new("RGB", size, (0, 0, 0))
        x = 0
        for width, color in bands:
            image.paste(color, (x, 0, x + width, size[1]))
            x += width
        buffer = io.BytesIO()
        image.save(buffer, format=image_format)
        return buffer.getvalue()

    return _make


@pytest.fixture(scope="session")
def oversized_png():
    """PNG 15000×12500 (187.5 млн пикселей): выше порога DecompressionBombError в Pillow."""
    image = Image.new("1", (15000, 12500), 0)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
