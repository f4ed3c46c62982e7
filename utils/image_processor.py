"""
Программа: «Paleta» – инструменты для работы с цветовыми палитрами.
Модуль: utils/image_processor.py – обработка изображений.

Назначение модуля:
- Проверка загруженного изображения (формат, разрешение).
- Выделение доминирующих цветов с помощью алгоритма KMeans.
- Возврат цветов в виде упакованных целых 0xRRGGBB, упорядоченных по доле пикселей.
"""

import io
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError
from sklearn.cluster import KMeans

from utils.errors import ExtractionFailure

logger = logging.getLogger(__name__)

SAMPLE_SIZE = (200, 200)


def validate_image(image_bytes: bytes, allowed_formats, max_pixels: int) -> str:
    """Проверяет изображение и возвращает его формат в нижнем регистре."""
    try:
        with Image.open(io.BytesIO(image_bytes)) as image:
            image.verify()
        with Image.open(io.BytesIO(image_bytes)) as image:
            image_format = (image.format or "").lower()
            width, height = image.size
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ExtractionFailure("Файл не является корректным изображением") from exc

    if image_format not in allowed_formats:
        raise ExtractionFailure("Недопустимый формат изображения")

    if width * height > max_pixels:
        raise ExtractionFailure("Изображение слишком большое по разрешению")

    return image_format


def _pack_rgb(r: int, g: int, b: int) -> int:
    return (int(r) << 16) | (int(g) << 8) | int(b)


def extract_dominant_colors(image_bytes: bytes, num_colors: int = 5) -> list[int]:
    """Извлекает до num_colors доминирующих цветов, от самого частого к редкому."""
    if num_colors < 1:
        raise ValueError("num_colors must be positive")

    try:
        with Image.open(io.BytesIO(image_bytes)) as source:
            img = source.convert("RGB")
        # Только уменьшение: маленькие изображения не размываются интерполяцией
        img.thumbnail(SAMPLE_SIZE)

        pixels = np.array(img).reshape(-1, 3)
        distinct = len(np.unique(pixels, axis=0))
        n_clusters = min(num_colors, distinct)
        logger.debug(
            "Кластеризация %d пикселей, различных цветов: %d, кластеров: %d",
            pixels.shape[0],
            distinct,
            n_clusters,
        )

        kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
        labels = kmeans.fit_predict(pixels)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ExtractionFailure() from exc

    counts = np.bincount(labels, minlength=n_clusters)
    order = np.argsort(-counts, kind="stable")
    centers = np.clip(np.rint(kmeans.cluster_centers_), 0, 255).astype(int)

    return [_pack_rgb(*centers[index]) for index in order]
