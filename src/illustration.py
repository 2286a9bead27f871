import base64
import logging
from io import BytesIO
from typing import Optional

from PIL import Image

from word_generator import WordProvider

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/png;base64,"


def to_data_uri(image_bytes: bytes) -> Optional[str]:
    """Wrap image bytes in a PNG data URI, re-encoding other formats to PNG.

    The image is fully decoded first, so truncated or oversized payloads
    give None instead of a broken data URI.
    """
    try:
        img = Image.open(BytesIO(image_bytes))
        img.load()
        if img.format != "PNG":
            buffer = BytesIO()
            img.save(buffer, format="PNG")
            image_bytes = buffer.getvalue()
    except (OSError, Image.DecompressionBombError) as e:
        logger.warning(f"Could not read generated image: {e}")
        return None
    return DATA_URI_PREFIX + base64.b64encode(image_bytes).decode("ascii")


def illustrate(provider: WordProvider, word: str, definition: str, etymology: str) -> Optional[str]:
    """Ask the provider for an illustration of `word`.

    The page works without an image, so this never raises: any failure is
    logged and reported as None.
    """
    try:
        image_bytes = provider.generate_illustration(word, definition, etymology)
        if not image_bytes:
            logger.warning(f"No image returned for '{word}'")
            return None
        data_uri = to_data_uri(image_bytes)
    except Exception as e:
        logger.error(f"AI image generation failed for '{word}': {e}")
        return None

    if data_uri:
        logger.info(f"Successfully generated image for '{word}'")
    return data_uri
