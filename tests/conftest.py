from __future__ import annotations

import sys
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

# Make the src/ modules importable when running tests from the project root.
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from models import GenerationFailure, WordRecord  # noqa: E402


def make_image_bytes(fmt: str = "PNG", size=(4, 3)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", size, color=(30, 80, 60)).save(buffer, format=fmt)
    return buffer.getvalue()


def make_record(word: str = "ordskatt", **overrides) -> WordRecord:
    data = {
        "word": word,
        "wordClass": "Substantiv",
        "definition": "En samling ord.",
        "etymology": "Sammensatt av to ord.\n- ord\n- skatt",
        "usageExample": "Språket er en ordskatt.",
        "inflections": ["en ordskatt", "ordskatten", "ordskatter", "ordskattene"],
        "funFact": None,
    }
    data.update(overrides)
    return WordRecord.model_validate(data)


_PNG = object()


class FakeProvider:
    """Deterministic WordProvider that records every call."""

    def __init__(self, image=_PNG, fail_text=False, fail_image=False):
        self.calls = []
        self.image = make_image_bytes() if image is _PNG else image
        self.fail_text = fail_text
        self.fail_image = fail_image

    def generate_random(self) -> WordRecord:
        self.calls.append(("random",))
        if self.fail_text:
            raise GenerationFailure("boom")
        return make_record("tilfeldig")

    def generate_for_word(self, word: str) -> WordRecord:
        self.calls.append(("word", word))
        if self.fail_text:
            raise GenerationFailure("boom")
        return make_record(word)

    def generate_illustration(self, word, definition, etymology):
        self.calls.append(("image", word))
        if self.fail_image:
            raise RuntimeError("image backend down")
        return self.image


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
