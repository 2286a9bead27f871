import base64
import logging
from typing import Optional, Protocol

import openai
from pydantic import ValidationError

import config
from models import GenerationFailure, WordRecord
from prompts import (
    IMAGE_GENERATION_PROMPT,
    RANDOM_WORD_PROMPT,
    SPECIFIC_WORD_PROMPT,
    WORD_SCHEMA,
)

logger = logging.getLogger(__name__)


class WordProvider(Protocol):
    """The generative backend the view state controller talks to."""

    def generate_random(self) -> WordRecord:
        ...

    def generate_for_word(self, word: str) -> WordRecord:
        ...

    def generate_illustration(self, word: str, definition: str, etymology: str) -> Optional[bytes]:
        ...


def parse_word_record(content: Optional[str]) -> WordRecord:
    """Validate a raw JSON response body as a WordRecord.

    Raises:
        GenerationFailure: If the body is empty, is not valid JSON, or does not
            match the word schema.
    """
    if not content or not content.strip():
        raise GenerationFailure("No text returned from the model")
    try:
        return WordRecord.model_validate_json(content)
    except ValidationError as e:
        logger.error(f"Failed to parse word record: {e}\nContent was: {content}")
        raise GenerationFailure("Malformed word record in model response") from e


def fetch_word(provider: WordProvider, query: Optional[str] = None) -> WordRecord:
    """Look up `query` if it has any text, otherwise ask for a random word."""
    if query and query.strip():
        return provider.generate_for_word(query.strip())
    return provider.generate_random()


class OpenAIWordGenerator:
    def __init__(self, client=None, api_key: Optional[str] = None):
        self.api_key = api_key if api_key is not None else config.OPENAI_API_KEY
        self.client = client if client is not None else openai.OpenAI(api_key=self.api_key or "")
        self.model = config.GPT_MODEL

    def _complete_word(self, prompt_content: str, temperature: Optional[float]) -> WordRecord:
        """Send one structured text request and parse the word record from it."""
        logger.debug(f"Sending API request with prompt content:\n{prompt_content[:500]}...")
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt_content}],
                temperature=temperature,
                max_completion_tokens=config.MAX_COMPLETION_TOKENS,
                response_format={"type": "json_schema", "json_schema": WORD_SCHEMA},
            )
        except openai.OpenAIError as e:
            logger.error(f"API error: {e}")
            raise GenerationFailure(f"Text generation request failed: {e}") from e

        if not response or not response.choices:
            raise GenerationFailure("API request returned empty or invalid response")

        content = response.choices[0].message.content
        logger.debug(f"Raw API response content:\n{content}")
        return parse_word_record(content)

    def generate_random(self) -> WordRecord:
        logger.info("Requesting a random word...")
        record = self._complete_word(RANDOM_WORD_PROMPT, config.RANDOM_WORD_TEMPERATURE)
        logger.info(f"Generated random word '{record.word}' ({record.word_class})")
        return record

    def generate_for_word(self, word: str) -> WordRecord:
        logger.info(f"Requesting word data for '{word}'...")
        record = self._complete_word(SPECIFIC_WORD_PROMPT.format(word=word), config.SPECIFIC_WORD_TEMPERATURE)
        logger.info(f"Processed: '{record.word}' ({record.word_class})")
        return record

    def generate_illustration(self, word: str, definition: str, etymology: str) -> Optional[bytes]:
        """Generate an illustration and return the raw image bytes, or None."""
        logger.info(f"Generating AI image for '{word}'")
        prompt = IMAGE_GENERATION_PROMPT.format(word=word, definition=definition, etymology=etymology)

        response = self.client.images.generate(
            model=config.IMAGE_GENERATION_MODEL,
            prompt=prompt,
            size=config.IMAGE_SIZE,
            quality=config.IMAGE_QUALITY
        )

        # Use the first item that carries base64 image data
        for item in response.data or []:
            if getattr(item, "b64_json", None):
                return base64.b64decode(item.b64_json)

        logger.warning(f"Invalid or empty response from API for '{word}'")
        return None
