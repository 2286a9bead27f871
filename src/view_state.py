"""Fetch lifecycle for the word page.

One fetch cycle asks for the word text, shows it as soon as it arrives, then
asks for the illustration. Every cycle gets a number; a result that arrives
after a newer cycle has started is dropped instead of overwriting the newer
state.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import config
from illustration import illustrate
from models import WordRecord
from word_generator import WordProvider, fetch_word

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    PARTIALLY_LOADED = "partially_loaded"  # text ready, image pending
    READY = "ready"
    ERROR = "error"


@dataclass
class FetchState:
    record: Optional[WordRecord] = None
    image_url: Optional[str] = None
    is_loading_text: bool = False
    is_loading_image: bool = False
    error: Optional[str] = None
    query: str = ""
    phase: Phase = Phase.IDLE
    cycle: int = 0


class WordViewController:
    def __init__(self, provider: WordProvider,
                 on_change: Optional[Callable[[FetchState], None]] = None,
                 error_message: str = config.GENERATION_ERROR_MESSAGE):
        self.provider = provider
        self.on_change = on_change
        self.error_message = error_message
        self.state = FetchState()
        self._last_query: Optional[str] = None
        self._lock = threading.Lock()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.state)

    def _apply(self, cycle: int, mutate: Callable[[FetchState], None]) -> bool:
        """Apply `mutate` if `cycle` is still the current one."""
        with self._lock:
            if cycle != self.state.cycle:
                logger.info(f"Discarding result from stale fetch cycle {cycle} (current is {self.state.cycle})")
                return False
            mutate(self.state)
        self._notify()
        return True

    def set_query(self, text: str) -> None:
        with self._lock:
            self.state.query = text

    def fetch(self, query: Optional[str] = None) -> FetchState:
        """Run one full fetch cycle: text, then illustration."""
        with self._lock:
            self.state.cycle += 1
            cycle = self.state.cycle
            self._last_query = query
            self.state.record = None
            self.state.image_url = None
            self.state.error = None
            self.state.is_loading_text = True
            self.state.is_loading_image = False
            self.state.phase = Phase.LOADING
        self._notify()

        try:
            record = fetch_word(self.provider, query)
        except Exception as e:
            logger.error(f"Error generating word: {e}")
            self._apply(cycle, self._text_failed)
            return self.state

        if not self._apply(cycle, lambda state: self._text_succeeded(state, record)):
            return self.state

        image_url = illustrate(self.provider, record.word, record.definition, record.etymology)
        self._apply(cycle, lambda state: self._image_finished(state, image_url))
        return self.state

    def fetch_random(self) -> FetchState:
        return self.fetch()

    def submit_search(self) -> FetchState:
        """Look up the current search box text. Blank input does nothing."""
        query = self.state.query
        if not query.strip():
            logger.debug("Ignoring blank search")
            return self.state
        return self.fetch(query)

    def refresh(self) -> FetchState:
        """Clear the search box and fetch a new random word."""
        self.set_query("")
        return self.fetch()

    def retry(self) -> FetchState:
        return self.fetch(self._last_query)

    @staticmethod
    def _text_succeeded(state: FetchState, record: WordRecord) -> None:
        state.record = record
        state.is_loading_text = False
        state.is_loading_image = True
        state.phase = Phase.PARTIALLY_LOADED

    @staticmethod
    def _image_finished(state: FetchState, image_url: Optional[str]) -> None:
        state.image_url = image_url
        state.is_loading_image = False
        state.phase = Phase.READY

    def _text_failed(self, state: FetchState) -> None:
        state.record = None
        state.image_url = None
        state.error = self.error_message
        state.is_loading_text = False
        state.is_loading_image = False
        state.phase = Phase.ERROR
