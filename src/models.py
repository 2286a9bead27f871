"""Data types shared by the word clients and the view state controller."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlockKind(Enum):
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"


class GenerationFailure(Exception):
    """The text generation request failed or returned unusable content."""


class WordRecord(BaseModel):
    """A resolved lexical entry for one headword.

    Built in one piece from a single provider response. The provider speaks
    camelCase (``wordClass``, ``usageExample``, ``funFact``); attributes are
    snake_case.
    """

    word: str = Field(min_length=1)
    word_class: str = Field(alias="wordClass")
    definition: str
    etymology: str
    usage_example: str = Field(alias="usageExample")
    inflections: List[str]
    fun_fact: Optional[str] = Field(default=None, alias="funFact")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


@dataclass(frozen=True)
class EtymologyBlock:
    kind: BlockKind
    text: str

    @classmethod
    def paragraph(cls, text: str) -> "EtymologyBlock":
        return cls(BlockKind.PARAGRAPH, text)

    @classmethod
    def list_item(cls, text: str) -> "EtymologyBlock":
        return cls(BlockKind.LIST_ITEM, text)

    @property
    def is_list_item(self) -> bool:
        return self.kind is BlockKind.LIST_ITEM
