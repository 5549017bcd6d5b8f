from __future__ import annotations

from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .constants import BookItemKind


class PreprocessorContext(BaseModel):
    """First element of the `[context, book]` array mdBook writes to stdin."""

    model_config = ConfigDict(extra="allow")

    root: str = ""
    config: Dict[str, Any] = Field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str = ""


class Chapter(BaseModel):
    # Unknown keys are kept so newer mdBook releases round-trip untouched.
    model_config = ConfigDict(extra="allow")

    name: str
    content: str = ""
    number: Optional[List[int]] = None
    sub_items: List[BookItem] = Field(default_factory=list)
    path: Optional[str] = None  # None for draft chapters
    source_path: Optional[str] = None
    parent_names: List[str] = Field(default_factory=list)


class ChapterItem(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    chapter: Chapter = Field(alias=BookItemKind.chapter.value)


class PartTitleItem(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    part_title: str = Field(alias=BookItemKind.part_title.value)


BookItem = Union[ChapterItem, PartTitleItem, Literal[BookItemKind.separator.value]]


class Book(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    sections: List[BookItem] = Field(default_factory=list)
    non_exhaustive: None = Field(default=None, alias="__non_exhaustive")

    def chapters(self) -> Iterator[Chapter]:
        """Yield every chapter depth-first, nested sub-chapters included."""
        stack = list(reversed(self.sections))
        while stack:
            item = stack.pop()
            if isinstance(item, ChapterItem):
                yield item.chapter
                stack.extend(reversed(item.chapter.sub_items))

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


Chapter.model_rebuild()
ChapterItem.model_rebuild()
Book.model_rebuild()

PreprocessorInput = TypeAdapter(Tuple[PreprocessorContext, Book])


def parse_preprocessor_input(raw: Union[str, bytes]) -> Tuple[PreprocessorContext, Book]:
    """Validate the JSON mdBook sends to a preprocessor."""
    return PreprocessorInput.validate_json(raw)
