from __future__ import annotations

from enum import Enum


PREPROCESSOR_NAME = "fix-cjk-spacing"

# mdBook release whose preprocessor protocol this package speaks.
MDBOOK_VERSION = "0.4.40"


class BookItemKind(str, Enum):
    chapter = "Chapter"
    part_title = "PartTitle"
    separator = "Separator"
