from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from cjk_spacing import join_cjk_spacing
from cjk_spacing_common.constants import MDBOOK_VERSION, PREPROCESSOR_NAME
from cjk_spacing_common.logging import get_logger
from cjk_spacing_common.schemas import Book, PreprocessorContext

log = get_logger(__name__)


@dataclass(frozen=True)
class RunStats:
    chapters: int
    joined: int
    failed: int


class FixCjkSpacing:
    """mdBook preprocessor that joins CJK lines in every chapter."""

    name = PREPROCESSOR_NAME

    def __init__(self, join: Callable[[str], str] = join_cjk_spacing):
        self._join = join
        self.last_stats: RunStats | None = None

    def supports_renderer(self, renderer: str) -> bool:
        return True

    def check_version(self, ctx: PreprocessorContext) -> bool:
        if ctx.mdbook_version == MDBOOK_VERSION:
            return True
        log.warning(
            "mdbook_version_mismatch",
            extra={
                "preprocessor": self.name,
                "built_against": MDBOOK_VERSION,
                "called_from": ctx.mdbook_version,
            },
        )
        return False

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        chapters = joined = failed = 0
        for chapter in book.chapters():
            chapters += 1
            try:
                content = self._join(chapter.content)
            except Exception:
                # A chapter that cannot be rewritten is published as written.
                failed += 1
                log.warning("chapter_join_failed", extra={"chapter": chapter.name}, exc_info=True)
                continue
            if content != chapter.content:
                joined += 1
            chapter.content = content

        self.last_stats = RunStats(chapters=chapters, joined=joined, failed=failed)
        log.info(
            "book_processed",
            extra={"renderer": ctx.renderer, "chapters": chapters, "joined": joined, "failed": failed},
        )
        return book
