from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List, Sequence, Set

import mdformat.plugins
from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdformat.renderer import MDRenderer

from . import footnotes
from .classifier import ends_with_cjk, starts_with_cjk

# mdformat parser extensions (entry point names). "gfm" brings tables,
# strikethrough, task lists and autolinks.
PARSER_EXTENSIONS = ("gfm", "footnote")

# "keep" leaves every soft break that survives the join where it was.
MDFORMAT_OPTIONS: Dict[str, Any] = {"wrap": "keep", "number": False, "end_of_line": "lf"}

# Events whose payload is visible text. Link labels arrive as `text`
# children between link_open/link_close.
TEXT_EVENTS = frozenset({"text", "code_inline"})

SOFTBREAK = "softbreak"


class JoinError(RuntimeError):
    """The filtered token stream could not be written back as markdown."""


@lru_cache(maxsize=None)
def build_parser() -> MarkdownIt:
    """Markdown parser + serializer, configured the way mdformat builds its own."""
    mdit = MarkdownIt(renderer_cls=MDRenderer)
    mdit.options["mdformat"] = dict(MDFORMAT_OPTIONS)
    mdit.options["store_labels"] = True

    extensions = [mdformat.plugins.PARSER_EXTENSIONS[name] for name in PARSER_EXTENSIONS]
    extensions.append(footnotes)
    mdit.options["parser_extension"] = extensions
    for ext in extensions:
        ext.update_mdit(mdit)
    return mdit


def flatten(tokens: Sequence[Token]) -> List[Token]:
    """Depth-first event list: each token, then its inline children."""
    events: List[Token] = []
    stack = list(reversed(tokens))
    while stack:
        token = stack.pop()
        events.append(token)
        if token.children:
            stack.extend(reversed(token.children))
    return events


def parse_events(markdown: str) -> List[Token]:
    return flatten(build_parser().parse(markdown))


def find_prev_text(events: Sequence[Token], index: int) -> str:
    for i in range(index - 1, -1, -1):
        event = events[i]
        if event.type in TEXT_EVENTS and event.content:
            return event.content
    return ""


def find_next_text(events: Sequence[Token], index: int) -> str:
    for i in range(index + 1, len(events)):
        event = events[i]
        if event.type in TEXT_EVENTS and event.content:
            return event.content
    return ""


def retention_mask(events: Sequence[Token]) -> List[bool]:
    """One flag per event; False marks a soft break between two CJK runs."""
    keep: List[bool] = []
    for index, event in enumerate(events):
        if event.type != SOFTBREAK:
            keep.append(True)
            continue
        prev_text = find_prev_text(events, index)
        next_text = find_next_text(events, index)
        keep.append(not (ends_with_cjk(prev_text) and starts_with_cjk(next_text)))
    return keep


def apply_mask(tokens: Sequence[Token], events: Sequence[Token], mask: Sequence[bool]) -> List[Token]:
    """Drop the events `mask` rejects from the token tree, order preserved."""
    if len(mask) != len(events):
        raise ValueError(f"mask has {len(mask)} entries for {len(events)} events")
    dropped = {id(event) for event, keep in zip(events, mask) if not keep}
    return _prune(tokens, dropped)


def _prune(tokens: Sequence[Token], dropped: Set[int]) -> List[Token]:
    kept: List[Token] = []
    for token in tokens:
        if id(token) in dropped:
            continue
        if token.children:
            token.children = _prune(token.children, dropped)
        kept.append(token)
    return kept


def join_cjk_spacing(markdown: str) -> str:
    """Remove soft line breaks that sit between two pieces of CJK text.

    The markdown is parsed, every soft break whose nearest text on both
    sides is CJK is dropped, and the result is written back with mdformat.
    Formatting unrelated to the join is normalized to mdformat's style.

    Raises:
        JoinError: if the filtered tokens cannot be rendered as markdown.
    """
    mdit = build_parser()
    env: Dict[str, Any] = {}
    tokens = mdit.parse(markdown, env)

    events = flatten(tokens)
    mask = retention_mask(events)
    tokens = apply_mask(tokens, events, mask)

    try:
        rendered = mdit.renderer.render(tokens, mdit.options, env)
    except Exception as e:
        raise JoinError(f"Markdown serialization failed: {e}") from e

    # mdformat always terminates its output with a newline.
    if rendered.endswith("\n") and not markdown.endswith("\n"):
        rendered = rendered[:-1]
    return rendered
