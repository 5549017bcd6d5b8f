"""Footnote references without a matching definition.

mdit-py-plugins only turns `[^label]` into a `footnote_ref` token when the
document also defines `[^label]: ...`. Chapters of a book often reference
footnotes defined elsewhere, and left as plain text such a reference would
end in `]` and block the join of the line that follows it. This extension
parses those references into opaque `footnote_ref_unresolved` tokens and
renders them back verbatim.

The module follows the mdformat parser-extension interface (`update_mdit`
plus `RENDERERS`) so it can sit in `options["parser_extension"]` next to the
installed mdformat plugins.
"""

from __future__ import annotations

import re
from typing import Mapping

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline
from mdformat.renderer import RenderContext, RenderTreeNode
from mdformat.renderer.typing import Render

TOKEN_TYPE = "footnote_ref_unresolved"

_REF_RE = re.compile(r"\[\^([^\]\s]+)\]")


def _unresolved_footnote_ref(state: StateInline, silent: bool) -> bool:
    if not state.src.startswith("[^", state.pos):
        return False
    match = _REF_RE.match(state.src, state.pos)
    if match is None or match.end() > state.posMax:
        return False
    if not silent:
        token = state.push(TOKEN_TYPE, "", 0)
        token.content = match.group(1)
        token.meta = {"label": match.group(1)}
    state.pos = match.end()
    return True


def update_mdit(mdit: MarkdownIt) -> None:
    # Must run after the footnote plugin so defined references keep their own token.
    mdit.inline.ruler.after("footnote_ref", TOKEN_TYPE, _unresolved_footnote_ref)


def _render_unresolved_ref(node: RenderTreeNode, context: RenderContext) -> str:
    return f"[^{node.meta['label']}]"


RENDERERS: Mapping[str, Render] = {TOKEN_TYPE: _render_unresolved_ref}
