import json

import pytest

from cjk_spacing_common.constants import MDBOOK_VERSION


def _chapter(name, content, sub_items=(), number=None):
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": number,
            "sub_items": list(sub_items),
            "path": f"{name}.md",
            "source_path": f"{name}.md",
            "parent_names": [],
        }
    }


@pytest.fixture
def book_payload():
    ctx = {
        "root": "/tmp/book",
        "config": {"book": {"title": "测试"}, "preprocessor": {"fix-cjk-spacing": {}}},
        "renderer": "html",
        "mdbook_version": MDBOOK_VERSION,
    }
    book = {
        "sections": [
            _chapter("intro", "中文\n测试\n", number=[1]),
            "Separator",
            {"PartTitle": "第一部分"},
            _chapter(
                "part",
                "English\ntext\n",
                number=[2],
                sub_items=[_chapter("nested", "嵌套\n章节\n", number=[2, 1])],
            ),
        ],
        "__non_exhaustive": None,
    }
    return [ctx, book]


@pytest.fixture
def book_json(book_payload):
    return json.dumps(book_payload, ensure_ascii=False)
