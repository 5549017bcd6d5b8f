import pytest

from cjk_spacing.classifier import CJK_RANGES, ends_with_cjk, is_cjk, starts_with_cjk


@pytest.mark.parametrize("low,high", CJK_RANGES)
def test_range_bounds_are_inclusive(low, high):
    assert is_cjk(chr(low))
    assert is_cjk(chr(high))


@pytest.mark.parametrize(
    "cp",
    [0x1FFF, 0x2070, 0x2E7F, 0x2EE0, 0x2FFF, 0xA000, 0xABFF, 0xD800, 0xF8FF, 0xFB00, 0xFE2F, 0xFE70, 0xFEFF, 0xFFEF],
)
def test_neighbours_of_ranges_are_not_cjk(cp):
    assert not is_cjk(chr(cp))


def test_scripts():
    for ch in "中文測試あカ한。，、「」…":
        assert is_cjk(ch), ch
    for ch in "aZ1 \t.,-]é":
        assert not is_cjk(ch), ch


def test_supplementary_plane_is_excluded():
    assert not is_cjk("\U00020000")  # CJK Extension B
    assert not is_cjk("\U0001F600")  # emoji


def test_run_boundaries():
    assert starts_with_cjk("中文abc")
    assert not ends_with_cjk("中文abc")
    assert ends_with_cjk("abc中文")
    assert not starts_with_cjk("abc中文")


def test_empty_run_is_not_cjk():
    assert not starts_with_cjk("")
    assert not ends_with_cjk("")
