import pytest

from compbench.style import Font, FontType, color, gui_font, paper_font


def test_undarkened_colour_matches_palette():
    assert color(0, 100, 255) == (255, 131, 0, 255)
    assert color(1, 100, 255) == (1, 92, 191, 255)


def test_palette_cycles():
    assert color(6) == color(0)
    assert color(7, 150, 20) == color(1, 150, 20)


def test_alpha_is_kept():
    assert color(2, alpha=180)[3] == 180


def test_darker_never_brightens():
    for index in range(6):
        base = color(index, 100)
        dark = color(index)
        assert all(d <= b for d, b in zip(dark[:3], base[:3]))
        assert sum(dark[:3]) < sum(base[:3])


def test_non_positive_factor_leaves_colour_unchanged():
    assert color(3, 0) == color(3, 100)


def test_factor_below_hundred_lightens():
    base = color(1, 100)
    light = color(1, 50)
    assert all(lc >= bc for lc, bc in zip(light[:3], base[:3]))
    assert max(light[:3]) == 255


def test_gui_fonts_from_source():
    assert gui_font(FontType.Title) == Font(True, 19)
    assert gui_font(FontType.XAxis) == Font(False, 8)
    assert gui_font(FontType.Legend) == Font(True, 10)


def test_paper_fonts_from_source():
    assert paper_font(FontType.Title) == Font(True, 28)
    assert paper_font(FontType.Subtitle) == Font(True, 18)
    assert paper_font(FontType.YAxis) == Font(True, 16)


@pytest.mark.parametrize("font_type", list(FontType))
def test_paper_fonts_are_larger(font_type):
    assert paper_font(font_type).point_size > gui_font(font_type).point_size
    assert paper_font(font_type).bold == gui_font(font_type).bold


def test_weight_name():
    assert gui_font(FontType.XAxis).weight == "normal"
    assert gui_font(FontType.YAxis).weight == "bold"


def test_unknown_font_type():
    with pytest.raises(ValueError):
        gui_font(17)