import pytest

from cmdweave.formatter import Designation
from cmdweave.themes import Color, PredefinedTheme, Theme, get_predefined_theme


def test_default_theme_colors():
    theme = Theme.default()
    assert theme[Designation.KEYWORD] is Color.YELLOW
    assert theme[Designation.HEADLINE] is Color.CYAN
    assert theme[Designation.DESCRIPTION] is Color.WHITE
    assert theme[Designation.ERROR] is Color.RED
    assert theme[Designation.OTHER] is Color.WHITE


def test_custom_theme_equals_colorful():
    theme = Theme(Color.GREEN, Color.MAGENTA, Color.BLUE, Color.RED, Color.WHITE)
    assert theme == Theme.colorful()


def test_constructor_order_maps_designations():
    theme = Theme(Color.BLACK, Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE)
    assert [theme[d] for d in (
        Designation.KEYWORD,
        Designation.HEADLINE,
        Designation.DESCRIPTION,
        Designation.ERROR,
        Designation.OTHER,
    )] == [Color.BLACK, Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE]


@pytest.mark.parametrize(
    "choice, expected",
    [(PredefinedTheme.PLAIN, Theme.plain()), (PredefinedTheme.COLORFUL, Theme.colorful())],
)
def test_predefined_themes(choice, expected):
    assert get_predefined_theme(choice) == expected


def test_plain_theme_errors_are_red():
    theme = Theme.plain()
    assert theme[Designation.ERROR] is Color.RED
    assert {theme[d] for d in Designation if d is not Designation.ERROR} == {Color.WHITE}


def test_unknown_designation_raises():
    with pytest.raises(KeyError):
        Theme.default()["keyword"]