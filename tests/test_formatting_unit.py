import pytest

from drill.formatting import to_display_form, to_superscript


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("x^2-7x+12", "x² - 7x + 12"),
        ("(x-3)(x-4)", "(x - 3)(x - 4)"),
        ("2*x+1", "2x + 1"),
        ("(x+1)*(x-1)", "(x + 1)(x - 1)"),
        ("x**3", "x³"),
        ("x^-1", "x⁻¹"),
        ("-x + 1", "-x + 1"),
        ("1/(x+1)=2", "1/(x + 1) = 2"),
        ("x=-5", "x = -5"),
        ("  x  =  -0.5 ", "x = -0.5"),
    ],
)
def test_to_display_form(raw: str, expected: str) -> None:
    assert to_display_form(raw) == expected


def test_term_order_is_preserved() -> None:
    assert to_display_form("12 + x^2 - 7x") == "12 + x² - 7x"


def test_symbols_are_prettified() -> None:
    out = to_display_form("2pi + sqrt(x)")
    assert "π" in out
    assert "√(" in out
    assert "pi" not in out


def test_to_superscript() -> None:
    assert to_superscript("2") == "²"
    assert to_superscript("-10") == "⁻¹⁰"
