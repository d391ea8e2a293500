"""Display formatting of raw learner input.

Purely cosmetic: the text is never parsed, so term order and the
learner's own notation are preserved.  ``x^2`` becomes ``x²``, explicit
``*`` becomes ``·`` (or disappears between a coefficient and a letter)
and binary operators get one space on each side.
"""

import re

_SUPERSCRIPT = str.maketrans("0123456789+-()", "⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻⁽⁾")

# Characters after which a '-' is binary (needs spaces around it).
_SUP_CHARS = "²³¹⁰⁴⁵⁶⁷⁸⁹⁾"
_BINARY_AFTER = r"[0-9A-Za-zπ" + re.escape(_SUP_CHARS) + r")]"


def to_superscript(text: str) -> str:
    """Convert a string of digits / signs into Unicode superscript."""
    return text.translate(_SUPERSCRIPT)


def _sup_repl(m: re.Match) -> str:
    return to_superscript(m.group(1))


def _prettify_symbols(s: str) -> str:
    # Lookarounds rather than \b so "2pi" is caught too.
    s = re.sub(r"(?<![a-zA-Z])pi(?![a-zA-Z])", "π", s)
    return s.replace("sqrt(", "√(")


def _normalize_spacing(s: str) -> str:
    """One space around '=' and '+', and around '-' only when it is binary.

    A unary '-' at the start or after '(' is left alone.
    """
    s = re.sub(r"\s*=\s*", " = ", s)
    s = re.sub(r"\s*\+\s*", " + ", s)
    s = re.sub(r"(" + _BINARY_AFTER + r")\s*-\s*", r"\1 - ", s)
    s = re.sub(r"\(\s+", "(", s)
    s = re.sub(r"\s+\)", ")", s)
    return re.sub(r"  +", " ", s).strip()


def _format_side(raw: str) -> str:
    s = raw.strip().replace("**", "^")
    s = re.sub(r"\^\(([-+]?\d+)\)", _sup_repl, s)
    s = re.sub(r"\^(-?\d+)", _sup_repl, s)
    # Remove * between coefficient and variable or opening paren
    s = re.sub(r"(\d)\*([A-Za-z(])", r"\1\2", s)
    s = re.sub(r"\)\*([A-Za-z(])", r")\1", s)
    s = s.replace("*", "·")
    return _prettify_symbols(_normalize_spacing(s))


def to_display_form(text: str) -> str:
    """Return a display-ready version of *text* (expression or equation)."""
    if "=" in text:
        return " = ".join(_format_side(side) for side in text.split("="))
    return _format_side(text)
