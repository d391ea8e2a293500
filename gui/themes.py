"""
Algebra Drill — colour / theme definitions

Immutable palette dicts and mutable module-level shortcuts that are updated
by ``apply_theme()`` whenever the user toggles between dark and light mode.
"""

import sys

DARK_PALETTE = dict(
    BG          = "#0a0a0a",
    HEADER_BG   = "#111111",
    ACCENT      = "#1a8cff",
    ACCENT_HOVER= "#0a70d4",
    TEXT        = "#d0d0d0",
    TEXT_DIM    = "#8a8a8a",
    TEXT_BRIGHT = "#f0f0f0",
    CARD_BG     = "#151515",
    CARD_BORDER = "#2a2a2a",
    ORIGIN_BG   = "#101a2a",
    VALID_BG    = "#121212",
    INVALID_BG  = "#2a1212",
    HINT_BG     = "#1f1a08",
    HINT_FG     = "#f0c040",
    SUCCESS     = "#4caf50",
    ERROR       = "#ff5555",
    INPUT_BG    = "#181818",
    INPUT_BORDER= "#2a2a2a",
)

LIGHT_PALETTE = dict(
    BG          = "#f2f4f7",
    HEADER_BG   = "#ffffff",
    ACCENT      = "#4f46e5",
    ACCENT_HOVER= "#4338ca",
    TEXT        = "#444444",
    TEXT_DIM    = "#777777",
    TEXT_BRIGHT = "#111111",
    CARD_BG     = "#ffffff",
    CARD_BORDER = "#dde2ea",
    ORIGIN_BG   = "#eef2ff",
    VALID_BG    = "#ffffff",
    INVALID_BG  = "#fef2f2",
    HINT_BG     = "#fefce8",
    HINT_FG     = "#854d0e",
    SUCCESS     = "#16a34a",
    ERROR       = "#dc2626",
    INPUT_BG    = "#ffffff",
    INPUT_BORDER= "#c5ccd6",
)

# ── Mutable "active" colour shortcuts ─────────────────────────────────────
# These start with dark-mode values and are refreshed by ``apply_theme()``.

BG           = DARK_PALETTE["BG"]
HEADER_BG    = DARK_PALETTE["HEADER_BG"]
ACCENT       = DARK_PALETTE["ACCENT"]
ACCENT_HOVER = DARK_PALETTE["ACCENT_HOVER"]
TEXT         = DARK_PALETTE["TEXT"]
TEXT_DIM     = DARK_PALETTE["TEXT_DIM"]
TEXT_BRIGHT  = DARK_PALETTE["TEXT_BRIGHT"]
CARD_BG      = DARK_PALETTE["CARD_BG"]
CARD_BORDER  = DARK_PALETTE["CARD_BORDER"]
ORIGIN_BG    = DARK_PALETTE["ORIGIN_BG"]
VALID_BG     = DARK_PALETTE["VALID_BG"]
INVALID_BG   = DARK_PALETTE["INVALID_BG"]
HINT_BG      = DARK_PALETTE["HINT_BG"]
HINT_FG      = DARK_PALETTE["HINT_FG"]
SUCCESS      = DARK_PALETTE["SUCCESS"]
ERROR        = DARK_PALETTE["ERROR"]
INPUT_BG     = DARK_PALETTE["INPUT_BG"]
INPUT_BORDER = DARK_PALETTE["INPUT_BORDER"]


def palette(theme: str) -> dict:
    """Return the palette dict for *theme* (``"dark"`` or ``"light"``)."""
    return DARK_PALETTE if theme == "dark" else LIGHT_PALETTE


def apply_theme(theme: str) -> None:
    """Update the mutable module-level colour shortcuts for *theme*."""
    mod = sys.modules[__name__]
    for k, v in palette(theme).items():
        setattr(mod, k, v)
