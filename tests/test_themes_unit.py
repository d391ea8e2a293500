from gui import themes


def test_palette_returns_expected_dict() -> None:
    assert themes.palette("dark") == themes.DARK_PALETTE
    assert themes.palette("light") == themes.LIGHT_PALETTE


def test_palettes_define_the_same_keys() -> None:
    assert set(themes.DARK_PALETTE) == set(themes.LIGHT_PALETTE)


def test_apply_theme_updates_module_globals() -> None:
    themes.apply_theme("light")
    assert themes.BG == themes.LIGHT_PALETTE["BG"]
    assert themes.INVALID_BG == themes.LIGHT_PALETTE["INVALID_BG"]

    themes.apply_theme("dark")
    assert themes.BG == themes.DARK_PALETTE["BG"]
    assert themes.INVALID_BG == themes.DARK_PALETTE["INVALID_BG"]
