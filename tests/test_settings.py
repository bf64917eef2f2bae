from hypothesis import given, strategies as st

from towercomb.settings import (
    DEFAULT_MENU,
    MAX_VOLUME,
    MIN_VOLUME,
    Menu,
    VolumeSetting,
    back_menu,
    credit_rows,
)


def test_default_menu_is_none():
    assert Menu(DEFAULT_MENU) is Menu.NONE


def test_back_menu_from_title_is_main():
    assert back_menu(True) is Menu.MAIN


def test_back_menu_in_game_is_pause():
    assert back_menu(False) is Menu.PAUSE


def test_default_label_is_full_volume():
    assert VolumeSetting().label() == "100%"


def test_label_is_padded_at_zero():
    setting = VolumeSetting(0.0)
    assert setting.label() == "  0%"


def test_lower_stops_at_minimum():
    setting = VolumeSetting()
    for _ in range(30):
        setting.lower()
    assert setting.volume == MIN_VOLUME


def test_raise_stops_at_maximum():
    setting = VolumeSetting()
    for _ in range(40):
        setting.raise_()
    assert setting.volume == MAX_VOLUME


def test_raise_then_lower_returns_to_start():
    setting = VolumeSetting()
    setting.raise_()
    setting.lower()
    assert abs(setting.volume - 1.0) < 1e-9


def test_raise_returns_new_volume():
    setting = VolumeSetting()
    assert setting.raise_() == setting.volume
    assert setting.volume > 1.0


@given(st.lists(st.booleans(), max_size=60))
def test_volume_stays_within_limits(steps):
    setting = VolumeSetting()
    for up in steps:
        if up:
            setting.raise_()
        else:
            setting.lower()
        assert MIN_VOLUME <= setting.volume <= MAX_VOLUME
        assert setting.label().endswith("%")


def test_credit_sections_in_order():
    assert [header for header, _ in credit_rows()] == ["Created by", "Assets"]


def test_credit_creators():
    _, creators = credit_rows()[0]
    assert [name for name, _ in creators] == ["@zellenon", "@jaminhaber", "@isaaguilar"]


def test_credit_assets():
    _, assets = credit_rows()[1]
    assert ("Music", "@isaaguilar") in assets