import pytest

from mazeblocks.color_cycle import (
    GRADIENT_COLORS,
    GRADIENT_FRAMES,
    SWITCH_COLORS,
    SWITCH_FRAMES,
    ColorSwitcher,
    GradientCycle,
)


def test_gradient_starts_at_first_colour():
    cycle = GradientCycle()
    assert cycle.step() == GRADIENT_COLORS[0]


def test_gradient_moves_monotonically_towards_next_colour():
    cycle = GradientCycle()
    colors = [cycle.step() for _ in range(GRADIENT_FRAMES + 1)]
    reds = [c[0] for c in colors]
    assert all(a <= b for a, b in zip(reds, reds[1:]))
    assert reds[-1] > reds[0]
    assert colors[-1][0] == pytest.approx(GRADIENT_COLORS[1][0], abs=0.02)


def test_gradient_switches_segment_after_threshold():
    cycle = GradientCycle()
    for _ in range(GRADIENT_FRAMES + 1):
        cycle.step()
    assert cycle.step() == GRADIENT_COLORS[1]
    assert cycle.index == 1
    assert cycle.end == GRADIENT_COLORS[2]


def test_gradient_requires_two_colours():
    with pytest.raises(ValueError):
        GradientCycle(colors=[(0.0, 0.0, 0.0)])


def test_gradient_key_reports_code_and_wraps():
    cycle = GradientCycle()
    assert cycle.key_pressed(119) == "Key code is 119"
    for _ in range(len(GRADIENT_COLORS) - 1):
        cycle.key_pressed("w")
    assert cycle.index == 0


def test_key_string_matches_code():
    assert GradientCycle().key_pressed("w") == ColorSwitcher().key_pressed(ord("w"))


def test_key_must_be_single_character():
    with pytest.raises(ValueError):
        ColorSwitcher().key_pressed("ab")


def test_switcher_holds_first_colour_until_threshold():
    switcher = ColorSwitcher()
    colors = {switcher.step() for _ in range(SWITCH_FRAMES + 1)}
    assert colors == {SWITCH_COLORS[0]}


def test_switcher_moves_to_next_colour():
    switcher = ColorSwitcher()
    for _ in range(SWITCH_FRAMES + 1):
        switcher.step()
    assert switcher.step() == SWITCH_COLORS[1]


def test_switcher_wraps_around_palette():
    switcher = ColorSwitcher()
    for _ in range(len(SWITCH_COLORS)):
        for _ in range(SWITCH_FRAMES + 2):
            last = switcher.step()
    assert last == SWITCH_COLORS[0]
    assert switcher.index == 0


def test_switcher_key_skips_a_colour():
    switcher = ColorSwitcher()
    switcher.key_pressed("a")
    for _ in range(SWITCH_FRAMES + 1):
        switcher.step()
    assert switcher.step() == SWITCH_COLORS[2]