from itertools import combinations

import pytest

from bonvoyage.menus import legends_layout, level_choice_layout, welcome_layout
from bonvoyage.state import WHITE, WINDOW_HEIGHT, WINDOW_WIDTH


def _inside_window(rect):
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x + rect.w <= WINDOW_WIDTH
        and rect.y + rect.h <= WINDOW_HEIGHT
    )


def test_welcome_sky_fills_the_window():
    layout = welcome_layout()
    assert (layout.sky.rect.x, layout.sky.rect.y) == (0, 0)
    assert (layout.sky.rect.w, layout.sky.rect.h) == (WINDOW_WIDTH, WINDOW_HEIGHT)


def test_welcome_trees_are_wider_than_the_window():
    layout = welcome_layout()
    assert layout.trees.rect.w == WINDOW_WIDTH + 50
    assert layout.trees.rect.h == WINDOW_HEIGHT


def test_welcome_images():
    layout = welcome_layout()
    assert layout.sky.image == "./images/frontbackground/sky.png"
    assert layout.title.image == "images/bonvoyagelogo.png"
    assert layout.exit_button.image == "images/buttons/newExitButton.png"


def test_welcome_buttons_share_a_column():
    layout = welcome_layout()
    xs = {button.rect.x for button in layout.buttons}
    assert xs == {layout.new_game_button.rect.x}
    assert {button.rect.w for button in layout.buttons} == {309}


def test_welcome_buttons_are_spaced_by_one_hundred():
    layout = welcome_layout()
    ys = [button.rect.y for button in layout.buttons]
    assert [b - a for a, b in zip(ys, ys[1:])] == [100, 100, 100]


def test_welcome_buttons_do_not_overlap_and_fit():
    layout = welcome_layout()
    for first, second in combinations(layout.buttons, 2):
        assert not first.rect.intersects(second.rect)
    assert all(_inside_window(button.rect) for button in layout.buttons)


def test_welcome_sprites_order_and_tint():
    layout = welcome_layout()
    sprites = layout.sprites
    assert sprites[0] is layout.sky
    assert sprites[-1] is layout.exit_button
    assert len(sprites) == 9
    assert all(sprite.tint == WHITE for sprite in sprites)


def test_layouts_are_fresh_each_call():
    first = welcome_layout()
    first.new_game_button.rect.x = -1
    first.new_game_button.tint = (255, 78, 255)
    second = welcome_layout()
    assert second.new_game_button.rect.x != -1
    assert second.new_game_button.tint == WHITE


@pytest.mark.parametrize("factory", [level_choice_layout, legends_layout])
def test_two_button_windows_are_centred(factory):
    layout = factory()
    for button in layout.buttons:
        assert button.rect.x * 2 + button.rect.w == WINDOW_WIDTH
        assert _inside_window(button.rect)


@pytest.mark.parametrize("factory", [level_choice_layout, legends_layout])
def test_two_button_windows_stack_vertically(factory):
    layout = factory()
    one, two = layout.buttons
    assert two.rect.y - one.rect.y == 100
    assert not one.rect.intersects(two.rect)
    assert (one.rect.w, one.rect.h) == (two.rect.w, two.rect.h)


def test_level_choice_images():
    layout = level_choice_layout()
    assert layout.level_one_button.image == "images/buttons/newSundarbanButton.png"
    assert layout.level_two_button.image == "images/newcomponents/winterfell.png"
    assert layout.level_one_button.rect.w == 322


def test_legends_images():
    layout = legends_layout()
    assert layout.level_one_button.image == "images/newcomponents/legendsOfSundorban.png"
    assert layout.level_two_button.image.endswith("legendsOfWinterfell.png")
    assert layout.level_one_button.rect.w == 532


def test_button_contains_its_own_corners():
    button = legends_layout().level_one_button.rect
    assert button.contains(button.x, button.y)
    assert button.contains(button.x + button.w, button.y + button.h)
    assert not button.contains(button.x - 1, button.y)