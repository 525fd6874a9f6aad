import pytest

from bonvoyage.leveltwo import (
    background_sprites,
    character_sprites,
    completed_layout,
    iron_throne,
    level_two_layout,
    life_layout,
)
from bonvoyage.leveltwo_props import track_sprites
from bonvoyage.state import WINDOW_HEIGHT, WINDOW_WIDTH, Rect


def _layout(throne=10000):
    return level_two_layout(throne, (400, 300), (120, 80), (600, 200), (90, 60))


def test_background_order_and_sizes():
    sprites = background_sprites()
    assert [s.image for s in sprites] == [
        "images/leveltwo/new/sky.png",
        "images/leveltwo/new/final moon.png",
        "images/leveltwo/new/mountains.png",
        "images/leveltwo/new/tree.png",
        "images/leveltwo/new/cloudsfinal.png",
        "images/leveltwo/new/newnightTrack.png",
    ]
    assert sprites[0].rect == Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)
    assert sprites[1].rect == Rect(WINDOW_WIDTH // 2, 150, 110, 110)
    assert sprites[4].rect.w == WINDOW_WIDTH - 200


def test_character_frame_and_position_agree():
    sheet, position = character_sprites((400, 300))
    assert (sheet.width, sheet.height) == (400, 300)
    assert sheet.frame == Rect(0, 0, 150, 200)
    assert (position.rect.w, position.rect.h) == (sheet.frame.w, sheet.frame.h)
    assert (position.rect.x, position.rect.y) == (30, 720)


@pytest.mark.parametrize("size", [(0, 10), (10, 0), (-4, 8)])
def test_character_rejects_bad_sheet(size):
    with pytest.raises(ValueError):
        character_sprites(size)


def test_iron_throne_follows_position():
    throne = iron_throne(10000)
    assert throne.rect == Rect(10000, 300, 254, 289)
    assert iron_throne(42).rect.x == 42


def test_life_layout_sits_on_first_track():
    tracks = track_sprites()
    life = life_layout(tracks, (90, 60))
    assert life.heart.rect.x == tracks[0].rect.x + 50
    assert life.heart.rect.y == tracks[0].rect.y - 70
    assert life.bonus_popup.rect.is_empty
    assert life.score_display.rect == Rect(1110, 63, 125, 39)
    assert life.heart_display.rect == Rect(1078, 31, 90, 72)
    assert life.heart_sheet.frame.w == 30


def test_life_layout_errors():
    with pytest.raises(ValueError):
        life_layout(track_sprites()[:1], (90, 60))
    with pytest.raises(ValueError):
        life_layout(track_sprites(), (0, 60))


def test_completed_layout_centres_trophy():
    done = completed_layout()
    assert done.overlay.rect == Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)
    trophy = done.message.rect
    assert trophy.x + trophy.w // 2 == WINDOW_WIDTH // 2
    assert trophy.y + trophy.h // 2 == WINDOW_HEIGHT // 2
    assert done.sprites == [done.overlay, done.message]


def test_level_two_layout_composes_parts():
    layout = _layout(throne=5000)
    assert layout.throne.rect.x == 5000
    assert len(layout.tracks) == 2
    assert len(layout.borders) == 2
    assert len(layout.coins) == 7
    assert all(c.rect.x == layout.tracks[0].rect.x + 150 for c in layout.coins)
    assert layout.explosion.rect.y == layout.dragon.rect.y
    assert layout.life.heart.rect.x == layout.tracks[0].rect.x + 50
    assert layout.character.rect.w == layout.character_sheet.frame.w


def test_level_two_sprites_contains_everything_once():
    layout = _layout()
    sprites = layout.sprites
    assert len(sprites) == len({id(s) for s in sprites})
    assert sprites[0] is layout.background[0]
    assert sprites[-1] is layout.character
    assert layout.throne in sprites and layout.bomb in sprites


def test_level_two_layout_rejects_bad_sheet():
    with pytest.raises(ValueError):
        level_two_layout(10000, (400, 300), (120, 80), (0, 200), (90, 60))