import pytest

from bonvoyage.levelone import life_loss_sprites, life_sprites, obstacle_sprites
from bonvoyage.state import WINDOW_WIDTH, Rect, Sprite


def test_obstacle_images_and_sizes():
    obstacles = obstacle_sprites()
    assert [o.image for o in obstacles] == [
        "images/levelone/obstacles/rocktwin.png",
        "images/levelone/obstacles/bigrock.png",
        "images/levelone/obstacles/pumpkin.png",
    ]
    assert [(o.rect.w, o.rect.h) for o in obstacles] == [(160, 140), (224, 136), (102, 93)]


def test_obstacles_start_off_screen_on_ground():
    obstacles = obstacle_sprites()
    assert [o.rect.x for o in obstacles] == [WINDOW_WIDTH + 100, WINDOW_WIDTH + 100, WINDOW_WIDTH * 3]
    assert all(o.rect.y == 700 for o in obstacles)
    assert all(o.rect.x > WINDOW_WIDTH for o in obstacles)


def test_obstacles_are_independent_objects():
    first = obstacle_sprites()
    second = obstacle_sprites()
    first[0].rect.x = 5
    assert second[0].rect.x == WINDOW_WIDTH + 100


def test_life_sprites():
    lives = life_sprites()
    assert len(lives) == 6
    assert all(life.rect == Rect(600, 500, 56, 40) for life in lives)
    assert all(life.image == "images/levelone/obstacles/redlife.png" for life in lives)
    lives[0].rect.x = 0
    assert lives[1].rect.x == 600


def test_life_loss_follows_obstacles():
    obstacles = obstacle_sprites()
    losses = life_loss_sprites(obstacles)
    assert len(losses) == 3
    assert [l.rect.x for l in losses] == [o.rect.x for o in obstacles]
    assert all(l.rect.y == 700 and l.rect.is_empty for l in losses)
    assert all(l.image == "images/levelone/heartbreak.png" for l in losses)


def test_life_loss_uses_given_positions():
    obstacles = [Sprite(None, Rect(x, 0, 1, 1)) for x in (11, 22, 33)]
    assert [l.rect.x for l in life_loss_sprites(obstacles)] == [11, 22, 33]


def test_life_loss_needs_three_obstacles():
    with pytest.raises(ValueError):
        life_loss_sprites(obstacle_sprites()[:2])