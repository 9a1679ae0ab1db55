"""Offscreen rendering checks: draw order and what gets drawn."""

from __future__ import annotations

import pygame
import pytest

from core.geometry import Viewport
from core.light import Light
from core.renderer import Renderer
from core.scene import Scene
from core.wall import Wall
from data.light_stats import LIGHT_STATS
from data.wall_stats import WALL_STATS
from settings import COLORS, WALL_PATH_WIDTH

WALL = [(140, 90), (160, 90), (160, 110), (140, 110)]


def _rgb(surface: pygame.Surface, pos: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(surface.get_at(pos))[:3]


@pytest.fixture
def surface() -> pygame.Surface:
    return pygame.Surface((200, 200))


@pytest.fixture
def renderer() -> Renderer:
    return Renderer(COLORS, WALL_PATH_WIDTH)


@pytest.fixture
def scene() -> Scene:
    scene = Scene(Light((100, 100), LIGHT_STATS), WALL_STATS)
    scene.walls.append(Wall(WALL, WALL_STATS))
    return scene


def _render(renderer, surface, scene) -> None:
    scene.update_shadows(Viewport.from_rect(surface.get_rect()))
    renderer.draw(surface, scene)


def test_background_shadow_wall_and_light(renderer, surface, scene) -> None:
    _render(renderer, surface, scene)

    assert _rgb(surface, (20, 20)) == COLORS["background"]
    # Behind the wall, away from the light
    assert _rgb(surface, (185, 100)) == COLORS["shadow"]
    # The shadow polygon covers the wall too; the wall is drawn over it
    assert _rgb(surface, (150, 100)) == WALL_STATS["color"]
    assert _rgb(surface, (100, 100)) == LIGHT_STATS["color"]
    # In front of the wall is lit
    assert _rgb(surface, (125, 100)) == COLORS["background"]


def test_light_is_drawn_over_walls(renderer, surface) -> None:
    scene = Scene(Light((150, 100), LIGHT_STATS), WALL_STATS)
    scene.walls.append(Wall(WALL, WALL_STATS))
    _render(renderer, surface, scene)

    # Light inside the wall: no shadow, and the light sits on top
    assert scene.shadows == []
    assert _rgb(surface, (150, 100)) == LIGHT_STATS["color"]


def test_single_point_wall_draws_nothing(renderer, surface) -> None:
    scene = Scene(Light((20, 20), LIGHT_STATS), WALL_STATS)
    scene.add_wall_point((100, 150))
    _render(renderer, surface, scene)
    assert _rgb(surface, (100, 150)) == COLORS["background"]


def test_wall_under_construction_is_stroked_on_top(renderer, surface, scene) -> None:
    # Path runs across the shadowed wall
    scene.add_wall_point((150, 60))
    scene.add_wall_point((150, 140))
    _render(renderer, surface, scene)

    assert _rgb(surface, (150, 100)) == COLORS["wall_path"]
    assert _rgb(surface, (150, 70)) == COLORS["wall_path"]
    # Off the path the wall is still visible
    assert _rgb(surface, (145, 100)) == WALL_STATS["color"]
