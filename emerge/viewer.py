"""Window that animates a graph's layout."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from emerge.graph import Graph, World, build_world
from emerge.physics import physics_update
from emerge.renderer import render

FONT_SIZE = 20


@dataclass(frozen=True)
class WindowConfig:
    """Settings of the viewer window."""

    title: str = "Emerge - Graph"
    width: int = 1280
    height: int = 720
    resizable: bool = False
    fps: int = 60


def default_window_conf() -> WindowConfig:
    """Return the standard window settings."""
    return WindowConfig()


def render_graph(
    graph: Graph,
    config: WindowConfig | None = None,
    max_frames: int | None = None,
) -> World:
    """Open a window and animate the graph until it closes.

    With ``max_frames`` the loop also stops after that many frames. The
    world in its final state is returned.
    """
    if max_frames is not None and max_frames < 0:
        raise ValueError(f"max_frames must not be negative, got {max_frames}")
    config = config if config is not None else default_window_conf()
    world = build_world(graph)

    pygame.display.init()
    pygame.font.init()
    try:
        flags = pygame.RESIZABLE if config.resizable else 0
        screen = pygame.display.set_mode((config.width, config.height), flags)
        pygame.display.set_caption(config.title)
        font = pygame.font.Font(None, FONT_SIZE)
        clock = pygame.time.Clock()
        frames = 0
        while max_frames is None or frames < max_frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            render(screen, world, font)
            physics_update(world)
            pygame.display.flip()
            clock.tick(config.fps)
            frames += 1
    finally:
        pygame.quit()
    return world