"""
render_sink.py: Reflects GameState snapshots onto a pygame surface.

Every drawable has a stable id. `render` creates missing drawables, updates
existing ones and only repaints when some attribute actually changed, so
rendering the same state twice is a no-op.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import pygame

from .constants import (
    BACKGROUND_COLOUR, BANNER_FONT_SIZE, BOTTOM_BOUND, CANVAS_HEIGHT, CANVAS_WIDTH,
    DEFEAT_COLOUR, DEFEAT_TEXT, ENERGY_FONT_SIZE, ENERGY_PREFIX, PROMPT_FONT_SIZE,
    PROMPT_TEXT, RAGE_COLOURS, SCORE_FONT_SIZE, SIDE_BOUND, TOP_BOUND, UI_COLOUR,
    VICTORY_COLOUR, VICTORY_TEXT
)
from .data_models import Ball, GameState, Paddle, PaddleId, TextLabel
from .session import DEFEAT, PROMPT, VICTORY

RECT = "rect"
CIRCLE = "circle"
TEXT = "text"

Attrs = Tuple[Tuple[str, object], ...]


def rage_colour(level: int) -> tuple:
    """Colour for a rage level; anything past the last tier uses the last tier."""
    if level >= len(RAGE_COLOURS):
        return RAGE_COLOURS[-1]
    return RAGE_COLOURS[max(level, 0)]


# -------- Labels --------

OVERLAYS = {
    PROMPT: TextLabel(PROMPT, CANVAS_WIDTH / 4, CANVAS_HEIGHT / 2, PROMPT_FONT_SIZE, PROMPT_TEXT),
    VICTORY: TextLabel(VICTORY, CANVAS_WIDTH / 4, CANVAS_HEIGHT / 2, BANNER_FONT_SIZE,
                       VICTORY_TEXT, VICTORY_COLOUR),
    DEFEAT: TextLabel(DEFEAT, CANVAS_WIDTH / 4, CANVAS_HEIGHT / 2, BANNER_FONT_SIZE,
                      DEFEAT_TEXT, DEFEAT_COLOUR),
}


def scoreboard_labels(state: GameState) -> List[TextLabel]:
    """The two scoreboards and the player's rage display."""
    energy = state.player_energy
    return [
        TextLabel("ScorePlayer", CANVAS_WIDTH / 4, TOP_BOUND + SCORE_FONT_SIZE,
                  SCORE_FONT_SIZE, value=state.player_score),
        TextLabel("ScoreAI", CANVAS_WIDTH * 3 / 4 - SCORE_FONT_SIZE, TOP_BOUND + SCORE_FONT_SIZE,
                  SCORE_FONT_SIZE, value=state.ai_score),
        TextLabel("playerEnergy", CANVAS_WIDTH / 4, CANVAS_HEIGHT - BOTTOM_BOUND - ENERGY_FONT_SIZE,
                  ENERGY_FONT_SIZE, ENERGY_PREFIX, rage_colour(energy), value=energy),
    ]


# -------- Drawing --------

FONT_SIZES = (SCORE_FONT_SIZE, ENERGY_FONT_SIZE, PROMPT_FONT_SIZE, BANNER_FONT_SIZE)


@dataclass(frozen=True)
class RenderContext:
    """The display handle and its fonts. Created once at startup and only read afterwards."""
    surface: pygame.Surface
    fonts: Mapping[int, pygame.font.Font] = field(compare=False)
    background: tuple = BACKGROUND_COLOUR

    @classmethod
    def create(cls, surface: pygame.Surface, background: tuple = BACKGROUND_COLOUR) -> "RenderContext":
        if not pygame.font.get_init():
            pygame.font.init()
        fonts = MappingProxyType({size: pygame.font.Font(None, size) for size in FONT_SIZES})
        return cls(surface=surface, fonts=fonts, background=background)

    def font(self, size: int) -> pygame.font.Font:
        return self.fonts[size]


class RenderSink:
    """Keeps the drawables by id and repaints the surface when one changes."""

    def __init__(self, context: RenderContext):
        self.context = context
        self.drawables: Dict[str, Tuple[str, Attrs]] = {}
        self.frames_drawn = 0
        self._draw_walls()

    def _draw_walls(self):
        walls = {
            "WallL": (0, 0, SIDE_BOUND, CANVAS_HEIGHT),
            "WallR": (CANVAS_WIDTH - SIDE_BOUND, 0, SIDE_BOUND, CANVAS_HEIGHT),
            "WallT": (0, 0, CANVAS_WIDTH, TOP_BOUND),
            "WallB": (0, CANVAS_HEIGHT - BOTTOM_BOUND, CANVAS_WIDTH, BOTTOM_BOUND),
        }
        for wall_id, (x, y, w, h) in walls.items():
            self.upsert(wall_id, RECT, {"x": x, "y": y, "width": w, "height": h, "fill": UI_COLOUR})

    def upsert(self, drawable_id: str, kind: str, attrs: dict) -> bool:
        """Creates or updates a drawable. Returns True if anything changed."""
        entry = (kind, tuple(attrs.items()))
        if self.drawables.get(drawable_id) == entry:
            return False
        self.drawables[drawable_id] = entry
        return True

    def remove(self, drawable_id: str) -> bool:
        return self.drawables.pop(drawable_id, None) is not None

    def render(self, state: GameState, overlay: Optional[str] = None) -> bool:
        """Reflects `state` (and an optional overlay label) onto the surface."""
        changed = self._paddle(state.player_paddle)
        changed |= self._paddle(state.ai_paddle)
        changed |= self._ball(state.ball)
        for label in scoreboard_labels(state):
            changed |= self._text(label)

        for overlay_id in OVERLAYS:
            if overlay_id != overlay:
                changed |= self.remove(overlay_id)
        if overlay is not None:
            changed |= self._text(OVERLAYS[overlay])

        if changed:
            self.draw()
        return changed

    def _paddle(self, paddle: Paddle) -> bool:
        fill = rage_colour(paddle.energy) if paddle.id is PaddleId.PLAYER else UI_COLOUR
        return self.upsert(paddle.id.value, RECT, {
            "x": paddle.x, "y": paddle.y,
            "width": paddle.width, "height": paddle.height,
            "fill": fill,
        })

    def _ball(self, ball: Ball) -> bool:
        return self.upsert("ball", CIRCLE, {"cx": ball.x, "cy": ball.y, "r": ball.radius, "fill": UI_COLOUR})

    def _text(self, label: TextLabel) -> bool:
        return self.upsert(label.id, TEXT, {
            "x": label.x, "y": label.y, "size": label.size,
            "content": label.content, "fill": label.colour,
        })

    def draw(self):
        """Paints every drawable, in creation order, onto the context surface."""
        surface = self.context.surface
        surface.fill(self.context.background)
        for kind, attrs in self.drawables.values():
            a = dict(attrs)
            if kind == RECT:
                rect = (int(a["x"]), int(a["y"]), int(a["width"]), int(a["height"]))
                pygame.draw.rect(surface, a["fill"], rect)
            elif kind == CIRCLE:
                pygame.draw.circle(surface, a["fill"], (int(a["cx"]), int(a["cy"])), int(a["r"]))
            elif kind == TEXT:
                font = self.context.font(a["size"])
                text = font.render(a["content"], True, a["fill"])
                # Label y is the text baseline
                surface.blit(text, (int(a["x"]), int(a["y"]) - font.get_ascent()))
        self.frames_drawn += 1
