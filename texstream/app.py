"""The interactive texture streaming demo and its command line."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence

import pygame

from texstream.color_generators import BouncingColorGenerator, LowPassColorFilter
from texstream.drawers import PointsTraverserDrawer
from texstream.factories import (
    PickerType,
    PointsTraverserType,
    create_picker,
    create_points_traverser,
    create_pusher,
)
from texstream.field import Field
from texstream.topology import TorusTopology

WINDOW_TITLE = "Texture streaming demo"
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
DEFAULT_DOTS_PER_STEP = 100.0
MIN_DOTS_PER_STEP = 1 / 60.0
FIELD_FILL_BEFORE_FLUSH = 0.9

_PICKER_KEYS = {
    pygame.K_1: PickerType.RANDOM,
    pygame.K_2: PickerType.FROM_START,
    pygame.K_3: PickerType.FROM_END,
    pygame.K_4: PickerType.RANDOM_WITH_CHANCE,
    pygame.K_5: PickerType.FROM_START_WITH_CHANCE,
    pygame.K_6: PickerType.FROM_END_WITH_CHANCE,
}

_PUSHER_KEYS = {
    pygame.K_KP1: PickerType.RANDOM,
    pygame.K_KP2: PickerType.FROM_START,
    pygame.K_KP3: PickerType.FROM_END,
    pygame.K_KP4: PickerType.RANDOM_WITH_CHANCE,
    pygame.K_KP5: PickerType.FROM_START_WITH_CHANCE,
    pygame.K_KP6: PickerType.FROM_END_WITH_CHANCE,
}

_TRAVERSER_KEYS = {
    pygame.K_q: PointsTraverserType.NEIGHBOUR4,
    pygame.K_w: PointsTraverserType.NEIGHBOUR4_WITH_CHANCE,
}


def cmd_option_exists(argv: Sequence[str], option: str) -> bool:
    """Tell whether an option appears among the arguments."""
    return option in argv


def get_cmd_option(argv: Sequence[str], option: str) -> str | None:
    """Return the argument following an option, or None if there is none."""
    try:
        position = list(argv).index(option)
    except ValueError:
        return None
    if position + 1 < len(argv):
        return argv[position + 1]
    return None


class StreamerApp:
    """Holds the field, the drawing strategies and the user's settings."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.field: Field[int] = Field(width, height, 0x00000000)
        self.topology = TorusTopology(width, height)
        self.color_filter = LowPassColorFilter(6, 0.2)
        self.color_generator = BouncingColorGenerator(0.000001, 0.000003, 0.000011)

        self.picker_type = PickerType.RANDOM
        self.pusher_type = PickerType.RANDOM
        self.traverser_type = PointsTraverserType.NEIGHBOUR4
        self.picker = create_picker(self.picker_type, self.rng)
        self.pusher = create_pusher(self.pusher_type, self.rng)
        self.traverser = create_points_traverser(self.traverser_type, self.rng)

        self.drawer = PointsTraverserDrawer(
            self.topology,
            self.picker,
            self.pusher,
            self.traverser,
            self.color_generator,
            FIELD_FILL_BEFORE_FLUSH,
            self.rng,
        )

        self.dots_per_step = DEFAULT_DOTS_PER_STEP
        self._dots_to_draw = 0.0
        self.should_close = False

    def handle_key(self, key: int) -> None:
        """React to a pressed key, given as a pygame key code."""
        if key == pygame.K_ESCAPE:
            self.should_close = True
        if key in _PICKER_KEYS:
            self.switch_picker(_PICKER_KEYS[key])
        if key in _PUSHER_KEYS:
            self.switch_pusher(_PUSHER_KEYS[key])
        if key in _TRAVERSER_KEYS:
            self.switch_points_traverser(_TRAVERSER_KEYS[key])

    def handle_scroll(self, y_offset: float) -> float:
        """Scale the drawing speed by a power of two and return the new speed."""
        self.dots_per_step = max(self.dots_per_step * 2.0**y_offset, MIN_DOTS_PER_STEP)
        print(f"Dots per step = {self.dots_per_step:.2f}")
        return self.dots_per_step

    def switch_picker(self, picker_type: PickerType) -> None:
        if picker_type == self.picker_type:
            return
        self.picker_type = picker_type
        self.picker = create_picker(picker_type, self.rng)
        self.drawer.picker = self.picker

    def switch_pusher(self, pusher_type: PickerType) -> None:
        if pusher_type == self.pusher_type:
            return
        self.pusher_type = pusher_type
        self.pusher = create_pusher(pusher_type, self.rng)
        self.drawer.pusher = self.pusher

    def switch_points_traverser(self, traverser_type: PointsTraverserType) -> None:
        if traverser_type == self.traverser_type:
            return
        self.traverser_type = traverser_type
        self.traverser = create_points_traverser(traverser_type, self.rng)
        self.drawer.traverser = self.traverser

    def step(self) -> int:
        """Advance one frame of drawing and return how many dots were drawn."""
        self._dots_to_draw += self.dots_per_step
        if self._dots_to_draw < 1.0:
            return 0
        count = int(self._dots_to_draw)
        self._dots_to_draw -= count
        for _ in range(count):
            self.drawer.draw(self.field)
        return count

    def _render(self, screen: pygame.Surface) -> None:
        image = pygame.image.frombuffer(
            self.field.to_bytes(), (self.field.width, self.field.height), "RGBA"
        )
        # Row zero of the field is the bottom of the picture.
        image = pygame.transform.flip(image, False, True)
        screen.blit(pygame.transform.scale(image, screen.get_size()), (0, 0))
        pygame.display.flip()

    def run(self, fullscreen: bool = False) -> None:
        """Open a window and draw until it is closed or Escape is pressed."""
        pygame.init()
        try:
            flags = pygame.FULLSCREEN if fullscreen else 0
            screen = pygame.display.set_mode((self.width, self.height), flags)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            while not self.should_close:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.should_close = True
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(event.key)
                    elif event.type == pygame.MOUSEWHEEL:
                        self.handle_scroll(event.y)
                self.step()
                self._render(screen)
                delta_ms = clock.tick()
                if delta_ms > 0:
                    print(f"FPS = {1000.0 / delta_ms:.2f}", end="\r", flush=True)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the demo; "-f" opens it full screen at the display's size."""
    args = list(sys.argv[1:] if argv is None else argv)
    fullscreen = cmd_option_exists(args, "-f")
    width, height = DEFAULT_WIDTH, DEFAULT_HEIGHT
    if fullscreen:
        pygame.display.init()
        info = pygame.display.Info()
        width, height = info.current_w, info.current_h
    StreamerApp(width, height).run(fullscreen)
    return 0


if __name__ == "__main__":
    sys.exit(main())