"""Menu-driven window that shows a sorting algorithm at work."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

import pygame

from .sorting import (
    BACKGROUND,
    AlgorithmType,
    Color,
    SortingAlgorithm,
    create_algorithm,
)

SCREEN_WIDTH = 1000
FPS = 120
BOX_HEIGHT = 100
BOX_GAP = 30
FONT_NAME = "arial"
FONT_RENDER_SIZE = 24
PRESENT_DELAY_MS = 2
TEXT_COLOR = (255, 255, 255)
MENU_BACKGROUND = (0, 0, 0)
FIRST_BUTTON = 2

TITLE = "Sorting Algorithm Visualizer"
PROMPT = "Choose A Sorting Algorithm"
BUTTON_LABELS = (
    AlgorithmType.INSERTION_SORT.value,
    AlgorithmType.SELECTION_SORT.value,
    AlgorithmType.QUICK_SORT.value,
)


@dataclass
class TextBox:
    """A line of text shown in a fixed-size rectangle; doubles as a button."""

    message: str
    font_size: int
    width: int
    height: int
    x: int = 0
    y: int = 0

    @property
    def rect(self) -> tuple[int, int, int, int]:
        """The (x, y, w, h) rectangle the box covers."""
        return (self.x, self.y, self.width, self.height)

    def place(self, x: int, y: int) -> None:
        """Move the box's top-left corner to (x, y)."""
        self.x = x
        self.y = y

    def contains(self, x: int, y: int) -> bool:
        """Tell whether a point lies in the box, edges included."""
        return (
            self.x <= x <= self.x + self.width
            and self.y <= y <= self.y + self.height
        )


def menu_boxes(screen_width: int) -> list[TextBox]:
    """Return the main menu: a title, a prompt, then one button per algorithm."""
    half = screen_width // 2
    boxes = [
        TextBox(TITLE, 35, screen_width, BOX_HEIGHT),
        TextBox(PROMPT, 15, half, BOX_HEIGHT // 3),
    ]
    boxes.extend(TextBox(label, 15, half, BOX_HEIGHT) for label in BUTTON_LABELS)
    return boxes


def layout_text_boxes(boxes: Sequence[TextBox], screen_width: int) -> None:
    """Put the first box at the top left and stack the rest centred below it."""
    previous: TextBox | None = None
    for box in boxes:
        if previous is None:
            box.place(0, 0)
        else:
            box.place(
                screen_width // 2 - box.width // 2,
                previous.y + previous.height + BOX_GAP,
            )
        previous = box


def algorithm_for_label(label: str) -> AlgorithmType:
    """Return the algorithm a menu button stands for."""
    try:
        return AlgorithmType(label)
    except ValueError as exc:
        raise ValueError(f"no algorithm is labelled {label!r}") from exc


def array_size_for(screen_width: int) -> int:
    """Return how many bars to sort on a screen of the given width."""
    return screen_width // 10


class PygameCanvas:
    """Draws an algorithm's bars on a pygame surface and watches for quit keys."""

    def __init__(
        self,
        surface: pygame.Surface,
        flip: Callable[[], object] | None = None,
        events: Callable[[], Iterable[pygame.event.Event]] | None = None,
        delay_ms: int = PRESENT_DELAY_MS,
    ) -> None:
        self.surface = surface
        self._flip = flip if flip is not None else pygame.display.flip
        self._events = events if events is not None else pygame.event.get
        self.delay_ms = delay_ms

    def draw_bar(self, algorithm: SortingAlgorithm, index: int, color: Color) -> None:
        """Fill the bar at `index` in the given colour."""
        pygame.draw.rect(self.surface, color, algorithm.bar_rect(index))

    def clear_bar(self, algorithm: SortingAlgorithm, index: int) -> None:
        """Paint the whole column of the bar at `index` in the background colour."""
        pygame.draw.rect(self.surface, BACKGROUND, algorithm.column_rect(index))

    def present(self) -> None:
        """Show what has been drawn, then pause briefly so the steps can be seen."""
        self._flip()
        if self.delay_ms > 0:
            pygame.time.delay(self.delay_ms)

    def keep_running(self) -> bool:
        """Drain pending events; return False if the window closed or Escape was hit."""
        for event in self._events():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True


def _render_boxes(
    font: pygame.font.Font, boxes: Sequence[TextBox]
) -> dict[str, pygame.Surface]:
    rendered = {}
    for box in boxes:
        text = font.render(box.message, False, TEXT_COLOR)
        rendered[box.message] = pygame.transform.scale(text, (box.width, box.height))
    return rendered


def _display_menu(
    screen: pygame.Surface,
    boxes: Sequence[TextBox],
    rendered: dict[str, pygame.Surface],
    screen_width: int,
) -> None:
    screen.fill(MENU_BACKGROUND)
    layout_text_boxes(boxes, screen_width)
    for box in boxes:
        screen.blit(rendered[box.message], (box.x, box.y))
    pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the visualiser window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="pixelplay-sort", description="Watch sorting algorithms at work."
    )
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH, help="window size")
    args = parser.parse_args(argv)
    width = args.width

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, width))
        pygame.display.set_caption(TITLE)
        font = pygame.font.SysFont(FONT_NAME, FONT_RENDER_SIZE)
        boxes = menu_boxes(width)
        layout_text_boxes(boxes, width)
        rendered = _render_boxes(font, boxes)
        canvas = PygameCanvas(screen)
        clock = pygame.time.Clock()

        algorithm: SortingAlgorithm | None = None
        running = True
        full_screen = False
        show_initial = True
        in_menu = True

        def toggle_full_screen() -> None:
            nonlocal full_screen, screen
            full_screen = not full_screen
            flags = pygame.FULLSCREEN if full_screen else 0
            screen = pygame.display.set_mode((width, width), flags)
            canvas.surface = screen

        while running:
            for event in pygame.event.get():
                if in_menu:
                    if show_initial:
                        _display_menu(screen, boxes, rendered, width)
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_f:
                        toggle_full_screen()
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        for box in boxes[FIRST_BUTTON:]:
                            if box.contains(*event.pos):
                                algorithm = create_algorithm(
                                    algorithm_for_label(box.message),
                                    width,
                                    array_size_for(width),
                                )
                                in_menu = False
                    continue

                if show_initial and algorithm is not None:
                    algorithm.draw_all(canvas)
                    show_initial = False

                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_f:
                        toggle_full_screen()
                    elif event.key == pygame.K_r and algorithm is not None:
                        running = algorithm.sort(canvas)
                    elif event.key == pygame.K_ESCAPE:
                        running = False
                    elif (
                        event.key == pygame.K_m
                        and algorithm is not None
                        and algorithm.is_sorted
                    ):
                        in_menu = True
                        algorithm = None
                        screen.fill(MENU_BACKGROUND)
                        show_initial = True
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0