"""Heads-up display and main menu layout."""

from __future__ import annotations

WHITE = (1.0, 1.0, 1.0)


def score_text(score: int) -> str:
    """Text shown in the score display."""
    return f"Score: {score}"


class Hud:
    """The score line in the top-left corner."""

    font_size = 30.0
    color = WHITE
    position = (10.0, 10.0)

    def __init__(self) -> None:
        self._shown = 0
        self.text = score_text(0)

    def update(self, score: int) -> bool:
        """Show `score`; True when the text changed."""
        if score == self._shown:
            return False
        self._shown = score
        self.text = score_text(score)
        return True


class MainMenu:
    """A centred title with a Play button beneath it."""

    title = "Tower Tumbler"
    title_font_size = 60.0
    button_label = "Play"
    button_font_size = 30.0
    button_size = (200.0, 60.0)
    button_margin = 20.0
    background = (0.1, 0.1, 0.1, 0.8)
    button_color = (0.2, 0.6, 0.2)
    text_color = WHITE

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        button_w, button_h = self.button_size
        total = self.title_font_size + button_h + 2 * self.button_margin
        top = (height - total) / 2.0
        self.title_center = (width / 2.0, top + self.title_font_size / 2.0)
        self.button_rect = (
            (width - button_w) / 2.0,
            top + self.title_font_size + self.button_margin,
            button_w,
            button_h,
        )

    def handle_click(self, position: tuple[float, float]) -> bool:
        """True when `position` falls on the Play button."""
        x, y = position
        left, top, w, h = self.button_rect
        return left <= x < left + w and top <= y < top + h