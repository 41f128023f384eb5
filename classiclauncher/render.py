"""Letterboxed off-screen render target: scaling and virtual mouse mapping."""

from __future__ import annotations

from .mathutils import clamp


class Render:
    """Maps a fixed-size game canvas onto a window of any size."""

    def __init__(self, maintain_aspect_ratio: bool = True) -> None:
        self.width = 0.0
        self.height = 0.0
        self.new_width = 0.0
        self.new_height = 0.0
        self.scale = 1.0
        self.maintain_aspect_ratio = maintain_aspect_ratio
        self.loaded = False
        self._virtual_mouse = (0.0, 0.0)

    @property
    def screen_width_game(self) -> int:
        return int(self.width)

    @property
    def screen_height_game(self) -> int:
        return int(self.height)

    def load_render(self, screen_width: int, screen_height: int) -> None:
        """Set the size of the game canvas."""
        self.width = float(screen_width)
        self.height = float(screen_height)
        self.loaded = True

    def _render_size(self, screen_width: float, screen_height: float) -> tuple[float, float]:
        if self.maintain_aspect_ratio:
            return float(int(self.width)), float(int(self.height))
        return float(screen_width), float(screen_height)

    def update(
        self, screen_width: int, screen_height: int, mouse: tuple[float, float]
    ) -> None:
        """Recompute scale and the virtual mouse position for the current window."""
        screen_w = float(screen_width)
        screen_h = float(screen_height)
        mouse_x, mouse_y = mouse
        self.new_width, self.new_height = self._render_size(screen_w, screen_h)

        if self.maintain_aspect_ratio:
            self.scale = min(screen_w / self.new_width, screen_h / self.new_height)
            x = (mouse_x - (screen_w - self.new_width * self.scale) * 0.5) / self.scale
            y = (mouse_y - (screen_h - self.new_height * self.scale) * 0.5) / self.scale
            self._virtual_mouse = (
                clamp(x, 0.0, self.new_width),
                clamp(y, 0.0, self.new_height),
            )
        else:
            self.scale = 1.0
            self._virtual_mouse = (
                (mouse_x / screen_w) * self.width,
                (mouse_y / screen_h) * self.height,
            )

    def destination(
        self, screen_width: int, screen_height: int
    ) -> tuple[float, float, float, float]:
        """Rectangle (x, y, width, height) where the canvas is drawn on screen."""
        scaled_w = self.new_width * self.scale
        scaled_h = self.new_height * self.scale
        return (
            (screen_width - scaled_w) * 0.5,
            (screen_height - scaled_h) * 0.5,
            scaled_w,
            scaled_h,
        )

    def render_scale(self, screen_width: int, screen_height: int) -> tuple[float, float]:
        """Ratio of window size to canvas size on each axis."""
        return screen_width / self.width, screen_height / self.height

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in canvas coordinates, as of the last update."""
        return self._virtual_mouse

    def unload(self) -> None:
        """Release the render target, if one is loaded."""
        if self.loaded:
            self.loaded = False