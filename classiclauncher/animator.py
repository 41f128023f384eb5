"""Frame-by-frame sprite animation driven by elapsed time."""

from __future__ import annotations

from collections.abc import Iterable


class SpriteAnimator:
    """Cycles through sprite indices, moving one step every ``time_animation`` seconds."""

    def __init__(self, time_animation: float, sprite_indices: Iterable[int]) -> None:
        self.time_animation = time_animation
        self.sprite_indices: list[int] = list(sprite_indices)
        self.elapsed = 0.0
        self.alpha = 0.0
        self._position = 0

    def update(self, delta_time: float) -> None:
        """Advance the animation clock; step to the next sprite once a frame is complete."""
        if not self.sprite_indices:
            return

        self.alpha += (1.0 / self.time_animation) * delta_time
        self.elapsed += delta_time

        if self.alpha >= 1.0:
            self.alpha = 0.0
            self._position += 1
            if self._position >= len(self.sprite_indices):
                self._position = 0

    def current_sprite(self) -> int:
        """The sprite index shown now; IndexError if there are no sprites."""
        if not self.sprite_indices:
            raise IndexError("the animator has no sprite indices")
        return self.sprite_indices[self._position]