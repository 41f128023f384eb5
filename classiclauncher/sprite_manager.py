"""A registry of named sprites."""

from __future__ import annotations

import os

from PIL import Image

from .sprite import Sprite, Texture

TRANSPARENT = "transparent"


class SpriteManager:
    """Owns sprites by name, creating them on first use."""

    def __init__(self) -> None:
        self._sprites: dict[str, Sprite] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)

    def _sprite(self, name: str) -> Sprite:
        sprite = self._sprites.get(name)
        if sprite is None:
            sprite = self._sprites[name] = Sprite()
        return sprite

    @staticmethod
    def _release(sprite: Sprite) -> None:
        sprite.stop()
        sprite.join()
        sprite.unload()

    def init(self) -> None:
        """Register a 1 x 1 transparent sprite under the name ``transparent``."""
        self.load_sprite(TRANSPARENT, Image.new("RGBA", (1, 1), (0, 0, 0, 0)))

    def load_sprite(
        self,
        name: str,
        source: Image.Image | str | os.PathLike[str],
        width: int = 0,
        height: int = 0,
        aspect_ratio: bool = True,
    ) -> None:
        """Load an image or image file into the sprite called ``name``."""
        self._sprite(name).load(source, width, height, aspect_ratio)

    def update_sprite(
        self,
        name: str,
        file_name: str | os.PathLike[str],
        width: int = 0,
        height: int = 0,
        aspect_ratio: bool = True,
    ) -> None:
        """Drop what the sprite holds and load ``file_name`` into it."""
        sprite = self._sprite(name)
        sprite.unload()
        sprite.load(file_name, width, height, aspect_ratio)

    def get_texture(self, name: str) -> Texture | None:
        """The sprite's texture; None for an unknown name or a sprite not loaded yet."""
        sprite = self._sprites.get(name)
        if sprite is None:
            return None
        return sprite.get_texture()

    def get_image(self, name: str) -> Image.Image | None:
        """The sprite's image; an unknown name gets an empty sprite."""
        return self._sprite(name).get_image()

    def delete_sprite(self, name: str) -> bool:
        """Release and forget a sprite; return whether it existed."""
        sprite = self._sprites.pop(name, None)
        if sprite is None:
            return False
        self._release(sprite)
        return True

    def unload_sprites(self) -> None:
        """Release and forget every sprite."""
        sprites = list(self._sprites.values())
        self._sprites.clear()
        for sprite in sprites:
            self._release(sprite)