"""Images that load in the background and become textures on demand."""

from __future__ import annotations

import itertools
import os
import threading
from dataclasses import dataclass, field

from PIL import Image

from .printer import LogLevel, log
from .utils import image_resize

MEMORY_SOURCE = "[loaded from memory]"

_texture_ids = itertools.count(1)


def _is_valid(image: Image.Image | None) -> bool:
    return image is not None and image.width > 0 and image.height > 0


@dataclass(eq=False)
class Texture:
    """Drawable pixel data created from an image, with a unique id."""

    image: Image.Image
    id: int = field(default_factory=lambda: next(_texture_ids))

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def update(self, image: Image.Image) -> None:
        """Replace the texture's pixels with those of ``image``."""
        self.image = image.copy()


class Sprite:
    """An image loaded from a file (on a worker thread) or from memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._keep_running = False
        self._image_loaded = False
        self._texture_loaded = False
        self._worker: threading.Thread | None = None
        self._image: Image.Image | None = None
        self._texture: Texture | None = None
        self._file_path = ""

    def __enter__(self) -> Sprite:
        return self

    def __exit__(self, *exc_info: object) -> None:
        log(LogLevel.TRACE, "Sprite - stopping thread")
        self.stop()
        self.join()
        self.unload()
        log(LogLevel.TRACE, "Sprite - thread stopped")

    @property
    def file_path(self) -> str:
        return self._file_path

    def load(
        self,
        source: Image.Image | str | os.PathLike[str],
        width: int = 0,
        height: int = 0,
        aspect_ratio: bool = True,
    ) -> None:
        """Load from an image (at once) or a file path (in the background).

        A file is only loaded when nothing is loaded or loading already.
        """
        if isinstance(source, Image.Image):
            self._load_from_memory(source, width, height, aspect_ratio)
        else:
            self._load_from_file(os.fspath(source), width, height, aspect_ratio)

    def _load_from_memory(
        self, image: Image.Image, width: int, height: int, aspect_ratio: bool
    ) -> None:
        if not _is_valid(image):
            return
        self.unload()
        self._image = image.copy()
        self._file_path = MEMORY_SOURCE
        self.resize_image(width, height, aspect_ratio)
        self._image_loaded = _is_valid(self._image)
        log(LogLevel.DEBUG, "Image copied successfully")

    def _load_from_file(self, path: str, width: int, height: int, aspect_ratio: bool) -> None:
        if self._keep_running or self._texture_loaded or self._image_loaded:
            return
        self.join()
        self._keep_running = True
        self._file_path = path
        log(LogLevel.TRACE, "Sprite - starting thread")
        self._worker = threading.Thread(
            target=self._load_image, args=(width, height, aspect_ratio), daemon=True
        )
        self._worker.start()

    def _load_image(self, width: int, height: int, aspect_ratio: bool) -> None:
        log(LogLevel.TRACE, "LoadImage - started")
        if self._keep_running:
            try:
                with Image.open(self._file_path) as opened:
                    opened.load()
                    image: Image.Image | None = opened.copy()
            except OSError:
                image = None

            if _is_valid(image):
                self._image = image
                self.resize_image(width, height, aspect_ratio)
                self._image_loaded = _is_valid(self._image)
                log(LogLevel.DEBUG, f"Image loaded successfully from - {self._file_path}")
            else:
                log(LogLevel.WARNING, f"Failed to load Image - {self._file_path}")
        log(LogLevel.TRACE, "LoadImage - finished")
        self.stop()

    def stop(self) -> None:
        """Ask a pending background load to give up."""
        self._keep_running = False

    def join(self) -> None:
        """Wait for the background load, if one was started."""
        worker = self._worker
        if worker is not None and worker is not threading.current_thread():
            worker.join()
            self._worker = None

    def get_texture(self) -> Texture | None:
        """The texture, created from the image (which is then released) on first use."""
        if not self._texture_loaded and self._image_loaded and self._image is not None:
            self._texture = Texture(self._image.copy())
            self._texture_loaded = True
            log(
                LogLevel.DEBUG,
                f"Texture loaded [ID {self._texture.id}] from Image - {self._file_path}",
            )
            self.unload_image()
        return self._texture if self._texture_loaded else None

    def get_image(self) -> Image.Image | None:
        """The loaded image, or None if there is none."""
        return self._image if self._image_loaded else None

    def resize_image(self, width: int, height: int, aspect_ratio: bool) -> None:
        """Resize the image to fit (or, without aspect ratio, to fill) the box."""
        with self._lock:
            if width <= 0 or height <= 0 or not _is_valid(self._image):
                return
            if aspect_ratio:
                self._image = image_resize(self._image, width, height)
            else:
                self._image = self._image.resize((width, height), Image.Resampling.BICUBIC)
            if self._texture_loaded and self._texture is not None:
                self._texture.update(self._image)

    def unload(self) -> None:
        """Release both the image and the texture."""
        self.unload_image()
        self.unload_texture()

    def unload_texture(self) -> None:
        if self._texture_loaded and self._texture is not None:
            log(
                LogLevel.DEBUG,
                f"Unloaded Texture [ID {self._texture.id}] from - {self._file_path}",
            )
            self._texture = None
            self._texture_loaded = False

    def unload_image(self) -> None:
        if self._image_loaded and _is_valid(self._image):
            log(LogLevel.DEBUG, f"Unloaded Image from - {self._file_path}")
            self._image = None
            self._image_loaded = False