"""General helpers: image sizing, index wrapping and directory handling."""

from __future__ import annotations

import os

from PIL import Image

from .textutils import normalize_path


def set_size_with_proportion(
    width: float, height: float, width_resize: int, height_resize: int
) -> tuple[float, float]:
    """Fit ``width`` x ``height`` into the given box, keeping the aspect ratio."""
    new_width = float(width_resize)
    new_height = float(height_resize)
    aspect_ratio = width / height

    if new_width / aspect_ratio > new_height:
        new_width = new_height * aspect_ratio
    else:
        new_height = new_width / aspect_ratio
    return new_width, new_height


def image_resize(image: Image.Image, new_width: int, new_height: int) -> Image.Image:
    """Return ``image`` scaled to fit the box, keeping its aspect ratio."""
    width, height = set_size_with_proportion(image.width, image.height, new_width, new_height)
    return image.resize((int(width), int(height)), Image.Resampling.BICUBIC)


def load_texture(path: str | os.PathLike[str], width: int = 0, height: int = 0) -> Image.Image:
    """Load an image file and resize it; a non-positive size keeps the original one."""
    with Image.open(path) as loaded:
        loaded.load()
        target_width = width if width > 0 else loaded.width
        target_height = height if height > 0 else loaded.height
        return loaded.resize((target_width, target_height), Image.Resampling.BICUBIC)


def set_index_array(index: int, max_array_length: int) -> int:
    """Wrap an index that runs past either end of an array back into it."""
    if index >= max_array_length:
        return abs(max_array_length - index)
    if index < 0:
        return max_array_length - abs(index)
    return index


def get_working_directory() -> str:
    """Current working directory, normalized and ending with a separator."""
    return normalize_path(os.getcwd() + "/")


def get_home_dir() -> str:
    """The user's home directory, normalized and ending with a separator.

    Raises KeyError if the home directory variable is not set.
    """
    variable = "USERPROFILE" if os.name == "nt" else "HOME"
    return normalize_path(os.environ[variable] + "/")


def change_directory(path: str | os.PathLike[str]) -> bool:
    """Change the working directory; return whether it succeeded."""
    try:
        os.chdir(path)
    except OSError:
        return False
    return True


def count_chars(text: str, char: str) -> int:
    """Count occurrences of a single character in ``text``."""
    if len(char) != 1:
        raise ValueError("char must be a single character")
    return text.count(char)