"""Paths of the launcher's data files and the built-in window icon."""

from __future__ import annotations

from PIL import Image

# files
CLICK_AUDIO = "ClassicLauncher/themes/default/click.wav"
CURSOR_AUDIO = "ClassicLauncher/themes/default/cursor.wav"
ROBOTO_FONT = "ClassicLauncher/fonts/roboto.ttf"
SYSTEM_LIST = "ClassicLauncher/systemlist.xml"

# folders
FONTS_FOLDER = "ClassicLauncher/fonts"
MUSICS_FOLDER = "ClassicLauncher/musics"
THEMES_FOLDER = "ClassicLauncher/themes"

# default theme
THEMES_DEFAULT_FOLDER = "ClassicLauncher/themes/default"
THEMES_SPRITE = "ClassicLauncher/themes/default/sprite.png"

# icon: 16 x 16 pixels, uncompressed 8-bit RGBA
ICON_WIDTH = 16
ICON_HEIGHT = 16
ICON_FORMAT = 7

_ICON_ROWS = (
    "00000000 00000000 00000000 00000000 00000000 ff7f2a16 ff7f2a5a ff7f2a66",
    "ff7f2a66 ff7f2a51 ff7f2a0e 00000000 00000000 00000000 00000000 00000000",
    "00000000 00000000 00000000 ff7f2a1f ff7f2aa3 ff7f2aff ff7f2aff ff7f2aff",
    "ff7f2aff ff7f2aff ff7f2af5 ff7f2a90 ff7f2a0b 00000000 00000000 00000000",
    "00000000 00000000 ff7f2a3d ff7f2af3 ff7f2aff ff7f2aff ff7f2aff ff7f2aff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2ae0 ff7f2a1f 00000000 00000000",
    "00000000 ff7f2a25 ff7f2af5 ff7f2aff ff7f2aff ffa31fff ffc00eff ffc00fff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2ae0 ff7f2a0c 00000000",
    "00000000 ff7f2ac1 ff7f2aff ff7f2aff ffb317ff ffcc00ff ffcc00ff ffc00fff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2a90 00000000",
    "ff7f2a33 ff7f2aff ff7f2aff ffa71eff ffcc00ff ffcc00ff ffcc00ff ffc00fff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2af5 ff7f2a0f",
    "ff7f2a7c ff7f2aff ff7f2aff ffc607ff ffcc00ff ffcc00ff fac800ff e8ac0fff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2a51",
    "ff7f2a99 ff7f2aff ff8c27ff ffcc00ff ffcc00ff ffcc00ff e0b400ff dea30fff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2a66",
    "ff7f2a99 ff7f2aff ff8f26ff ffcc00ff ffcc00ff ffcc00ff dfb300ff dea30fff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2a67",
    "ff7f2a84 ff7f2aff ff7f2aff ffc805ff ffcc00ff ffcc00ff f8c600ff e7ab0fff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2aff ff7f2a5b",
    "ff7f2a46 ff7f2aff ff7f2aff ffaf1aff ffcc00ff ffcc00ff ffcc00ff ffca02ff",
    "ffc309ff ffc309ff ffc309ff ffc309ff ffa21fff ff7f2aff ff7f2aff ff7f2a18",
    "00000000 ff7f2ad6 ff7f2aff ff8329ff ffbd11ff ffcc00ff ffcc00ff ffcc00ff",
    "ffcc00ff ffcc00ff ffcc00ff ffbd11ff ff8329ff ff7f2aff ff7f2aa3 00000000",
    "00000000 ff7f2a3b ff7f2aff ff7f2aff ff8329ff ffb01aff ffca03ff ffcc00ff",
    "ffcc00ff ffc903ff ffae1aff ff8329ff ff7f2aff ff7f2af4 ff7f2a1f 00000000",
    "00000000 00000000 ff7f2a66 ff7f2aff ff7f2aff ff7f2aff ff8129ff ff9325ff",
    "ff9325ff ff802aff ff7f2aff ff7f2aff ff7f2af5 ff7f2a3d 00000000 00000000",
    "00000000 00000000 00000000 ff7f2a3b ff7f2ad6 ff7f2aff ff7f2aff ff7f2aff",
    "ff7f2aff ff7f2aff ff7f2aff ff7f2ac2 ff7f2a27 00000000 00000000 00000000",
    "00000000 00000000 00000000 00000000 00000000 ff7f2a47 ff7f2a85 ff7f2a99",
    "ff7f2a99 ff7f2a7e ff7f2a33 00000000 00000000 00000000 00000000 00000000",
)

ICON_DATA: bytes = bytes.fromhex(" ".join(_ICON_ROWS))


def icon_image() -> Image.Image:
    """A fresh RGBA image of the window icon."""
    return Image.frombytes("RGBA", (ICON_WIDTH, ICON_HEIGHT), ICON_DATA)