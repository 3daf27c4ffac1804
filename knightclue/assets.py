"""Names and locations of the game's resources, and volume handling."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

RESOURCE_ROOT = Path("RESSOURCES")

DEFAULT_MUSIC_VOLUME = 255
DEFAULT_FX_VOLUME = 128
MAX_VOLUME = 255

ANIMATION_FRAMES: dict[str, int] = {
    "quirrel": 8,
    "cloth": 5,
    "knight": 16,
    "zote": 16,
    "tiso": 12,
    "hornet": 8,
}

COLORS: dict[str, tuple[int, int, int]] = {
    "white": (255, 255, 255),
    "black": (0, 0, 0),
    "magic pink": (255, 0, 255),
}

MUSIC_TRACKS: tuple[str, ...] = (
    "Main Menu",
    "Forgotten Crossroads",
    "City of Tears",
    "Crystal Peaks",
    "Greenpath",
    "Kingdom's Edge",
    "Queen's Gardens",
    "Resting Grounds",
)

FONTS: dict[str, str] = {
    "T20": "T20.pcx",
    "T30": "T30.pcx",
    "T40": "T40.pcx",
    "F40": "F40.pcx",
    "I40": "icons40.pcx",
}


class AssetNotFoundError(KeyError):
    """Raised when a resource is asked for by a name that does not exist."""


def frame_count(name: str) -> int:
    """Number of frames in a character's animation."""
    try:
        return ANIMATION_FRAMES[name]
    except KeyError:
        raise AssetNotFoundError(f"wrong animation name: {name!r}") from None


def frame_index(name: str, counter: float) -> int:
    """Frame to show for an animation counter, wrapping around the animation."""
    return int(counter) % frame_count(name)


def frame_paths(name: str, root: str | PathLike[str] = RESOURCE_ROOT) -> list[Path]:
    """Paths of a character's animation frames, in playing order."""
    count = frame_count(name)
    folder = Path(root) / "ANIM" / name.upper()
    return [folder / f"{name}{number}.bmp" for number in range(1, count + 1)]


def color(name: str) -> tuple[int, int, int]:
    """RGB value of a named colour."""
    try:
        return COLORS[name]
    except KeyError:
        raise AssetNotFoundError(f"color {name!r} was not found") from None


def music_path(name: str, root: str | PathLike[str] = RESOURCE_ROOT) -> Path:
    """Path of a music track."""
    if name not in MUSIC_TRACKS:
        raise AssetNotFoundError(f"music {name!r} was not found")
    return Path(root) / "MSC" / f"{name}.wav"


def font_path(name: str, root: str | PathLike[str] = RESOURCE_ROOT) -> Path:
    """Path of a font file."""
    try:
        filename = FONTS[name]
    except KeyError:
        raise AssetNotFoundError(f"font {name!r} was not found") from None
    return Path(root) / "FNT" / filename


def clamp_volume(volume: int) -> int:
    """Keep a volume within 0..MAX_VOLUME."""
    if volume > MAX_VOLUME:
        return MAX_VOLUME
    if volume <= 0:
        return 0
    return volume