# dlnaprofile/domain/policies/resolution_tables.py
"""
Region / resolution lookup tables.

Rows are exact keys: a stream matches a row only when width, height and
(where the table carries one) the frame rate are equal. Frame rates are
Fractions, so 30000/1001 only matches 30000/1001.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from fractions import Fraction
from typing import Iterable, Optional, Tuple

from dlnaprofile.domain.entities.stream import VideoStreamInfo

FPS_NTSC = Fraction(30000, 1001)
FPS_NTSC_FILM = Fraction(24000, 1001)
FPS_30 = Fraction(30)
FPS_24 = Fraction(24)
FPS_PAL = Fraction(25)


class Region(StrEnum):
    NTSC = "ntsc"
    PAL = "pal"
    EU = "eu"
    NA = "na"  # North America; Korea streams are indistinguishable and land here too


class Definition(StrEnum):
    SD = "sd"
    HD = "hd"


@dataclass(frozen=True)
class RegionStreamSpec:
    width: int
    height: int
    frame_rate: Optional[Fraction] = None  # None: any rate the region allows

    def matches(self, video: VideoStreamInfo) -> bool:
        if self.width != video.width or self.height != video.height:
            return False
        return self.frame_rate is None or self.frame_rate == video.frame_rate


def _rows(*rows: Tuple) -> Tuple[RegionStreamSpec, ...]:
    return tuple(RegionStreamSpec(*r) for r in rows)


# ---- MPEG-2 program / elementary streams (region comes from the frame rate) ---
PS_ES_NTSC = _rows(
    (720, 480),
    (704, 480),
    (544, 480),
    (480, 480),
    (352, 480),
    (352, 240),
)

PS_ES_PAL = _rows(
    (720, 576),
    (704, 576),
    (544, 576),
    (480, 576),
    (352, 576),
    (352, 288),
)

# ---- MPEG-2 transport streams ------------------------------------------------
TS_EU_SD = _rows(
    (720, 576, FPS_PAL),
    (544, 576, FPS_PAL),
    (480, 576, FPS_PAL),
    (352, 576, FPS_PAL),
    (352, 288, FPS_PAL),
)

TS_NA_SD = _rows(
    (720, 480, FPS_NTSC),
    (704, 480, FPS_NTSC),
    (704, 480, FPS_30),
    (704, 480, FPS_NTSC_FILM),
    (704, 480, FPS_24),
    (640, 480, FPS_NTSC),
    (640, 480, FPS_30),
    (640, 480, FPS_NTSC_FILM),
    (640, 480, FPS_24),
    (544, 480, FPS_NTSC),
    (480, 480, FPS_NTSC),
    (352, 480, FPS_NTSC),
)

TS_NA_HD = _rows(
    (1920, 1080, FPS_NTSC),
    (1920, 1080, FPS_30),
    (1920, 1080, FPS_NTSC_FILM),
    (1920, 1080, FPS_24),
    (1280, 720, FPS_NTSC),
    (1280, 720, FPS_30),
    (1280, 720, FPS_NTSC_FILM),
    (1280, 720, FPS_24),
    (1440, 1080, FPS_NTSC),
    (1440, 1080, FPS_30),
    (1440, 1080, FPS_NTSC_FILM),
    (1440, 1080, FPS_24),
    (1280, 1080, FPS_NTSC),
    (1280, 1080, FPS_30),
    (1280, 1080, FPS_NTSC_FILM),
    (1280, 1080, FPS_24),
)


def find_row(table: Iterable[RegionStreamSpec], video: Optional[VideoStreamInfo]) -> Optional[RegionStreamSpec]:
    """Linear scan for the first exact row match."""
    if video is None:
        return None
    for row in table:
        if row.matches(video):
            return row
    return None


def ps_es_region(video: Optional[VideoStreamInfo]) -> Optional[Region]:
    """NTSC or PAL by frame rate, then confirmed against that region's table."""
    if video is None:
        return None
    if video.frame_rate == FPS_NTSC:
        return Region.NTSC if find_row(PS_ES_NTSC, video) else None
    if video.frame_rate == FPS_PAL:
        return Region.PAL if find_row(PS_ES_PAL, video) else None
    return None


def ts_region(video: Optional[VideoStreamInfo]) -> Optional[Region]:
    """Only Europe runs 25 fps; every other rate is treated as North America."""
    if video is None:
        return None
    return Region.EU if video.frame_rate == FPS_PAL else Region.NA


def ts_na_definition(video: Optional[VideoStreamInfo]) -> Optional[Definition]:
    """SD table first, then HD."""
    if find_row(TS_NA_SD, video):
        return Definition.SD
    if find_row(TS_NA_HD, video):
        return Definition.HD
    return None


# ---- still images -------------------------------------------------------------

@dataclass(frozen=True)
class ImageSizeSpec:
    """Either an exact size (icons) or an upper bound (pictures)."""
    width: int
    height: int
    exact: bool = False

    def matches(self, width: int, height: int) -> bool:
        if self.exact:
            return width == self.width and height == self.height
        return 0 < width <= self.width and 0 < height <= self.height


ICON_SMALL = ImageSizeSpec(48, 48, exact=True)
ICON_LARGE = ImageSizeSpec(120, 120, exact=True)
THUMBNAIL = ImageSizeSpec(160, 160)
PICTURE_SMALL = ImageSizeSpec(640, 480)
PICTURE_MEDIUM = ImageSizeSpec(1024, 768)
PICTURE_LARGE = ImageSizeSpec(4096, 4096)
