# dlnaprofile/domain/enums/codec_kind.py
from __future__ import annotations

from enum import StrEnum


class CodecKind(StrEnum):
    """Codec identifiers, spelled the way ffmpeg/ffprobe name them."""
    UNKNOWN = "unknown"
    # audio
    PCM_S16LE = "pcm_s16le"
    PCM_S16BE = "pcm_s16be"
    AC3 = "ac3"
    MP2 = "mp2"
    MP3 = "mp3"
    AAC = "aac"
    # video / image
    MPEG1VIDEO = "mpeg1video"
    MPEG2VIDEO = "mpeg2video"
    MJPEG = "mjpeg"
    PNG = "png"

    @classmethod
    def parse(cls, name: str | None) -> "CodecKind":
        if not name:
            return cls.UNKNOWN
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return cls.UNKNOWN
