# dlnaprofile/domain/enums/media_profile.py
from __future__ import annotations

from enum import StrEnum


class MediaProfile(StrEnum):
    """Profile families a registry can be built with."""
    IMAGE_JPEG = "image_jpeg"
    IMAGE_PNG = "image_png"
    AUDIO_AC3 = "audio_ac3"
    AUDIO_LPCM = "audio_lpcm"
    AUDIO_MP3 = "audio_mp3"
    AUDIO_MPEG4 = "audio_mpeg4"
    AV_MPEG1 = "av_mpeg1"
    AV_MPEG2 = "av_mpeg2"
