# dlnaprofile/domain/entities/stream.py
from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from dlnaprofile.common.strings.splitters import normalize_extension
from dlnaprofile.domain.enums.codec_kind import CodecKind
from dlnaprofile.domain.enums.container_kind import ContainerKind


@dataclass(frozen=True)
class AudioStreamInfo:
    """Probed parameters of one audio elementary stream."""
    codec: CodecKind
    sample_rate_hz: int = 0
    channels: int = 0
    bit_rate_bps: int = 0
    # codec-specific configuration (e.g. AudioSpecificConfig for AAC)
    extra_data: bytes = b""


@dataclass(frozen=True)
class VideoStreamInfo:
    """
    Probed parameters of one video (or still image) stream.
    `frame_rate` is kept as an exact Fraction so table lookups can compare
    30000/1001 against 30000/1001 without any rounding.
    """
    codec: CodecKind
    width: int = 0
    height: int = 0
    frame_rate: Fraction = Fraction(0)
    bit_rate_bps: int = 0

    def __post_init__(self):
        if not isinstance(self.frame_rate, Fraction):
            object.__setattr__(self, "frame_rate", Fraction(self.frame_rate))

    @property
    def resolution(self) -> tuple[int, int]:
        return (self.width, self.height)


@dataclass(frozen=True)
class StreamDescriptor:
    """
    Everything the profile engine knows about one file/stream. Built once by
    a prober (see domain.ports.probe) and never mutated. Missing streams are
    None, never zero-filled placeholders.
    """
    container: ContainerKind = ContainerKind.UNKNOWN
    system_bit_rate: Optional[int] = None
    audio: Optional[AudioStreamInfo] = None
    video: Optional[VideoStreamInfo] = None
    file_extension: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "file_extension", normalize_extension(self.file_extension))

    @property
    def has_audio(self) -> bool:
        return self.audio is not None

    @property
    def has_video(self) -> bool:
        return self.video is not None

    @property
    def is_audio_only(self) -> bool:
        return self.audio is not None and self.video is None

    @property
    def is_image_only(self) -> bool:
        # stills arrive as a single video stream without audio
        return self.video is not None and self.audio is None
