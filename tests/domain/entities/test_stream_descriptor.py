from fractions import Fraction

import pytest

from dlnaprofile.domain.entities.stream import AudioStreamInfo, StreamDescriptor, VideoStreamInfo
from dlnaprofile.domain.enums import CodecKind, ContainerKind


def test_descriptor_defaults():
    d = StreamDescriptor()
    assert d.container is ContainerKind.UNKNOWN
    assert d.system_bit_rate is None
    assert d.audio is None and d.video is None
    assert d.file_extension is None
    assert not d.has_audio and not d.has_video


def test_descriptor_normalizes_extension():
    assert StreamDescriptor(file_extension=".TS").file_extension == "ts"


def test_audio_only_and_image_only():
    a = AudioStreamInfo(CodecKind.AAC, 44100, 2, 320_000)
    v = VideoStreamInfo(CodecKind.MJPEG, 640, 480)
    assert StreamDescriptor(audio=a).is_audio_only
    assert StreamDescriptor(video=v).is_image_only
    both = StreamDescriptor(audio=a, video=v)
    assert not both.is_audio_only and not both.is_image_only


def test_frame_rate_is_coerced_to_fraction():
    assert VideoStreamInfo(CodecKind.MPEG2VIDEO, frame_rate="30000/1001").frame_rate == Fraction(30000, 1001)
    assert VideoStreamInfo(CodecKind.MPEG2VIDEO, frame_rate=25).frame_rate == Fraction(25)
    # 29.97 is not NTSC; no rounding happens
    assert VideoStreamInfo(CodecKind.MPEG2VIDEO, frame_rate="29.97").frame_rate != Fraction(30000, 1001)


def test_descriptor_is_frozen():
    d = StreamDescriptor()
    with pytest.raises(AttributeError):
        d.container = ContainerKind.MP4  # type: ignore[misc]


def test_codec_kind_parse():
    assert CodecKind.parse("AC3") is CodecKind.AC3
    assert CodecKind.parse("h264") is CodecKind.UNKNOWN
    assert CodecKind.parse(None) is CodecKind.UNKNOWN


def test_container_transport_stream_helper():
    assert ContainerKind.MPEG_TRANSPORT_STREAM_DLNA.is_transport_stream
    assert not ContainerKind.MPEG_PROGRAM_STREAM.is_transport_stream
