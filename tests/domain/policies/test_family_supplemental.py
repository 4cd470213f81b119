from fractions import Fraction

import pytest

from dlnaprofile.domain import catalog
from dlnaprofile.domain.entities.stream import AudioStreamInfo, StreamDescriptor, VideoStreamInfo
from dlnaprofile.domain.enums import CodecKind, ContainerKind
from dlnaprofile.domain.policies.families import (
    Ac3AudioClassifier,
    JpegImageClassifier,
    LpcmAudioClassifier,
    Mp3AudioClassifier,
    Mpeg1VideoClassifier,
    PngImageClassifier,
)


def _image(codec, w, h):
    return StreamDescriptor(container=ContainerKind.IMAGE, video=VideoStreamInfo(codec, width=w, height=h))


def _audio(codec, rate, ch, bps):
    return StreamDescriptor(audio=AudioStreamInfo(codec, sample_rate_hz=rate, channels=ch, bit_rate_bps=bps))


@pytest.mark.parametrize("w,h,expected", [
    (48, 48, catalog.JPEG_SM_ICO),
    (120, 120, catalog.JPEG_LRG_ICO),
    (160, 90, catalog.JPEG_TN),
    (640, 480, catalog.JPEG_SM),
    (800, 600, catalog.JPEG_MED),
    (4096, 2160, catalog.JPEG_LRG),
    (4097, 100, None),
])
def test_jpeg_sizes(w, h, expected):
    assert JpegImageClassifier().classify(_image(CodecKind.MJPEG, w, h)) is expected


@pytest.mark.parametrize("w,h,expected", [
    (48, 48, catalog.PNG_SM_ICO),
    (120, 120, catalog.PNG_LRG_ICO),
    (100, 100, catalog.PNG_TN),
    (1920, 1080, catalog.PNG_LRG),
])
def test_png_sizes(w, h, expected):
    assert PngImageClassifier().classify(_image(CodecKind.PNG, w, h)) is expected


def test_image_families_check_codec_and_audio():
    assert JpegImageClassifier().classify(_image(CodecKind.PNG, 640, 480)) is None
    with_audio = StreamDescriptor(
        video=VideoStreamInfo(CodecKind.MJPEG, 640, 480),
        audio=AudioStreamInfo(CodecKind.MP3, 44100, 2, 128_000),
    )
    assert JpegImageClassifier().classify(with_audio) is None


def test_image_families_decline_video_containers():
    # a camera AVI: MJPEG frames, no audio, but not a still
    for container in (ContainerKind.UNKNOWN, ContainerKind.MOV):
        clip = StreamDescriptor(
            container=container,
            system_bit_rate=8_000_000,
            video=VideoStreamInfo(CodecKind.MJPEG, 640, 480, Fraction(30), 8_000_000),
            file_extension="avi",
        )
        assert JpegImageClassifier().classify(clip) is None
    png_in_mov = StreamDescriptor(container=ContainerKind.MOV, video=VideoStreamInfo(CodecKind.PNG, 100, 100))
    assert PngImageClassifier().classify(png_in_mov) is None


def test_vcd_mpeg1():
    def vcd(w, h, fps, vbps=1_150_000, abps=224_000):
        return StreamDescriptor(
            container=ContainerKind.MPEG_PROGRAM_STREAM,
            video=VideoStreamInfo(CodecKind.MPEG1VIDEO, w, h, fps, vbps),
            audio=AudioStreamInfo(CodecKind.MP2, 44100, 2, abps),
        )

    c = Mpeg1VideoClassifier()
    assert c.classify(vcd(352, 288, 25)) is catalog.MPEG1
    assert c.classify(vcd(352, 240, Fraction(30000, 1001))) is catalog.MPEG1
    assert c.classify(vcd(352, 240, Fraction(24000, 1001))) is catalog.MPEG1
    assert c.classify(vcd(352, 240, 25)) is None
    assert c.classify(vcd(352, 288, 25, vbps=1_000_000)) is None
    assert c.classify(vcd(352, 288, 25, abps=192_000)) is None


def test_standalone_audio_families():
    assert Ac3AudioClassifier().classify(_audio(CodecKind.AC3, 48000, 6, 448_000)) is catalog.AC3
    assert Ac3AudioClassifier().classify(_audio(CodecKind.AC3, 22050, 2, 448_000)) is None
    assert LpcmAudioClassifier().classify(_audio(CodecKind.PCM_S16LE, 44100, 2, 1_411_200)) is catalog.LPCM
    assert LpcmAudioClassifier().classify(_audio(CodecKind.PCM_S16LE, 44100, 6, 0)) is None
    assert Mp3AudioClassifier().classify(_audio(CodecKind.MP3, 44100, 2, 192_000)) is catalog.MP3
    assert Mp3AudioClassifier().classify(_audio(CodecKind.MP3, 24000, 1, 64_000)) is catalog.MP3X
    assert Mp3AudioClassifier().classify(_audio(CodecKind.MP2, 44100, 2, 192_000)) is None
