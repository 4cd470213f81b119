from fractions import Fraction

import pytest

from dlnaprofile.domain import catalog
from dlnaprofile.domain.entities.stream import AudioStreamInfo, StreamDescriptor, VideoStreamInfo
from dlnaprofile.domain.enums import CodecKind, ContainerKind
from dlnaprofile.domain.policies.families import Mpeg2VideoClassifier

NTSC = Fraction(30000, 1001)
TS_DLNA = ContainerKind.MPEG_TRANSPORT_STREAM_DLNA


def _ac3(bps=384_000, rate=48000, ch=2):
    return AudioStreamInfo(CodecKind.AC3, sample_rate_hz=rate, channels=ch, bit_rate_bps=bps)


def _mpeg2(w, h, fps, bps=8_000_000):
    return VideoStreamInfo(CodecKind.MPEG2VIDEO, width=w, height=h, frame_rate=fps, bit_rate_bps=bps)


def _classify(container, video, audio, system_bit_rate=15_000_000):
    d = StreamDescriptor(container=container, system_bit_rate=system_bit_rate, audio=audio, video=video)
    return Mpeg2VideoClassifier().classify(d)


def test_hd_na_with_timestamp():
    rec = _classify(TS_DLNA, _mpeg2(1920, 1080, NTSC, 12_000_000), _ac3(384_000))
    assert rec is catalog.MPEG_TS_HD_NA_T


@pytest.mark.parametrize("container,expected", [
    (ContainerKind.MPEG_TRANSPORT_STREAM, catalog.MPEG_TS_SD_EU_ISO),
    (ContainerKind.MPEG_TRANSPORT_STREAM_DLNA, catalog.MPEG_TS_SD_EU_T),
    (ContainerKind.MPEG_TRANSPORT_STREAM_DLNA_NO_TS, catalog.MPEG_TS_SD_EU),
])
def test_eu_sd_timestamp_variants(container, expected):
    assert _classify(container, _mpeg2(720, 576, 25), _ac3(448_000, ch=5)) is expected


def test_eu_sd_accepts_mpeg_audio():
    mp2 = AudioStreamInfo(CodecKind.MP2, sample_rate_hz=48000, channels=2, bit_rate_bps=256_000)
    assert _classify(TS_DLNA, _mpeg2(352, 288, 25), mp2) is catalog.MPEG_TS_SD_EU_T


def test_na_extended_ac3_selects_xac3():
    assert _classify(TS_DLNA, _mpeg2(720, 480, NTSC), _ac3(500_000)) is catalog.MPEG_TS_SD_NA_XAC3_T
    assert _classify(TS_DLNA, _mpeg2(1280, 720, 24), _ac3(640_000)) is catalog.MPEG_TS_HD_NA_XAC3_T
    assert _classify(TS_DLNA, _mpeg2(720, 480, NTSC), _ac3(448_000)) is catalog.MPEG_TS_SD_NA_T


def test_na_system_bit_rate_ceiling():
    video, audio = _mpeg2(720, 480, NTSC), _ac3()
    assert _classify(TS_DLNA, video, audio, 19_392_700) is catalog.MPEG_TS_SD_NA_T
    assert _classify(TS_DLNA, video, audio, 19_392_701) is None
    assert _classify(TS_DLNA, video, audio, None) is None


def test_na_requires_ac3_at_48k():
    mp2 = AudioStreamInfo(CodecKind.MP2, sample_rate_hz=48000, channels=2, bit_rate_bps=256_000)
    assert _classify(TS_DLNA, _mpeg2(720, 480, NTSC), mp2) is None
    assert _classify(TS_DLNA, _mpeg2(720, 480, NTSC), _ac3(rate=44100)) is None
    assert _classify(TS_DLNA, _mpeg2(720, 480, NTSC), None) is None


def test_resolution_outside_tables_is_rejected():
    assert _classify(TS_DLNA, _mpeg2(640, 360, NTSC), _ac3()) is None
    assert _classify(ContainerKind.MPEG_PROGRAM_STREAM, _mpeg2(640, 360, NTSC), _ac3()) is None


def test_mp_ll_aac_checked_before_regions():
    aac = AudioStreamInfo(CodecKind.AAC, sample_rate_hz=48000, channels=2, bit_rate_bps=256_000)
    assert _classify(ContainerKind.MPEG_TRANSPORT_STREAM, _mpeg2(352, 288, 30, 4_000_000), aac) \
        is catalog.MPEG_TS_MP_LL_AAC_ISO
    assert _classify(ContainerKind.MPEG_TRANSPORT_STREAM_DLNA_NO_TS, _mpeg2(352, 288, 30, 4_000_000), aac) \
        is catalog.MPEG_TS_MP_LL_AAC
    # AAC never falls through to the EU / NA paths
    assert _classify(TS_DLNA, _mpeg2(720, 576, 25), aac) is None
    assert _classify(TS_DLNA, _mpeg2(352, 288, 30, 4_000_001), aac) is None


@pytest.mark.parametrize("container,fps,w,h,plain,xac3", [
    (ContainerKind.MPEG_PROGRAM_STREAM, NTSC, 720, 480, catalog.MPEG_PS_NTSC, catalog.MPEG_PS_NTSC_XAC3),
    (ContainerKind.MPEG_PROGRAM_STREAM, 25, 352, 288, catalog.MPEG_PS_PAL, catalog.MPEG_PS_PAL_XAC3),
    (ContainerKind.MPEG_ELEMENTARY_STREAM, NTSC, 352, 240, catalog.MPEG_ES_NTSC, catalog.MPEG_ES_NTSC_XAC3),
    (ContainerKind.MPEG_ELEMENTARY_STREAM, 25, 704, 576, catalog.MPEG_ES_PAL, catalog.MPEG_ES_PAL_XAC3),
])
def test_ps_es_audio_picks_plain_or_xac3(container, fps, w, h, plain, xac3):
    video = _mpeg2(w, h, fps)
    lpcm = AudioStreamInfo(CodecKind.PCM_S16BE, sample_rate_hz=48000, channels=2, bit_rate_bps=1_536_000)
    mp2 = AudioStreamInfo(CodecKind.MP2, sample_rate_hz=48000, channels=2, bit_rate_bps=384_000)
    assert _classify(container, video, lpcm) is plain
    assert _classify(container, video, mp2) is plain
    # extended AC-3 is asked first, so any AC-3 in 64k..640k lands on _XAC3
    assert _classify(container, video, _ac3(192_000)) is xac3
    assert _classify(container, video, _ac3(640_000)) is xac3
    assert _classify(container, video, _ac3(641_000)) is None


def test_non_mpeg2_video_and_other_containers_decline():
    mpeg1 = VideoStreamInfo(CodecKind.MPEG1VIDEO, width=720, height=480, frame_rate=NTSC)
    assert _classify(TS_DLNA, mpeg1, _ac3()) is None
    assert _classify(ContainerKind.MP4, _mpeg2(720, 480, NTSC), _ac3()) is None
    assert _classify(TS_DLNA, None, _ac3()) is None


def test_profiles_lists_every_returnable_record():
    profiles = Mpeg2VideoClassifier.profiles
    assert len(profiles) == len(set(profiles)) == 8 + 3 + 3 + 12
    assert catalog.MPEG_TS_HD_NA_XAC3_ISO in profiles
