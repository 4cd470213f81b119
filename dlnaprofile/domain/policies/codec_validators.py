# dlnaprofile/domain/policies/codec_validators.py
"""
Stateless checks of one codec stream against one DLNA parameter envelope.

Every predicate takes an Optional stream and answers False for None, so
callers can pass `descriptor.audio` straight through. Thresholds are the
exact values of the DLNA guidelines (bit/s, Hz).
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from dlnaprofile.common.logging import get_logger
from dlnaprofile.domain.entities.stream import AudioStreamInfo
from dlnaprofile.domain.enums.codec_kind import CodecKind

logger = get_logger(__name__)

LPCM_CODECS = frozenset({CodecKind.PCM_S16LE, CodecKind.PCM_S16BE})
MPEG_AUDIO_CODECS = frozenset({CodecKind.MP2, CodecKind.MP3})

TS_SAMPLE_RATES = frozenset({32000, 44100, 48000})
PS_ES_MPEG_AUDIO_SAMPLE_RATES = frozenset({44100, 48000})
AAC_SAMPLE_RATES = frozenset({8000, 11025, 12000, 16000, 22050, 24000, 32000, 44100, 48000})
MP3_SAMPLE_RATES = frozenset({32000, 44100, 48000})
MP3X_SAMPLE_RATES = frozenset({16000, 22050, 24000})

AC3_MAX_BIT_RATE = 448_000
EXTENDED_AC3_MAX_BIT_RATE = 640_000


def _in_range(value: int, lo: int, hi: int) -> bool:
    return lo <= value <= hi


# ---- MPEG-2 program / elementary stream context ------------------------------

def is_ps_es_lpcm(audio: Optional[AudioStreamInfo]) -> bool:
    """16-bit PCM, 48 kHz, mono or stereo, 768 / 1536 kbit/s ceilings."""
    if audio is None or audio.codec not in LPCM_CODECS:
        return False
    if audio.sample_rate_hz != 48000:
        return False
    # 1/0, 2/0, 1/0 + 1/0
    if audio.channels > 2:
        return False
    if audio.channels == 2 and audio.bit_rate_bps > 1_536_000:
        return False
    if audio.channels == 1 and audio.bit_rate_bps > 768_000:
        return False
    return True


def _common_ac3(audio: Optional[AudioStreamInfo]) -> bool:
    if audio is None or audio.codec is not CodecKind.AC3:
        return False
    if audio.sample_rate_hz != 48000:
        return False
    # 1/0, 1/0 + 1/0, 2/0, 3/0, 2/1, 3/1, 2/2, 3/2
    return audio.channels <= 5


def is_ps_es_extended_ac3(audio: Optional[AudioStreamInfo]) -> bool:
    """
    AC-3 up to 640 kbit/s. A superset of is_ps_es_ac3, so callers that
    care about the _XAC3 profiles must ask this one first.
    """
    return _common_ac3(audio) and _in_range(audio.bit_rate_bps, 64_000, EXTENDED_AC3_MAX_BIT_RATE)


def is_ps_es_ac3(audio: Optional[AudioStreamInfo]) -> bool:
    return _common_ac3(audio) and _in_range(audio.bit_rate_bps, 64_000, AC3_MAX_BIT_RATE)


def is_ps_es_mpeg_audio(audio: Optional[AudioStreamInfo]) -> bool:
    """MPEG-1 Layer 2/3: 44.1 or 48 kHz; 64-192 kbit/s mono, 64-384 kbit/s stereo."""
    if audio is None or audio.codec not in MPEG_AUDIO_CODECS:
        return False
    if audio.sample_rate_hz not in PS_ES_MPEG_AUDIO_SAMPLE_RATES:
        return False
    if audio.channels > 2:
        return False
    if audio.channels == 1 and not _in_range(audio.bit_rate_bps, 64_000, 192_000):
        return False
    if audio.channels == 2 and not _in_range(audio.bit_rate_bps, 64_000, 384_000):
        return False
    return True


# ---- MPEG-2 transport stream context -----------------------------------------

def is_ts_mpeg_audio(audio: Optional[AudioStreamInfo]) -> bool:
    if audio is None or audio.codec not in MPEG_AUDIO_CODECS:
        return False
    if audio.sample_rate_hz not in TS_SAMPLE_RATES:
        return False
    if audio.channels > 5:
        return False
    return _in_range(audio.bit_rate_bps, 32_000, 448_000)


def is_ts_ac3(audio: Optional[AudioStreamInfo]) -> bool:
    if audio is None or audio.codec is not CodecKind.AC3:
        return False
    if audio.sample_rate_hz not in TS_SAMPLE_RATES:
        return False
    if audio.channels > 5:
        return False
    return _in_range(audio.bit_rate_bps, 32_000, EXTENDED_AC3_MAX_BIT_RATE)


def is_ts_na_ac3(audio: Optional[AudioStreamInfo]) -> bool:
    """North America / Korea transport streams: AC-3 only, 48 kHz, <= 5 ch, <= 640 kbit/s."""
    if audio is None or audio.codec is not CodecKind.AC3:
        return False
    if audio.sample_rate_hz != 48000:
        return False
    if audio.channels > 5:
        return False
    return audio.bit_rate_bps <= EXTENDED_AC3_MAX_BIT_RATE


def needs_extended_ac3(audio: Optional[AudioStreamInfo]) -> bool:
    """True when the AC-3 bit rate is above the standard 448 kbit/s ceiling."""
    return audio is not None and audio.bit_rate_bps > AC3_MAX_BIT_RATE


def is_ts_mp_ll_aac(audio: Optional[AudioStreamInfo]) -> bool:
    """AAC audio for the MPEG-2 MP@LL transport profiles (<= 256 kbit/s)."""
    return audio is not None and audio.codec is CodecKind.AAC and audio.bit_rate_bps <= 256_000


# ---- standalone audio ---------------------------------------------------------

def is_ac3_audio(audio: Optional[AudioStreamInfo]) -> bool:
    """Raw Dolby Digital: 32/44.1/48 kHz, 1 to 5.1 channels, 32-640 kbit/s."""
    if audio is None or audio.codec is not CodecKind.AC3:
        return False
    if audio.sample_rate_hz not in TS_SAMPLE_RATES:
        return False
    if not _in_range(audio.channels, 1, 6):
        return False
    return _in_range(audio.bit_rate_bps, 32_000, EXTENDED_AC3_MAX_BIT_RATE)


def is_lpcm_audio(audio: Optional[AudioStreamInfo]) -> bool:
    if audio is None or audio.codec not in LPCM_CODECS:
        return False
    if not _in_range(audio.sample_rate_hz, 8000, 48000):
        return False
    return audio.channels in (1, 2)


class Mp3Profile(Enum):
    MP3 = "mp3"
    MP3X = "mp3x"


def guess_mp3_profile(audio: Optional[AudioStreamInfo]) -> Optional[Mp3Profile]:
    if audio is None or audio.codec is not CodecKind.MP3:
        return None
    if audio.channels not in (1, 2):
        return None
    if audio.sample_rate_hz in MP3_SAMPLE_RATES and _in_range(audio.bit_rate_bps, 32_000, 320_000):
        return Mp3Profile.MP3
    if audio.sample_rate_hz in MP3X_SAMPLE_RATES and _in_range(audio.bit_rate_bps, 8_000, 320_000):
        return Mp3Profile.MP3X
    return None


def is_vcd_mpeg_audio(audio: Optional[AudioStreamInfo]) -> bool:
    """Video-CD audio: MP2 stereo at 44.1 kHz and exactly 224 kbit/s."""
    if audio is None or audio.codec is not CodecKind.MP2:
        return False
    return audio.channels == 2 and audio.sample_rate_hz == 44100 and audio.bit_rate_bps == 224_000


# ---- AAC ----------------------------------------------------------------------

class AacAudioProfile(Enum):
    AAC = "aac"                      # mono / stereo
    AAC_MULT5 = "aac_mult5"          # 5.1
    AAC_LTP_MULT7 = "aac_ltp_mult7"  # 7.1


# ISO/IEC 14496-3 audio object types
AAC_OBJECT_TYPE_NAMES = {
    0: "invalid",
    1: "AAC Main",
    2: "AAC LC",
    3: "AAC SSR",
    4: "AAC LTP",
    5: "HE-AAC (SBR)",
    6: "scalable",
    7: "TwinVQ",
    8: "CELP",
    9: "HVXC",
    12: "TTSI",
    13: "main synthetic",
    14: "wavetable synthesis",
    15: "general MIDI",
    16: "algorithmic synthesis and audio FX",
    17: "ER AAC LC",
    19: "ER AAC LTP",
    20: "ER AAC scalable",
    21: "ER TwinVQ",
    22: "ER BSAC",
    23: "ER AAC LD",
    24: "ER CELP",
    25: "ER HVXC",
    26: "ER HILN",
    27: "ER parametric",
    28: "SSC",
    31: "HE-AAC L3 (reserved)",
}


def aac_object_type(extra_data: bytes) -> int:
    """Audio object type: the top 5 bits of the first AudioSpecificConfig byte, 0 if absent."""
    if not extra_data:
        return 0
    return extra_data[0] >> 3


def guess_aac_profile(audio: Optional[AudioStreamInfo]) -> Optional[AacAudioProfile]:
    if audio is None or audio.codec is not CodecKind.AAC:
        return None

    # TODO: discriminate HE-AAC, LTP and BSAC once the object type is wired in.
    object_type = aac_object_type(audio.extra_data)
    logger.debug("AAC object type: %d (%s)", object_type, AAC_OBJECT_TYPE_NAMES.get(object_type, "reserved"))

    if audio.sample_rate_hz not in AAC_SAMPLE_RATES:
        return None

    if audio.channels in (1, 2):
        if audio.bit_rate_bps <= 576_000:
            return AacAudioProfile.AAC
        return None
    if audio.channels == 5:
        if audio.bit_rate_bps <= 1_444_000:
            return AacAudioProfile.AAC_MULT5
        return None
    if audio.channels == 7:
        # 7.1 is accepted whatever the bit rate
        return AacAudioProfile.AAC_LTP_MULT7
    return None
