# dlnaprofile/domain/policies/families/av_mpeg2.py
"""
MPEG-2 video in elementary, program and transport streams.

Decision order for one descriptor:
  1. MPEG-2 video is required.
  2. ES / PS: region from the frame rate (NTSC 30000/1001, PAL 25), the
     resolution must be in that region's table, then audio picks the plain
     or _XAC3 record (extended AC-3 is asked first).
  3. TS with AAC audio: the MP@LL CIF profiles only, checked before any
     region logic.
  4. TS at 25 fps: Europe SD.
  5. Any other TS: North America (Korea cannot be told apart and is
     reported as NA), AC-3 only, SD table then HD table.
"""
from __future__ import annotations

from typing import Optional

from dlnaprofile.common.strings.splitters import extension_set
from dlnaprofile.domain import catalog
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.enums.codec_kind import CodecKind
from dlnaprofile.domain.enums.container_kind import ContainerKind
from dlnaprofile.domain.enums.media_class import MediaClass
from dlnaprofile.domain.enums.media_profile import MediaProfile
from dlnaprofile.domain.policies import codec_validators as cv
from dlnaprofile.domain.policies import resolution_tables as rt
from dlnaprofile.domain.policies.families.base import TimestampVariants

# maximum system bit rate for NA/KO transport streams: 19.3927 Mbit/s
NA_MAX_SYSTEM_BIT_RATE = 19_392_700
MP_LL_MAX_VIDEO_BIT_RATE = 4_000_000

MP_LL_AAC = TimestampVariants(
    catalog.MPEG_TS_MP_LL_AAC, catalog.MPEG_TS_MP_LL_AAC_T, catalog.MPEG_TS_MP_LL_AAC_ISO
)
SD_EU = TimestampVariants(catalog.MPEG_TS_SD_EU, catalog.MPEG_TS_SD_EU_T, catalog.MPEG_TS_SD_EU_ISO)
SD_NA = TimestampVariants(catalog.MPEG_TS_SD_NA, catalog.MPEG_TS_SD_NA_T, catalog.MPEG_TS_SD_NA_ISO)
SD_NA_XAC3 = TimestampVariants(
    catalog.MPEG_TS_SD_NA_XAC3, catalog.MPEG_TS_SD_NA_XAC3_T, catalog.MPEG_TS_SD_NA_XAC3_ISO
)
HD_NA = TimestampVariants(catalog.MPEG_TS_HD_NA, catalog.MPEG_TS_HD_NA_T, catalog.MPEG_TS_HD_NA_ISO)
HD_NA_XAC3 = TimestampVariants(
    catalog.MPEG_TS_HD_NA_XAC3, catalog.MPEG_TS_HD_NA_XAC3_T, catalog.MPEG_TS_HD_NA_XAC3_ISO
)

# (region) -> (plain, _XAC3)
PS_RECORDS = {
    rt.Region.NTSC: (catalog.MPEG_PS_NTSC, catalog.MPEG_PS_NTSC_XAC3),
    rt.Region.PAL: (catalog.MPEG_PS_PAL, catalog.MPEG_PS_PAL_XAC3),
}
ES_RECORDS = {
    rt.Region.NTSC: (catalog.MPEG_ES_NTSC, catalog.MPEG_ES_NTSC_XAC3),
    rt.Region.PAL: (catalog.MPEG_ES_PAL, catalog.MPEG_ES_PAL_XAC3),
}

# (definition, extended AC-3) -> variants
NA_RECORDS = {
    (rt.Definition.SD, False): SD_NA,
    (rt.Definition.SD, True): SD_NA_XAC3,
    (rt.Definition.HD, False): HD_NA,
    (rt.Definition.HD, True): HD_NA_XAC3,
}


def _ps_es(descriptor: StreamDescriptor, records) -> Optional[ProfileRecord]:
    region = rt.ps_es_region(descriptor.video)
    if region is None:
        return None

    plain, xac3 = records[region]
    audio = descriptor.audio
    if cv.is_ps_es_extended_ac3(audio):
        return xac3
    if cv.is_ps_es_lpcm(audio) or cv.is_ps_es_ac3(audio) or cv.is_ps_es_mpeg_audio(audio):
        return plain
    return None


def _ts_mp_ll_aac(descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
    video = descriptor.video
    if video.resolution != (352, 288):
        return None
    if video.frame_rate != rt.FPS_30:
        return None
    if video.bit_rate_bps > MP_LL_MAX_VIDEO_BIT_RATE:
        return None
    if not cv.is_ts_mp_ll_aac(descriptor.audio):
        return None
    return MP_LL_AAC.pick(descriptor.container)


def _ts_eu(descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
    if rt.find_row(rt.TS_EU_SD, descriptor.video) is None:
        return None
    if cv.is_ts_ac3(descriptor.audio) or cv.is_ts_mpeg_audio(descriptor.audio):
        return SD_EU.pick(descriptor.container)
    return None


def _ts_na(descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
    if descriptor.system_bit_rate is None or descriptor.system_bit_rate > NA_MAX_SYSTEM_BIT_RATE:
        return None
    if not cv.is_ts_na_ac3(descriptor.audio):
        return None

    definition = rt.ts_na_definition(descriptor.video)
    if definition is None:
        return None
    xac3 = cv.needs_extended_ac3(descriptor.audio)
    return NA_RECORDS[(definition, xac3)].pick(descriptor.container)


def _ts(descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
    audio = descriptor.audio
    if audio is None:
        return None
    if audio.codec is CodecKind.AAC:
        return _ts_mp_ll_aac(descriptor)
    if rt.ts_region(descriptor.video) is rt.Region.EU:
        return _ts_eu(descriptor)
    return _ts_na(descriptor)


class Mpeg2VideoClassifier:
    family = MediaProfile.AV_MPEG2
    media_class = MediaClass.AV
    extensions = extension_set("mpg,mpeg,mpe,m2v,mp2p,mp2t,ts,ps,pes")
    profiles = (
        *(rec for pair in PS_RECORDS.values() for rec in pair),
        *(rec for pair in ES_RECORDS.values() for rec in pair),
        *MP_LL_AAC.all(),
        *SD_EU.all(),
        *(rec for variants in NA_RECORDS.values() for rec in variants.all()),
    )

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        video = descriptor.video
        if video is None or video.codec is not CodecKind.MPEG2VIDEO:
            return None

        container = descriptor.container
        if container is ContainerKind.MPEG_ELEMENTARY_STREAM:
            return _ps_es(descriptor, ES_RECORDS)
        if container is ContainerKind.MPEG_PROGRAM_STREAM:
            return _ps_es(descriptor, PS_RECORDS)
        if container.is_transport_stream:
            return _ts(descriptor)
        return None
