# dlnaprofile/domain/catalog.py
"""
The fixed table of DLNA media profiles this package knows about.

Every record is a module-level constant so classifiers can return it by
reference (`return catalog.MPEG_TS_HD_NA_T`). `PROFILE_GROUPS` lists
them explicitly and `CATALOG` indexes them by id; building the index fails
loudly on a duplicate id.
"""
from __future__ import annotations

from itertools import chain
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.enums.media_class import MediaClass

# ---- MIME types ---------------------------------------------------------------
MIME_IMAGE_JPEG = "image/jpeg"
MIME_IMAGE_PNG = "image/png"
MIME_AUDIO_ADTS = "audio/vnd.dlna.adts"
MIME_AUDIO_MPEG_4 = "audio/mp4"
MIME_AUDIO_MPEG = "audio/mpeg"
MIME_AUDIO_LPCM = "audio/L16"
MIME_AUDIO_DOLBY_DIGITAL = "audio/vnd.dolby.dd-raw"
MIME_VIDEO_MPEG = "video/mpeg"
MIME_VIDEO_MPEG_TS = "video/vnd.dlna.mpeg-tts"

# ---- labels -------------------------------------------------------------------
LABEL_IMAGE_PICTURE = "picture"
LABEL_IMAGE_ICON = "icon"
LABEL_AUDIO_2CH = "2-ch"
LABEL_AUDIO_2CH_MULTI = "2-ch multi"
LABEL_AUDIO_MULTI = "multi"
LABEL_VIDEO_CIF30 = "CIF30"
LABEL_VIDEO_SD = "SD"
LABEL_VIDEO_HD = "HD"


def _image(id: str, mime: str, label: str = LABEL_IMAGE_PICTURE) -> ProfileRecord:
    return ProfileRecord(id=id, mime=mime, label=label, media_class=MediaClass.IMAGE)


def _audio(id: str, mime: str, label: str) -> ProfileRecord:
    return ProfileRecord(id=id, mime=mime, label=label, media_class=MediaClass.AUDIO)


def _av(id: str, mime: str, label: str) -> ProfileRecord:
    return ProfileRecord(id=id, mime=mime, label=label, media_class=MediaClass.AV)


# ---- Image: JPEG --------------------------------------------------------------
JPEG_SM = _image("JPEG_SM", MIME_IMAGE_JPEG)
JPEG_MED = _image("JPEG_MED", MIME_IMAGE_JPEG)
JPEG_LRG = _image("JPEG_LRG", MIME_IMAGE_JPEG)
JPEG_TN = _image("JPEG_TN", MIME_IMAGE_JPEG)
JPEG_SM_ICO = _image("JPEG_SM_ICO", MIME_IMAGE_JPEG, LABEL_IMAGE_ICON)
JPEG_LRG_ICO = _image("JPEG_LRG_ICO", MIME_IMAGE_JPEG, LABEL_IMAGE_ICON)

# ---- Image: PNG ---------------------------------------------------------------
PNG_LRG = _image("PNG_LRG", MIME_IMAGE_PNG)
PNG_TN = _image("PNG_TN", MIME_IMAGE_PNG)
PNG_SM_ICO = _image("PNG_SM_ICO", MIME_IMAGE_PNG, LABEL_IMAGE_ICON)
PNG_LRG_ICO = _image("PNG_LRG_ICO", MIME_IMAGE_PNG, LABEL_IMAGE_ICON)

# ---- Audio: AC-3, LPCM, MP3 ---------------------------------------------------
AC3 = _audio("AC3", MIME_AUDIO_DOLBY_DIGITAL, LABEL_AUDIO_2CH_MULTI)
LPCM = _audio("LPCM", MIME_AUDIO_LPCM, LABEL_AUDIO_2CH)
MP3 = _audio("MP3", MIME_AUDIO_MPEG, LABEL_AUDIO_2CH)
MP3X = _audio("MP3X", MIME_AUDIO_MPEG, LABEL_AUDIO_2CH)

# ---- Audio: MPEG-4 AAC --------------------------------------------------------
AAC_ADTS = _audio("AAC_ADTS", MIME_AUDIO_ADTS, LABEL_AUDIO_2CH)
AAC_ADTS_320 = _audio("AAC_ADTS_320", MIME_AUDIO_ADTS, LABEL_AUDIO_2CH)
AAC_ISO = _audio("AAC_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_2CH)
AAC_ISO_320 = _audio("AAC_ISO_320", MIME_AUDIO_MPEG_4, LABEL_AUDIO_2CH)
# LTP profiles cover both ISO file formats and ADTS with one id
AAC_LTP_ISO = _audio("AAC_LTP_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_2CH)
AAC_LTP_MULT5_ISO = _audio("AAC_LTP_MULT5_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_MULTI)
AAC_LTP_MULT7_ISO = _audio("AAC_LTP_MULT7_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_MULTI)
AAC_MULT5_ADTS = _audio("AAC_MULT5_ADTS", MIME_AUDIO_ADTS, LABEL_AUDIO_MULTI)
AAC_MULT5_ISO = _audio("AAC_MULT5_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_MULTI)
HEAAC_L2_ADTS = _audio("HEAAC_L2_ADTS", MIME_AUDIO_ADTS, LABEL_AUDIO_2CH)
HEAAC_L2_ISO = _audio("HEAAC_L2_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_2CH)
HEAAC_L3_ADTS = _audio("HEAAC_L3_ADTS", MIME_AUDIO_ADTS, LABEL_AUDIO_2CH)
HEAAC_L3_ISO = _audio("HEAAC_L3_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_2CH)
HEAAC_MULT5_ADTS = _audio("HEAAC_MULT5_ADTS", MIME_AUDIO_ADTS, LABEL_AUDIO_MULTI)
HEAAC_MULT5_ISO = _audio("HEAAC_MULT5_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_MULTI)
HEAAC_L2_ADTS_320 = _audio("HEAAC_L2_ADTS_320", MIME_AUDIO_ADTS, LABEL_AUDIO_2CH)
HEAAC_L2_ISO_320 = _audio("HEAAC_L2_ISO_320", MIME_AUDIO_MPEG_4, LABEL_AUDIO_2CH)
BSAC_ISO = _audio("BSAC_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_2CH)
BSAC_MULT5_ISO = _audio("BSAC_MULT5_ISO", MIME_AUDIO_MPEG_4, LABEL_AUDIO_MULTI)

# ---- AV: MPEG-1 ---------------------------------------------------------------
MPEG1 = _av("MPEG1", MIME_VIDEO_MPEG, LABEL_VIDEO_CIF30)

# ---- AV: MPEG-2 program / elementary streams ----------------------------------
MPEG_PS_NTSC = _av("MPEG_PS_NTSC", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_PS_NTSC_XAC3 = _av("MPEG_PS_NTSC_XAC3", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_PS_PAL = _av("MPEG_PS_PAL", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_PS_PAL_XAC3 = _av("MPEG_PS_PAL_XAC3", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_ES_NTSC = _av("MPEG_ES_NTSC", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_ES_NTSC_XAC3 = _av("MPEG_ES_NTSC_XAC3", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_ES_PAL = _av("MPEG_ES_PAL", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_ES_PAL_XAC3 = _av("MPEG_ES_PAL_XAC3", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)

# ---- AV: MPEG-2 transport streams ---------------------------------------------
# Suffixes: none = zero timestamp, _T = valid timestamp, _ISO = no timestamp field
MPEG_TS_MP_LL_AAC = _av("MPEG_TS_MP_LL_AAC", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_CIF30)
MPEG_TS_MP_LL_AAC_T = _av("MPEG_TS_MP_LL_AAC_T", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_CIF30)
MPEG_TS_MP_LL_AAC_ISO = _av("MPEG_TS_MP_LL_AAC_ISO", MIME_VIDEO_MPEG, LABEL_VIDEO_CIF30)

MPEG_TS_SD_EU = _av("MPEG_TS_SD_EU", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_SD)
MPEG_TS_SD_EU_T = _av("MPEG_TS_SD_EU_T", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_SD)
MPEG_TS_SD_EU_ISO = _av("MPEG_TS_SD_EU_ISO", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)

MPEG_TS_SD_NA = _av("MPEG_TS_SD_NA", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_SD)
MPEG_TS_SD_NA_T = _av("MPEG_TS_SD_NA_T", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_SD)
MPEG_TS_SD_NA_ISO = _av("MPEG_TS_SD_NA_ISO", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)
MPEG_TS_SD_NA_XAC3 = _av("MPEG_TS_SD_NA_XAC3", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_SD)
MPEG_TS_SD_NA_XAC3_T = _av("MPEG_TS_SD_NA_XAC3_T", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_SD)
MPEG_TS_SD_NA_XAC3_ISO = _av("MPEG_TS_SD_NA_XAC3_ISO", MIME_VIDEO_MPEG, LABEL_VIDEO_SD)

MPEG_TS_HD_NA = _av("MPEG_TS_HD_NA", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_HD)
MPEG_TS_HD_NA_T = _av("MPEG_TS_HD_NA_T", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_HD)
MPEG_TS_HD_NA_ISO = _av("MPEG_TS_HD_NA_ISO", MIME_VIDEO_MPEG, LABEL_VIDEO_HD)
MPEG_TS_HD_NA_XAC3 = _av("MPEG_TS_HD_NA_XAC3", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_HD)
MPEG_TS_HD_NA_XAC3_T = _av("MPEG_TS_HD_NA_XAC3_T", MIME_VIDEO_MPEG_TS, LABEL_VIDEO_HD)
MPEG_TS_HD_NA_XAC3_ISO = _av("MPEG_TS_HD_NA_XAC3_ISO", MIME_VIDEO_MPEG, LABEL_VIDEO_HD)


JPEG_PROFILES = (JPEG_SM, JPEG_MED, JPEG_LRG, JPEG_TN, JPEG_SM_ICO, JPEG_LRG_ICO)
PNG_PROFILES = (PNG_LRG, PNG_TN, PNG_SM_ICO, PNG_LRG_ICO)
AUDIO_PROFILES = (AC3, LPCM, MP3, MP3X)
AAC_PROFILES = (
    AAC_ADTS, AAC_ADTS_320, AAC_ISO, AAC_ISO_320,
    AAC_LTP_ISO, AAC_LTP_MULT5_ISO, AAC_LTP_MULT7_ISO,
    AAC_MULT5_ADTS, AAC_MULT5_ISO,
    HEAAC_L2_ADTS, HEAAC_L2_ISO, HEAAC_L3_ADTS, HEAAC_L3_ISO,
    HEAAC_MULT5_ADTS, HEAAC_MULT5_ISO, HEAAC_L2_ADTS_320, HEAAC_L2_ISO_320,
    BSAC_ISO, BSAC_MULT5_ISO,
)
MPEG1_PROFILES = (MPEG1,)
MPEG2_PS_ES_PROFILES = (
    MPEG_PS_NTSC, MPEG_PS_NTSC_XAC3, MPEG_PS_PAL, MPEG_PS_PAL_XAC3,
    MPEG_ES_NTSC, MPEG_ES_NTSC_XAC3, MPEG_ES_PAL, MPEG_ES_PAL_XAC3,
)
MPEG2_TS_PROFILES = (
    MPEG_TS_MP_LL_AAC, MPEG_TS_MP_LL_AAC_T, MPEG_TS_MP_LL_AAC_ISO,
    MPEG_TS_SD_EU, MPEG_TS_SD_EU_T, MPEG_TS_SD_EU_ISO,
    MPEG_TS_SD_NA, MPEG_TS_SD_NA_T, MPEG_TS_SD_NA_ISO,
    MPEG_TS_SD_NA_XAC3, MPEG_TS_SD_NA_XAC3_T, MPEG_TS_SD_NA_XAC3_ISO,
    MPEG_TS_HD_NA, MPEG_TS_HD_NA_T, MPEG_TS_HD_NA_ISO,
    MPEG_TS_HD_NA_XAC3, MPEG_TS_HD_NA_XAC3_T, MPEG_TS_HD_NA_XAC3_ISO,
)

PROFILE_GROUPS = (
    JPEG_PROFILES,
    PNG_PROFILES,
    AUDIO_PROFILES,
    AAC_PROFILES,
    MPEG1_PROFILES,
    MPEG2_PS_ES_PROFILES,
    MPEG2_TS_PROFILES,
)


def _build_index(records: Iterable[ProfileRecord]) -> Mapping[str, ProfileRecord]:
    index = {}
    for rec in records:
        if rec.id in index:
            raise ValueError(f"Duplicate DLNA profile id in catalog: {rec.id}")
        index[rec.id] = rec
    return MappingProxyType(index)


CATALOG: Mapping[str, ProfileRecord] = _build_index(chain.from_iterable(PROFILE_GROUPS))


def get_profile(profile_id: str) -> Optional[ProfileRecord]:
    return CATALOG.get(profile_id)


def all_profiles() -> List[ProfileRecord]:
    return list(CATALOG.values())


def profiles_by_class(media_class: MediaClass) -> List[ProfileRecord]:
    return [p for p in CATALOG.values() if p.media_class is media_class]
