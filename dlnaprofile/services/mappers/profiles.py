# dlnaprofile/services/mappers/profiles.py
from __future__ import annotations

from fractions import Fraction
from typing import Iterable, List, Optional

from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import AudioStreamInfo, StreamDescriptor, VideoStreamInfo
from dlnaprofile.domain.enums.codec_kind import CodecKind
from dlnaprofile.services.profiles.service import Identification
from dlnaprofile.services.schemas.profiles import (
    AudioStreamIn,
    IdentifyResponse,
    ProfileRead,
    StreamDescriptorIn,
    VideoStreamIn,
)


def _audio(a: Optional[AudioStreamIn]) -> Optional[AudioStreamInfo]:
    if a is None:
        return None
    return AudioStreamInfo(
        codec=CodecKind.parse(a.codec),
        sample_rate_hz=a.sample_rate_hz,
        channels=a.channels,
        bit_rate_bps=a.bit_rate_bps,
        extra_data=bytes.fromhex(a.extra_data_hex) if a.extra_data_hex else b"",
    )


def _video(v: Optional[VideoStreamIn]) -> Optional[VideoStreamInfo]:
    if v is None:
        return None
    return VideoStreamInfo(
        codec=CodecKind.parse(v.codec),
        width=v.width,
        height=v.height,
        frame_rate=Fraction(v.frame_rate),
        bit_rate_bps=v.bit_rate_bps,
    )


def to_descriptor(payload: StreamDescriptorIn) -> StreamDescriptor:
    """API payload -> domain descriptor. Unrecognized codec names become CodecKind.UNKNOWN."""
    return StreamDescriptor(
        container=payload.container,
        system_bit_rate=payload.system_bit_rate,
        audio=_audio(payload.audio),
        video=_video(payload.video),
        file_extension=payload.file_extension,
    )


def to_profile_read(record: ProfileRecord) -> ProfileRead:
    return ProfileRead.model_validate(record)


def to_profile_reads(records: Iterable[ProfileRecord]) -> List[ProfileRead]:
    return [to_profile_read(r) for r in records]


def to_identify_response(result: Identification) -> IdentifyResponse:
    return IdentifyResponse(
        compliant=result.compliant,
        container=result.descriptor.container,
        profile=to_profile_read(result.profile) if result.profile else None,
        upnp_class=result.upnp_class,
        protocol_info=result.protocol_info,
    )
