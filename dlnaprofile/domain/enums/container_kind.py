# dlnaprofile/domain/enums/container_kind.py
from __future__ import annotations

from enum import StrEnum


class ContainerKind(StrEnum):
    UNKNOWN = "unknown"
    IMAGE = "image"
    ASF = "asf"
    AMR = "amr"
    AAC = "aac"                      # bare ADTS
    AC3 = "ac3"
    MP3 = "mp3"
    WAV = "wav"
    MOV = "mov"
    MP4 = "mp4"
    THREE_GP = "3gp"
    MPEG4_SYSTEM_STREAM = "mpeg4_system_stream"
    MPEG_ELEMENTARY_STREAM = "mpeg_es"
    MPEG_PROGRAM_STREAM = "mpeg_ps"
    MPEG_TRANSPORT_STREAM = "mpeg_ts"                  # 188-byte packets, no timestamp field
    MPEG_TRANSPORT_STREAM_DLNA = "mpeg_ts_dlna"        # 192-byte packets, valid timestamp
    MPEG_TRANSPORT_STREAM_DLNA_NO_TS = "mpeg_ts_dlna_no_ts"  # 192-byte packets, zero timestamp

    @property
    def is_transport_stream(self) -> bool:
        return self in _TRANSPORT_STREAMS


_TRANSPORT_STREAMS = frozenset({
    ContainerKind.MPEG_TRANSPORT_STREAM,
    ContainerKind.MPEG_TRANSPORT_STREAM_DLNA,
    ContainerKind.MPEG_TRANSPORT_STREAM_DLNA_NO_TS,
})
