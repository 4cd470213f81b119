# dlnaprofile/services/probe/containers.py
"""
Map ffprobe's demuxer names to ContainerKind.

ffprobe reports every MPEG transport stream as "mpegts", whatever its packet
layout, so transport streams are told apart by sniffing the file head:

  188-byte packets  sync byte 0x47 at offsets 0 and 188   -> MPEG_TRANSPORT_STREAM
  192-byte packets  sync byte 0x47 at offsets 4 and 196   -> MPEG_TRANSPORT_STREAM_DLNA
                    first 4-byte timestamp all zero       -> MPEG_TRANSPORT_STREAM_DLNA_NO_TS
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from dlnaprofile.common.logging import get_logger
from dlnaprofile.common.strings.splitters import csv_to_list, normalize_extension
from dlnaprofile.domain.enums.container_kind import ContainerKind

logger = get_logger(__name__)

TS_SYNC_BYTE = 0x47
TS_PACKET_SIZE = 188
TS_DLNA_PACKET_SIZE = 192
TS_TIMESTAMP_SIZE = TS_DLNA_PACKET_SIZE - TS_PACKET_SIZE
SNIFF_BYTES = TS_DLNA_PACKET_SIZE + TS_TIMESTAMP_SIZE + 1

_FORMAT_CONTAINERS = {
    "mpeg": ContainerKind.MPEG_PROGRAM_STREAM,
    "vob": ContainerKind.MPEG_PROGRAM_STREAM,
    "mpegvideo": ContainerKind.MPEG_ELEMENTARY_STREAM,
    "mpeg1video": ContainerKind.MPEG_ELEMENTARY_STREAM,
    "mpeg2video": ContainerKind.MPEG_ELEMENTARY_STREAM,
    "aac": ContainerKind.AAC,
    "ac3": ContainerKind.AC3,
    "mp3": ContainerKind.MP3,
    "wav": ContainerKind.WAV,
    "asf": ContainerKind.ASF,
    "amr": ContainerKind.AMR,
    "image2": ContainerKind.IMAGE,
    "jpeg_pipe": ContainerKind.IMAGE,
    "png_pipe": ContainerKind.IMAGE,
}

# the ISO base media demuxer answers "mov,mp4,m4a,3gp,3g2,mj2" for all of these
_ISO_BY_EXTENSION = {
    "mp4": ContainerKind.MP4,
    "m4a": ContainerKind.MP4,
    "m4v": ContainerKind.MP4,
    "3gp": ContainerKind.THREE_GP,
    "3g2": ContainerKind.THREE_GP,
}


def sniff_transport_stream(head: bytes) -> Optional[ContainerKind]:
    """Packet layout of a transport stream from its first bytes, None if neither layout syncs."""
    if len(head) > TS_PACKET_SIZE and head[0] == TS_SYNC_BYTE and head[TS_PACKET_SIZE] == TS_SYNC_BYTE:
        return ContainerKind.MPEG_TRANSPORT_STREAM
    second_sync = TS_DLNA_PACKET_SIZE + TS_TIMESTAMP_SIZE
    if len(head) > second_sync and head[TS_TIMESTAMP_SIZE] == TS_SYNC_BYTE and head[second_sync] == TS_SYNC_BYTE:
        if not any(head[:TS_TIMESTAMP_SIZE]):
            return ContainerKind.MPEG_TRANSPORT_STREAM_DLNA_NO_TS
        return ContainerKind.MPEG_TRANSPORT_STREAM_DLNA
    return None


def sniff_transport_stream_file(path: Path) -> Optional[ContainerKind]:
    with open(path, "rb") as fh:
        head = fh.read(SNIFF_BYTES)
    kind = sniff_transport_stream(head)
    logger.debug("TS sniff %s -> %s", path, kind)
    return kind


def container_from_format_name(format_name: Optional[str], extension: Optional[str] = None) -> ContainerKind:
    """
    ContainerKind for an ffprobe `format_name` (which may be a CSV of aliases).
    Transport streams come back as plain MPEG_TRANSPORT_STREAM here; refine
    them with sniff_transport_stream().
    """
    names = [n.lower() for n in csv_to_list(format_name)]
    if not names:
        return ContainerKind.UNKNOWN
    if "mpegts" in names:
        return ContainerKind.MPEG_TRANSPORT_STREAM
    if "mov" in names or "mp4" in names:
        return _ISO_BY_EXTENSION.get(normalize_extension(extension) or "", ContainerKind.MOV)
    for name in names:
        kind = _FORMAT_CONTAINERS.get(name)
        if kind is not None:
            return kind
    if any(n.endswith("_pipe") for n in names):
        return ContainerKind.IMAGE
    return ContainerKind.UNKNOWN
