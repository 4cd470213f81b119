# dlnaprofile/services/dlna/protocol_info.py
"""
UPnP `protocolInfo` strings and ContentDirectory item classes for an
identified profile.

    http-get:*:video/mpeg:DLNA.ORG_PN=MPEG_PS_PAL;DLNA.ORG_OP=01;DLNA.ORG_CI=0;DLNA.ORG_FLAGS=01700000000000000000000000000000

DLNA.ORG_FLAGS carries 8 significant hex digits followed by 24 zeros of padding.
"""
from __future__ import annotations

from enum import Enum, IntEnum, IntFlag, StrEnum
from typing import Optional

from dlnaprofile.common.settings import Settings, get_settings
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.enums.media_class import MediaClass

FLAGS_PADDING = "0" * 24


class ProtocolInfoType(Enum):
    UNKNOWN = None
    HTTP = "http-get"
    RTP = "rtsp-rtp-udp"
    ANY = "*"

    @classmethod
    def parse(cls, value: str | None) -> "ProtocolInfoType":
        for member in cls:
            if member.value == value:
                return member
        return cls.UNKNOWN


class PlaySpeed(IntEnum):
    """DLNA.ORG_PS"""
    INVALID = 0
    NORMAL = 1


class Conversion(IntEnum):
    """DLNA.ORG_CI"""
    NONE = 0
    TRANSCODED = 1


class Operation(IntFlag):
    """DLNA.ORG_OP, written as two hex digits: 01 range, 10 time seek, 11 both."""
    NONE = 0x00
    RANGE = 0x01
    TIMESEEK = 0x10


class OrgFlags(IntFlag):
    SENDER_PACED = 1 << 31
    TIME_BASED_SEEK = 1 << 30
    BYTE_BASED_SEEK = 1 << 29
    PLAY_CONTAINER = 1 << 28
    S0_INCREASE = 1 << 27
    SN_INCREASE = 1 << 26
    RTSP_PAUSE = 1 << 25
    STREAMING_TRANSFER_MODE = 1 << 24
    INTERACTIVE_TRANSFER_MODE = 1 << 23
    BACKGROUND_TRANSFER_MODE = 1 << 22
    CONNECTION_STALL = 1 << 21
    DLNA_V15 = 1 << 20


DEFAULT_FLAGS = (
    OrgFlags.STREAMING_TRANSFER_MODE
    | OrgFlags.BACKGROUND_TRANSFER_MODE
    | OrgFlags.CONNECTION_STALL
    | OrgFlags.DLNA_V15
)


class CapabilityMode(StrEnum):
    DLNA = "dlna"                  # full DLNA.ORG_* fourth field
    UPNP_AV = "upnp_av"            # plain UPnP A/V: fourth field is "*"
    UPNP_AV_XBOX = "upnp_av_xbox"  # UPnP A/V with Xbox 360 quirks


_UPNP_OBJECT_ITEMS = {
    MediaClass.IMAGE: "object.item.imageItem.photo",
    MediaClass.AUDIO: "object.item.audioItem.musicTrack",
    MediaClass.AV: "object.item.videoItem.movie",
}


def upnp_object_item(profile: Optional[ProfileRecord]) -> Optional[str]:
    """ContentDirectory class for a profile's media class; None for collections and no profile."""
    if profile is None:
        return None
    return _UPNP_OBJECT_ITEMS.get(profile.media_class)


def write_protocol_info(
    profile: ProfileRecord,
    *,
    type: ProtocolInfoType = ProtocolInfoType.HTTP,
    speed: PlaySpeed = PlaySpeed.INVALID,
    ci: Conversion = Conversion.NONE,
    op: Operation = Operation.RANGE,
    flags: int = DEFAULT_FLAGS,
    capability: CapabilityMode = CapabilityMode.DLNA,
) -> Optional[str]:
    """
    Four-field protocolInfo for `profile`. DLNA.ORG_PS is only written for a
    valid play speed. Returns None for an UNKNOWN transport, which cannot be
    advertised.
    """
    if type is ProtocolInfoType.UNKNOWN:
        return None

    head = f"{type.value}:*:{profile.mime}:"
    if capability is not CapabilityMode.DLNA:
        return head + "*"

    parts = [f"DLNA.ORG_PN={profile.id}", f"DLNA.ORG_OP={int(op):02x}"]
    if speed is not PlaySpeed.INVALID:
        parts.append(f"DLNA.ORG_PS={int(speed)}")
    parts.append(f"DLNA.ORG_CI={int(ci)}")
    parts.append(f"DLNA.ORG_FLAGS={int(flags):08x}{FLAGS_PADDING}")
    return head + ";".join(parts)


def generic_protocol_info(mime: str, *, type: ProtocolInfoType = ProtocolInfoType.HTTP) -> str:
    """protocolInfo for a resource that matches no DLNA profile."""
    transport = type.value if type is not ProtocolInfoType.UNKNOWN else ProtocolInfoType.HTTP.value
    return f"{transport}:*:{mime}:*"


def protocol_info_from_settings(profile: ProfileRecord, settings: Optional[Settings] = None) -> Optional[str]:
    """write_protocol_info with transport, DLNA.ORG_OP, flags and capability mode taken from settings."""
    cfg = (settings or get_settings()).dlna
    return write_protocol_info(
        profile,
        type=ProtocolInfoType.parse(cfg.protocol),
        op=Operation(cfg.operations_value),
        flags=cfg.org_flags_value,
        capability=CapabilityMode(cfg.capability_mode),
    )
