from dlnaprofile.services.schemas.profiles import (
    AudioStreamIn,
    VideoStreamIn,
    StreamDescriptorIn,
    ProbeRequest,
    ProfileRead,
    IdentifyResponse,
)

__all__ = [
    "AudioStreamIn",
    "VideoStreamIn",
    "StreamDescriptorIn",
    "ProbeRequest",
    "ProfileRead",
    "IdentifyResponse",
]
