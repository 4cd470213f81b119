from dlnaprofile.domain.enums.codec_kind import CodecKind
from dlnaprofile.domain.enums.container_kind import ContainerKind
from dlnaprofile.domain.enums.media_class import MediaClass
from dlnaprofile.domain.enums.media_profile import MediaProfile
__all__ = [
    "CodecKind",
    "ContainerKind",
    "MediaClass",
    "MediaProfile",
]
