from dlnaprofile.domain.enums.media_profile import MediaProfile
from dlnaprofile.domain.policies.families.audio import (
    Ac3AudioClassifier,
    LpcmAudioClassifier,
    Mp3AudioClassifier,
)
from dlnaprofile.domain.policies.families.audio_mpeg4 import Mpeg4AudioClassifier
from dlnaprofile.domain.policies.families.av_mpeg1 import Mpeg1VideoClassifier
from dlnaprofile.domain.policies.families.av_mpeg2 import Mpeg2VideoClassifier
from dlnaprofile.domain.policies.families.base import FamilyClassifier, TimestampVariants
from dlnaprofile.domain.policies.families.image import JpegImageClassifier, PngImageClassifier

# default precedence: narrow AV/image families before the audio-only ones
FAMILY_CLASSIFIERS = {
    MediaProfile.IMAGE_JPEG: JpegImageClassifier,
    MediaProfile.IMAGE_PNG: PngImageClassifier,
    MediaProfile.AV_MPEG1: Mpeg1VideoClassifier,
    MediaProfile.AV_MPEG2: Mpeg2VideoClassifier,
    MediaProfile.AUDIO_AC3: Ac3AudioClassifier,
    MediaProfile.AUDIO_LPCM: LpcmAudioClassifier,
    MediaProfile.AUDIO_MP3: Mp3AudioClassifier,
    MediaProfile.AUDIO_MPEG4: Mpeg4AudioClassifier,
}

__all__ = [
    "FAMILY_CLASSIFIERS",
    "FamilyClassifier",
    "TimestampVariants",
    "Ac3AudioClassifier",
    "LpcmAudioClassifier",
    "Mp3AudioClassifier",
    "Mpeg4AudioClassifier",
    "Mpeg1VideoClassifier",
    "Mpeg2VideoClassifier",
    "JpegImageClassifier",
    "PngImageClassifier",
]
