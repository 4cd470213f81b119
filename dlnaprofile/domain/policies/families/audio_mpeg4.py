# dlnaprofile/domain/policies/families/audio_mpeg4.py
from __future__ import annotations

from typing import Optional

from dlnaprofile.common.strings.splitters import extension_set
from dlnaprofile.domain import catalog
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.enums.container_kind import ContainerKind
from dlnaprofile.domain.enums.media_class import MediaClass
from dlnaprofile.domain.enums.media_profile import MediaProfile
from dlnaprofile.domain.policies.codec_validators import AacAudioProfile, guess_aac_profile

# no container around the AAC frames: bare ADTS
RAW_CONTAINERS = frozenset({ContainerKind.UNKNOWN, ContainerKind.AAC})


class Mpeg4AudioClassifier:
    """
    MPEG-4 AAC audio. Raw ADTS streams get the *_ADTS ids, AAC muxed into
    anything else gets the *_ISO ids.
    """
    family = MediaProfile.AUDIO_MPEG4
    media_class = MediaClass.AUDIO
    extensions = extension_set("aac,adts,3gp,mp4,mov,qt,m4a")
    profiles = (
        catalog.AAC_ADTS_320,
        catalog.AAC_ISO_320,
        catalog.AAC_MULT5_ADTS,
        catalog.AAC_MULT5_ISO,
        catalog.AAC_LTP_MULT7_ISO,
    )

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        if not descriptor.is_audio_only:
            return None

        ap = guess_aac_profile(descriptor.audio)
        if ap is None:
            return None

        raw = descriptor.container in RAW_CONTAINERS
        if ap is AacAudioProfile.AAC_MULT5:
            return catalog.AAC_MULT5_ADTS if raw else catalog.AAC_MULT5_ISO
        if ap is AacAudioProfile.AAC_LTP_MULT7:
            return catalog.AAC_LTP_MULT7_ISO
        return catalog.AAC_ADTS_320 if raw else catalog.AAC_ISO_320
