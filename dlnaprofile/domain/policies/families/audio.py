# dlnaprofile/domain/policies/families/audio.py
"""Standalone audio families other than AAC (see audio_mpeg4)."""
from __future__ import annotations

from typing import Optional

from dlnaprofile.common.strings.splitters import extension_set
from dlnaprofile.domain import catalog
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.enums.media_class import MediaClass
from dlnaprofile.domain.enums.media_profile import MediaProfile
from dlnaprofile.domain.policies import codec_validators as cv


class Ac3AudioClassifier:
    family = MediaProfile.AUDIO_AC3
    media_class = MediaClass.AUDIO
    extensions = extension_set("ac3")
    profiles = (catalog.AC3,)

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        if descriptor.is_audio_only and cv.is_ac3_audio(descriptor.audio):
            return catalog.AC3
        return None


class LpcmAudioClassifier:
    family = MediaProfile.AUDIO_LPCM
    media_class = MediaClass.AUDIO
    extensions = extension_set("pcm,lpcm,wav,aiff")
    profiles = (catalog.LPCM,)

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        if descriptor.is_audio_only and cv.is_lpcm_audio(descriptor.audio):
            return catalog.LPCM
        return None


class Mp3AudioClassifier:
    family = MediaProfile.AUDIO_MP3
    media_class = MediaClass.AUDIO
    extensions = extension_set("mp3")
    profiles = (catalog.MP3, catalog.MP3X)

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        if not descriptor.is_audio_only:
            return None
        mp = cv.guess_mp3_profile(descriptor.audio)
        if mp is cv.Mp3Profile.MP3:
            return catalog.MP3
        if mp is cv.Mp3Profile.MP3X:
            return catalog.MP3X
        return None
