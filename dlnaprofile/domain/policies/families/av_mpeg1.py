# dlnaprofile/domain/policies/families/av_mpeg1.py
from __future__ import annotations

from typing import Optional

from dlnaprofile.common.strings.splitters import extension_set
from dlnaprofile.domain import catalog
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.enums.codec_kind import CodecKind
from dlnaprofile.domain.enums.media_class import MediaClass
from dlnaprofile.domain.enums.media_profile import MediaProfile
from dlnaprofile.domain.policies import resolution_tables as rt
from dlnaprofile.domain.policies.codec_validators import is_vcd_mpeg_audio

VCD_VIDEO_BIT_RATE = 1_150_000

VCD_STREAMS = (
    rt.RegionStreamSpec(352, 288, rt.FPS_PAL),
    rt.RegionStreamSpec(352, 240, rt.FPS_NTSC),
    rt.RegionStreamSpec(352, 240, rt.FPS_NTSC_FILM),
)


class Mpeg1VideoClassifier:
    """MPEG-1 system streams in the Video-CD envelope."""
    family = MediaProfile.AV_MPEG1
    media_class = MediaClass.AV
    extensions = extension_set("mpg,mpeg,mpe,m1v,dat")
    profiles = (catalog.MPEG1,)

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        video = descriptor.video
        if video is None or video.codec is not CodecKind.MPEG1VIDEO:
            return None
        if video.bit_rate_bps != VCD_VIDEO_BIT_RATE:
            return None
        if rt.find_row(VCD_STREAMS, video) is None:
            return None
        if not is_vcd_mpeg_audio(descriptor.audio):
            return None
        return catalog.MPEG1
