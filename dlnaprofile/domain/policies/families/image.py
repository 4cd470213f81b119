# dlnaprofile/domain/policies/families/image.py
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from dlnaprofile.common.strings.splitters import extension_set
from dlnaprofile.domain import catalog
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.enums.codec_kind import CodecKind
from dlnaprofile.domain.enums.container_kind import ContainerKind
from dlnaprofile.domain.enums.media_class import MediaClass
from dlnaprofile.domain.enums.media_profile import MediaProfile
from dlnaprofile.domain.policies import resolution_tables as rt

SizeTable = Sequence[Tuple[rt.ImageSizeSpec, ProfileRecord]]

# icons are exact sizes and win over the bounded picture rows
JPEG_SIZES: SizeTable = (
    (rt.ICON_SMALL, catalog.JPEG_SM_ICO),
    (rt.ICON_LARGE, catalog.JPEG_LRG_ICO),
    (rt.THUMBNAIL, catalog.JPEG_TN),
    (rt.PICTURE_SMALL, catalog.JPEG_SM),
    (rt.PICTURE_MEDIUM, catalog.JPEG_MED),
    (rt.PICTURE_LARGE, catalog.JPEG_LRG),
)

PNG_SIZES: SizeTable = (
    (rt.ICON_SMALL, catalog.PNG_SM_ICO),
    (rt.ICON_LARGE, catalog.PNG_LRG_ICO),
    (rt.THUMBNAIL, catalog.PNG_TN),
    (rt.PICTURE_LARGE, catalog.PNG_LRG),
)


def _by_size(descriptor: StreamDescriptor, codec: CodecKind, table: SizeTable) -> Optional[ProfileRecord]:
    # MJPEG or PNG in any other container (AVI, MOV) is video, not a still
    if descriptor.container is not ContainerKind.IMAGE or not descriptor.is_image_only:
        return None
    if descriptor.video.codec is not codec:
        return None
    width, height = descriptor.video.resolution
    for size, record in table:
        if size.matches(width, height):
            return record
    return None


class JpegImageClassifier:
    family = MediaProfile.IMAGE_JPEG
    media_class = MediaClass.IMAGE
    extensions = extension_set("jpg,jpe,jpeg")
    profiles = tuple(rec for _, rec in JPEG_SIZES)

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        return _by_size(descriptor, CodecKind.MJPEG, JPEG_SIZES)


class PngImageClassifier:
    family = MediaProfile.IMAGE_PNG
    media_class = MediaClass.IMAGE
    extensions = extension_set("png")
    profiles = tuple(rec for _, rec in PNG_SIZES)

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]:
        return _by_size(descriptor, CodecKind.PNG, PNG_SIZES)
