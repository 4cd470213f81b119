from __future__ import annotations
from enum import StrEnum

class MediaClass(StrEnum):
    IMAGE = "image"
    AUDIO = "audio"
    AV = "av"
    COLLECTION = "collection"
