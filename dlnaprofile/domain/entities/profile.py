# dlnaprofile/domain/entities/profile.py
from __future__ import annotations

from dataclasses import dataclass

from dlnaprofile.domain.enums.media_class import MediaClass


@dataclass(frozen=True)
class ProfileRecord:
    """
    One DLNA media profile, e.g. MPEG_TS_HD_NA. `id` is what goes into
    DLNA.ORG_PN=<id>. Records live in domain.catalog and are handed out by
    reference; they are never copied or changed.
    """
    id: str
    mime: str
    label: str
    media_class: MediaClass

    def __str__(self) -> str:
        return self.id
