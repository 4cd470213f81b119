# dlnaprofile/domain/policies/families/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Protocol, Tuple

from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.enums.container_kind import ContainerKind
from dlnaprofile.domain.enums.media_class import MediaClass
from dlnaprofile.domain.enums.media_profile import MediaProfile


class FamilyClassifier(Protocol):
    """
    One DLNA profile family (e.g. MPEG-2 AV). Implementations are stateless;
    `classify` is a pure function of the descriptor and returns a catalog
    record by reference, or None when the family does not apply.
    """
    family: MediaProfile
    media_class: MediaClass
    extensions: FrozenSet[str]
    # every record classify() can return
    profiles: Tuple[ProfileRecord, ...]

    def classify(self, descriptor: StreamDescriptor) -> Optional[ProfileRecord]: ...


@dataclass(frozen=True)
class TimestampVariants:
    """The three transport-stream flavours of one profile."""
    zero: ProfileRecord   # 192-byte packets, zero timestamp
    valid: ProfileRecord  # 192-byte packets, valid timestamp (_T)
    none: ProfileRecord   # 188-byte packets, no timestamp field (_ISO)

    def pick(self, container: ContainerKind) -> Optional[ProfileRecord]:
        if container is ContainerKind.MPEG_TRANSPORT_STREAM:
            return self.none
        if container is ContainerKind.MPEG_TRANSPORT_STREAM_DLNA:
            return self.valid
        if container is ContainerKind.MPEG_TRANSPORT_STREAM_DLNA_NO_TS:
            return self.zero
        return None

    def all(self) -> Tuple[ProfileRecord, ...]:
        return (self.zero, self.valid, self.none)
