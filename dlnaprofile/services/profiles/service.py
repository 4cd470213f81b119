from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dlnaprofile.common.logging import get_logger
from dlnaprofile.common.settings import Settings, get_settings
from dlnaprofile.domain.entities.profile import ProfileRecord
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.policies.registry import ProfileRegistry
from dlnaprofile.domain.ports.probe import StreamProbePort
from dlnaprofile.services.dlna.protocol_info import protocol_info_from_settings, upnp_object_item

logger = get_logger(__name__)


@dataclass(frozen=True)
class Identification:
    """Outcome of one identification: the descriptor and, when compliant, how to advertise it."""
    descriptor: StreamDescriptor
    profile: Optional[ProfileRecord] = None
    upnp_class: Optional[str] = None
    protocol_info: Optional[str] = None

    @property
    def compliant(self) -> bool:
        return self.profile is not None


class ProfileService:
    """
    Glue between a prober, the profile registry and the protocolInfo writer.
    The registry and probe are injected so the API can swap them in tests.
    """

    def __init__(self, registry: ProfileRegistry, probe: Optional[StreamProbePort] = None,
                 settings: Optional[Settings] = None):
        self.registry = registry
        self.probe = probe
        self.cfg = settings or get_settings()

    def identify(self, descriptor: StreamDescriptor) -> Identification:
        profile = self.registry.identify(descriptor)
        if profile is None:
            logger.info("No DLNA profile for %s stream", descriptor.container)
            return Identification(descriptor=descriptor)
        return Identification(
            descriptor=descriptor,
            profile=profile,
            upnp_class=upnp_object_item(profile),
            protocol_info=protocol_info_from_settings(profile, self.cfg),
        )

    def identify_file(self, path: Path | str) -> Identification:
        """Probe `path` and identify it. Probe errors propagate unchanged."""
        if self.probe is None:
            raise RuntimeError("ProfileService was built without a stream probe")
        descriptor = self.probe.probe(Path(path))
        return self.identify(descriptor)
