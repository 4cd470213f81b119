# dlnaprofile/services/api/deps.py
from __future__ import annotations
from fastapi import Depends

from dlnaprofile.domain.policies.registry import ProfileRegistry, get_registry
from dlnaprofile.domain.ports.probe import StreamProbePort
from dlnaprofile.services.probe.ffprobe_adapter import FFprobeAdapter
from dlnaprofile.services.profiles.service import ProfileService


def get_profile_registry() -> ProfileRegistry:
    """The process-wide registry; tests override this dependency."""
    return get_registry()


def get_stream_probe() -> StreamProbePort:
    """
    Provide a StreamProbePort implementation (ffprobe) via DI.
    Raises FFprobeError when the binary cannot be found.
    """
    return FFprobeAdapter()


def get_profile_service(registry: ProfileRegistry = Depends(get_profile_registry)) -> ProfileService:
    return ProfileService(registry)


def get_probing_profile_service(
    registry: ProfileRegistry = Depends(get_profile_registry),
    probe: StreamProbePort = Depends(get_stream_probe),
) -> ProfileService:
    return ProfileService(registry, probe)
