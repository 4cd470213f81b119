# dlnaprofile/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends

from dlnaprofile.common.settings import get_settings
from dlnaprofile.domain.policies.registry import ProfileRegistry
from dlnaprofile.services.api.deps import get_profile_registry

router = APIRouter(tags=["health"])

@router.get("/healthz")
def healthz(registry: ProfileRegistry = Depends(get_profile_registry)):
    # ProfileConfigError here means PROFILES__ENABLED names an unknown family
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "families": list(registry.families),
        "extension_check": registry.extension_check,
    }
