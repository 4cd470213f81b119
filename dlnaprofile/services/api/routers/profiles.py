# dlnaprofile/services/api/routers/profiles.py
from __future__ import annotations

from http import HTTPStatus
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from dlnaprofile.common.settings import get_settings
from dlnaprofile.domain import catalog
from dlnaprofile.domain.policies.registry import ProfileRegistry
from dlnaprofile.services.api.deps import (
    get_probing_profile_service,
    get_profile_registry,
    get_profile_service,
)
from dlnaprofile.services.mappers.profiles import (
    to_descriptor,
    to_identify_response,
    to_profile_read,
    to_profile_reads,
)
from dlnaprofile.services.profiles.service import ProfileService
from dlnaprofile.services.schemas.profiles import (
    IdentifyResponse,
    ProbeRequest,
    ProfileRead,
    StreamDescriptorIn,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/profiles", tags=["profiles"])


@router.get("", response_model=List[ProfileRead])
def list_profiles(
    include_catalog: bool = Query(False, alias="catalog", description="Every known record, not only enabled families"),
    registry: ProfileRegistry = Depends(get_profile_registry),
) -> List[ProfileRead]:
    records = catalog.all_profiles() if include_catalog else registry.profiles()
    return to_profile_reads(records)


@router.get("/{profile_id}", response_model=ProfileRead)
def get_profile(profile_id: str = Path(..., examples=["MPEG_TS_HD_NA_T"])) -> ProfileRead:
    record = catalog.get_profile(profile_id)
    if record is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Profile not found")
    return to_profile_read(record)


@router.post("/identify", response_model=IdentifyResponse)
def identify_stream(
    payload: StreamDescriptorIn,
    svc: ProfileService = Depends(get_profile_service),
) -> IdentifyResponse:
    return to_identify_response(svc.identify(to_descriptor(payload)))


@router.post("/probe", response_model=IdentifyResponse)
def probe_and_identify(
    payload: ProbeRequest,
    svc: ProfileService = Depends(get_probing_profile_service),
) -> IdentifyResponse:
    # FFprobeError (from the adapter or its construction) is mapped to 422 in app.py
    return to_identify_response(svc.identify_file(payload.path))
