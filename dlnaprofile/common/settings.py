# dlnaprofile/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Dict, List

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dlnaprofile.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


_HEX_DIGITS = frozenset("0123456789abcdef")


def _hex_field(v: str, digits: int) -> str:
    """At most `digits` hex digits, no 0x prefix."""
    s = str(v).strip().lower()
    if not s or len(s) > digits or any(c not in _HEX_DIGITS for c in s):
        raise ValueError(f"expected 1 to {digits} hex digits, got {v!r}")
    return s


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class FFProbeConfig(BaseModel):
    timeout_sec: int = 30
    log_level: str = "error"  # quiet|panic|fatal|error|warning|info|verbose|debug|trace
    bin: str = "ffprobe"


class ProfilesConfig(BaseModel):
    """
    Which profile families the registry is built with, and how file
    extensions gate them. `enabled` is a CSV string ("all" or family names
    such as "av_mpeg2,audio_mpeg4") so it can come straight from the env.
    """
    enabled: str = "all"
    extension_check: bool = False
    # family name -> CSV allow-list, replaces that family's built-in list
    extensions: Dict[str, str] = Field(default_factory=dict)

    @field_validator("extension_check", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @computed_field  # type: ignore[misc]
    @property
    def enabled_list(self) -> List[str]:
        return [s.lower() for s in csv_to_list(self.enabled)]


CAPABILITY_MODES = ("dlna", "upnp_av", "upnp_av_xbox")


class DLNAConfig(BaseModel):
    capability_mode: str = "dlna"  # dlna|upnp_av|upnp_av_xbox
    protocol: str = "http-get"
    operations: str = "01"        # DLNA.ORG_OP, hex: 01 range, 10 time seek
    org_flags: str = "01700000"   # streaming | background | stall | DLNA 1.5

    @field_validator("capability_mode", mode="before")
    @classmethod
    def _capability(cls, v):
        mode = str(v).strip().lower()
        if mode not in CAPABILITY_MODES:
            raise ValueError(f"capability_mode must be one of {', '.join(CAPABILITY_MODES)}, got {v!r}")
        return mode

    @field_validator("operations")
    @classmethod
    def _operations(cls, v: str) -> str:
        return _hex_field(v, 2)

    @field_validator("org_flags")
    @classmethod
    def _org_flags(cls, v: str) -> str:
        return _hex_field(v, 8)

    @computed_field  # type: ignore[misc]
    @property
    def operations_value(self) -> int:
        return int(self.operations, 16)

    @computed_field  # type: ignore[misc]
    @property
    def org_flags_value(self) -> int:
        return int(self.org_flags, 16)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "dlnaprofile"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    ffprobe: FFProbeConfig = FFProbeConfig()
    profiles: ProfilesConfig = ProfilesConfig()
    dlna: DLNAConfig = DLNAConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from dlnaprofile.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
