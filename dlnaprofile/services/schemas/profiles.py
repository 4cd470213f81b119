# services/schemas/profiles.py
from __future__ import annotations

from fractions import Fraction
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dlnaprofile.domain.enums import ContainerKind, MediaClass


# ---------- Stream descriptor (input) ----------

class AudioStreamIn(BaseModel):
    codec: str = Field(..., examples=["aac", "ac3", "mp2"])
    sample_rate_hz: int = Field(0, ge=0, examples=[48000])
    channels: int = Field(0, ge=0, examples=[2])
    bit_rate_bps: int = Field(0, ge=0, examples=[384000])
    extra_data_hex: Optional[str] = Field(
        None, description="Codec configuration bytes as hex (AudioSpecificConfig for AAC)",
        examples=["1210"],
    )

    @field_validator("extra_data_hex")
    @classmethod
    def _hex(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        bytes.fromhex(v)  # ValueError -> 422
        return v


class VideoStreamIn(BaseModel):
    codec: str = Field(..., examples=["mpeg2video", "mjpeg"])
    width: int = Field(0, ge=0, examples=[720])
    height: int = Field(0, ge=0, examples=[576])
    frame_rate: str = Field("0", description="Exact rate as 'num/den' or integer", examples=["30000/1001", "25"])
    bit_rate_bps: int = Field(0, ge=0)

    @field_validator("frame_rate", mode="before")
    @classmethod
    def _rate(cls, v) -> str:
        try:
            rate = Fraction(str(v).strip())
        except ZeroDivisionError as e:
            raise ValueError("frame_rate denominator must not be zero") from e
        if rate < 0:
            raise ValueError("frame_rate must not be negative")
        return str(rate)


class StreamDescriptorIn(BaseModel):
    container: ContainerKind = ContainerKind.UNKNOWN
    system_bit_rate: Optional[int] = Field(None, ge=0)
    audio: Optional[AudioStreamIn] = None
    video: Optional[VideoStreamIn] = None
    file_extension: Optional[str] = Field(None, examples=["ts", ".mpg"])


class ProbeRequest(BaseModel):
    path: str = Field(..., min_length=1, description="Path of a local file to probe with ffprobe",
                      examples=["/srv/media/clip.ts"])


# ---------- Profiles (output) ----------

class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    mime: str
    label: str
    media_class: MediaClass


class IdentifyResponse(BaseModel):
    compliant: bool
    container: ContainerKind
    profile: Optional[ProfileRead] = None
    upnp_class: Optional[str] = None
    protocol_info: Optional[str] = None
