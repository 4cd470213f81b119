# dlnaprofile/common/probe/ffprobe_helpers.py
from __future__ import annotations
from fractions import Fraction
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import json
import shlex
import subprocess

from dlnaprofile.common.logging import get_logger
from dlnaprofile.domain.entities.stream import AudioStreamInfo, VideoStreamInfo
from dlnaprofile.domain.enums.codec_kind import CodecKind

logger = get_logger(__name__)

# ffprobe hexdump lines: "%08x: " then 41 columns of hex, then the ASCII column
_HEXDUMP_OFFSET = 10
_HEXDUMP_WIDTH = 41


def build_ffprobe_cmd(
    input_path: str | Path,
    extra_args: Iterable[str] | None = None,
    *,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "error",
) -> List[str]:
    """
    Build an ffprobe command that emits JSON we can parse consistently.
    `-show_data` adds each stream's extradata (codec configuration) as a hexdump.
    """
    if isinstance(input_path, Path):
        input_path = str(input_path)
    base = [
        ffprobe_bin,
        "-v", log_level,
        "-show_streams",
        "-show_format",
        "-show_data",
        "-print_format", "json",
        "--",  # Stop option parsing in case of weird filenames
        input_path,
    ]
    if extra_args:
        base = base[:-2] + list(extra_args) + base[-2:]
    return base


def run_ffprobe(cmd: List[str], timeout_sec: Optional[int] = None) -> Dict[str, Any]:
    """
    Execute ffprobe and return parsed JSON. Raises CalledProcessError on a
    non-zero exit and TimeoutExpired when `timeout_sec` elapses.
    """
    logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))
    cp = subprocess.run(cmd, capture_output=True, text=True, check=True, timeout=timeout_sec)
    try:
        data = json.loads(cp.stdout or "{}")
    except json.JSONDecodeError as e:
        logger.exception("Failed to parse ffprobe JSON")
        raise RuntimeError("ffprobe produced invalid JSON") from e
    return data


# ---- tiny parse helpers -------------------------------------------------------

def maybe_int(x) -> Optional[int]:
    try:
        if x is None:
            return None
        return int(float(x))
    except (TypeError, ValueError):
        return None


def parse_rate(rate: Optional[str]) -> Optional[Fraction]:
    """'30000/1001' -> Fraction(30000, 1001); '0/0', garbage or None -> None."""
    if not rate:
        return None
    try:
        if "/" in str(rate):
            n, d = str(rate).split("/", 1)
            if int(d) == 0:
                return None
            value = Fraction(int(n), int(d))
        else:
            value = Fraction(str(rate))
    except (TypeError, ValueError, ZeroDivisionError):
        return None
    return value if value > 0 else None


def parse_hexdump(dump: Optional[str]) -> bytes:
    """Decode ffprobe's `extradata` hexdump back into bytes (b"" when absent)."""
    if not dump:
        return b""
    out = bytearray()
    for line in str(dump).splitlines():
        hex_part = line[_HEXDUMP_OFFSET:_HEXDUMP_OFFSET + _HEXDUMP_WIDTH].replace(" ", "")
        try:
            out.extend(bytes.fromhex(hex_part))
        except ValueError:
            logger.debug("Skipping unparsable extradata line: %r", line)
    return bytes(out)


# ---- stream selection ---------------------------------------------------------

def _disposition(s: dict, key: str) -> bool:
    return (s.get("disposition", {}) or {}).get(key) == 1


def _res_key(s: dict) -> int:
    return (maybe_int(s.get("width")) or 0) * (maybe_int(s.get("height")) or 0)


def pick_video_stream(streams: List[dict]) -> Optional[dict]:
    """Default-disposition video first, else the highest resolution. Cover art is ignored."""
    vstreams = [
        s for s in streams
        if s.get("codec_type") == "video" and not _disposition(s, "attached_pic")
    ]
    vstream = next((s for s in vstreams if _disposition(s, "default")), None)
    if vstream is None and vstreams:
        vstream = max(vstreams, key=_res_key)
    return vstream


def pick_audio_stream(streams: List[dict]) -> Optional[dict]:
    return next((s for s in streams if s.get("codec_type") == "audio"), None)


def audio_info(s: Optional[dict]) -> Optional[AudioStreamInfo]:
    if not s:
        return None
    return AudioStreamInfo(
        codec=CodecKind.parse(s.get("codec_name")),
        sample_rate_hz=maybe_int(s.get("sample_rate")) or 0,
        channels=maybe_int(s.get("channels")) or 0,
        bit_rate_bps=maybe_int(s.get("bit_rate")) or 0,
        extra_data=parse_hexdump(s.get("extradata")),
    )


def video_info(s: Optional[dict]) -> Optional[VideoStreamInfo]:
    if not s:
        return None
    rate = parse_rate(s.get("r_frame_rate")) or parse_rate(s.get("avg_frame_rate")) or Fraction(0)
    return VideoStreamInfo(
        codec=CodecKind.parse(s.get("codec_name")),
        width=maybe_int(s.get("width")) or 0,
        height=maybe_int(s.get("height")) or 0,
        frame_rate=rate,
        bit_rate_bps=maybe_int(s.get("bit_rate")) or 0,
    )


def parse_ffprobe(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract what the profile engine needs (format name, system bit rate,
    first audio stream, main video stream) from ffprobe JSON. Safe to call
    in unit tests with fixture JSON.
    """
    fmt = (data or {}).get("format", {}) or {}
    streams = list((data or {}).get("streams", []) or [])

    return {
        "format_name": fmt.get("format_name"),
        "system_bit_rate": maybe_int(fmt.get("bit_rate")),
        "audio": audio_info(pick_audio_stream(streams)),
        "video": video_info(pick_video_stream(streams)),
    }
