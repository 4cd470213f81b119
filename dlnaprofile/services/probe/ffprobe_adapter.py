# dlnaprofile/services/probe/ffprobe_adapter.py
from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dlnaprofile.common.logging import get_logger
from dlnaprofile.common.probe.ffprobe_helpers import build_ffprobe_cmd, parse_ffprobe, run_ffprobe
from dlnaprofile.common.settings import get_settings
from dlnaprofile.domain.entities.stream import StreamDescriptor
from dlnaprofile.domain.ports.probe import StreamProbePort
from dlnaprofile.services.probe.containers import container_from_format_name, sniff_transport_stream_file

logger = get_logger(__name__)


@dataclass(frozen=True)
class FFprobeError(RuntimeError):
    """Adapter-level error for probe failures."""
    message: str
    stderr: Optional[str] = None
    rc: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class FFprobeAdapter(StreamProbePort):
    """
    Infrastructure adapter implementing StreamProbePort using `ffprobe`.
    Stateless after construction; safe to call from worker threads.
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings().ffprobe
        candidate = ffprobe_bin or cfg.bin
        if not candidate or candidate == "ffprobe":
            # try to resolve absolute path for nicer errors
            resolved = shutil.which(candidate or "ffprobe")
            if not resolved:
                raise FFprobeError("ffprobe not found on PATH; set FFPROBE__BIN or install ffmpeg.")
            candidate = resolved

        self.ffprobe_bin = candidate
        self.timeout_sec = int(timeout_sec or cfg.timeout_sec or 15)
        self.log_level = cfg.log_level

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> StreamDescriptor:
        if not path:
            raise FFprobeError("No path provided to probe().")
        path = Path(path)
        if not path.is_file():
            raise FFprobeError(f"File not found: {path}")

        cmd = build_ffprobe_cmd(path, ffprobe_bin=self.ffprobe_bin, log_level=self.log_level)
        try:
            data = run_ffprobe(cmd, timeout_sec=self.timeout_sec)
        except subprocess.TimeoutExpired as e:
            raise FFprobeError(f"ffprobe timed out after {self.timeout_sec}s", stderr=str(e)) from e
        except subprocess.CalledProcessError as e:
            logger.warning("ffprobe failed on %s (rc=%s)", path, e.returncode)
            raise FFprobeError("ffprobe returned non-zero exit code", stderr=e.stderr, rc=e.returncode) from e
        except OSError as e:
            raise FFprobeError("Failed to execute ffprobe (OS error).", stderr=str(e)) from e
        except RuntimeError as e:
            raise FFprobeError(str(e)) from e

        return self.to_descriptor(data, path)

    # ---- Parsing helpers ------------------------------------------------------
    @staticmethod
    def to_descriptor(data: Dict[str, Any], path: Path) -> StreamDescriptor:
        """Build the descriptor from ffprobe JSON; transport streams are sniffed from `path`."""
        parsed = parse_ffprobe(data)
        extension = path.suffix
        container = container_from_format_name(parsed["format_name"], extension)
        if container.is_transport_stream:
            try:
                container = sniff_transport_stream_file(path) or container
            except OSError as e:
                raise FFprobeError(f"Cannot read transport stream header: {path}", stderr=str(e)) from e

        return StreamDescriptor(
            container=container,
            system_bit_rate=parsed["system_bit_rate"],
            audio=parsed["audio"],
            video=parsed["video"],
            file_extension=extension,
        )
