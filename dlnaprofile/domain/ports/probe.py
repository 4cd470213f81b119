from __future__ import annotations
from pathlib import Path
from typing import Protocol
from dlnaprofile.domain.entities.stream import StreamDescriptor

class StreamProbePort(Protocol):
    # raises an adapter-specific error when the file cannot be read or parsed
    def probe(self, path: Path) -> StreamDescriptor: ...
