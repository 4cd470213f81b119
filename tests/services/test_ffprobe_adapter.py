import json
import subprocess
from fractions import Fraction
from types import SimpleNamespace

import pytest

from dlnaprofile.domain.enums import CodecKind, ContainerKind
from dlnaprofile.services.probe import ffprobe_adapter as fa
from dlnaprofile.services.probe.ffprobe_adapter import FFprobeAdapter, FFprobeError

TS_JSON = {
    "format": {"format_name": "mpegts", "bit_rate": "15000000"},
    "streams": [
        {"codec_type": "video", "codec_name": "mpeg2video", "width": 1920, "height": 1080,
         "r_frame_rate": "30000/1001", "bit_rate": "12000000"},
        {"codec_type": "audio", "codec_name": "ac3", "sample_rate": "48000", "channels": 2,
         "bit_rate": "384000"},
    ],
}


def _ts192_file(tmp_path, name="clip.ts"):
    f = tmp_path / name
    f.write_bytes((b"\x00\x00\x10\x00" + b"\x47" + b"\x00" * 187) * 4)
    return f


def _adapter():
    # explicit non-default binary skips the PATH lookup
    return FFprobeAdapter(ffprobe_bin="/usr/bin/ffprobe-test", timeout_sec=3)


def test_to_descriptor_sniffs_transport_stream(tmp_path):
    f = _ts192_file(tmp_path)
    d = FFprobeAdapter.to_descriptor(TS_JSON, f)
    assert d.container is ContainerKind.MPEG_TRANSPORT_STREAM_DLNA
    assert d.system_bit_rate == 15_000_000
    assert d.video.frame_rate == Fraction(30000, 1001)
    assert d.audio.codec is CodecKind.AC3
    assert d.file_extension == "ts"


def test_probe_runs_ffprobe_and_parses(tmp_path, monkeypatch):
    f = _ts192_file(tmp_path)
    seen = {}

    def fake_run(cmd, **kw):
        seen["cmd"], seen["kw"] = cmd, kw
        return SimpleNamespace(returncode=0, stdout=json.dumps(TS_JSON), stderr="")

    monkeypatch.setattr(fa.subprocess, "run", fake_run)
    d = _adapter().probe(f)
    assert seen["cmd"][0] == "/usr/bin/ffprobe-test"
    assert seen["cmd"][-1] == str(f)
    assert seen["kw"]["timeout"] == 3
    assert d.container is ContainerKind.MPEG_TRANSPORT_STREAM_DLNA


def test_probe_missing_file(tmp_path):
    with pytest.raises(FFprobeError) as ei:
        _adapter().probe(tmp_path / "nope.ts")
    assert "File not found" in str(ei.value)


def test_probe_nonzero_exit(tmp_path, monkeypatch):
    f = _ts192_file(tmp_path)
    def fail(cmd, **kw):
        assert kw["check"] is True
        raise subprocess.CalledProcessError(1, cmd, output="", stderr="Invalid data found")

    monkeypatch.setattr(fa.subprocess, "run", fail)
    with pytest.raises(FFprobeError) as ei:
        _adapter().probe(f)
    assert ei.value.rc == 1
    assert ei.value.stderr == "Invalid data found"


def test_probe_invalid_json(tmp_path, monkeypatch):
    f = _ts192_file(tmp_path)
    monkeypatch.setattr(
        fa.subprocess, "run",
        lambda cmd, **kw: SimpleNamespace(returncode=0, stdout="{not json", stderr=""),
    )
    with pytest.raises(FFprobeError):
        _adapter().probe(f)


def test_probe_timeout(tmp_path, monkeypatch):
    f = _ts192_file(tmp_path)

    def boom(cmd, **kw):
        raise subprocess.TimeoutExpired(cmd, kw.get("timeout"))

    monkeypatch.setattr(fa.subprocess, "run", boom)
    with pytest.raises(FFprobeError) as ei:
        _adapter().probe(f)
    assert "timed out" in ei.value.message


def test_missing_binary_is_reported(monkeypatch):
    monkeypatch.setattr(fa.shutil, "which", lambda name: None)
    with pytest.raises(FFprobeError):
        FFprobeAdapter()
