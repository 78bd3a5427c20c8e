"""Tests for output divergence detection."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from fakes import FakeHasher
from onceonly.exceptions import ConfigError
from onceonly.hashing import BackendConfig
from onceonly.manifest import find_first_divergent_output, write_manifest
from onceonly.types import FingerprintRecord


def _md5(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


@pytest.fixture()
def outputs(tmp_path: Path) -> list[Path]:
    paths = [tmp_path / "result.csv", tmp_path / "summary.txt"]
    for path in paths:
        path.write_bytes(path.name.encode())
    return paths


def _write(tmp_path: Path, outputs: list[Path]) -> Path:
    manifest = tmp_path / "once-only-x.txt"
    inputs = [FingerprintRecord("default", _md5(b"in"), str(tmp_path / "in.txt"))]
    records = [FingerprintRecord("default", _md5(path.read_bytes()), str(path)) for path in outputs]
    write_manifest(manifest, inputs, records)
    return manifest


def test_unmodified_outputs_do_not_diverge(tmp_path: Path, outputs: list[Path]) -> None:
    manifest = _write(tmp_path, outputs)

    assert find_first_divergent_output(manifest, config=BackendConfig()) is None
    assert find_first_divergent_output(manifest, config=BackendConfig()) is None


def test_changed_output_is_reported(tmp_path: Path, outputs: list[Path]) -> None:
    manifest = _write(tmp_path, outputs)
    outputs[0].write_bytes(b"different content")

    assert find_first_divergent_output(manifest, config=BackendConfig()) == str(outputs[0])


def test_missing_output_short_circuits(tmp_path: Path, outputs: list[Path], fake_hasher: FakeHasher) -> None:
    manifest = _write(tmp_path, outputs)
    outputs[0].unlink()

    assert find_first_divergent_output(manifest, config=BackendConfig(default_hasher=fake_hasher)) == str(outputs[0])
    assert fake_hasher.calls == []


def test_first_divergence_wins(tmp_path: Path, outputs: list[Path]) -> None:
    manifest = _write(tmp_path, outputs)
    outputs[1].write_bytes(b"changed second")
    outputs[0].write_bytes(b"changed first")

    assert find_first_divergent_output(manifest, config=BackendConfig()) == str(outputs[0])


def test_large_records_use_large_hasher(tmp_path: Path) -> None:
    big = tmp_path / "big.bin"
    big.write_bytes(b"big")
    manifest = tmp_path / "m.txt"
    write_manifest(manifest, [], [FingerprintRecord("large", "pfff-1", str(big))])
    default = FakeHasher(name="default")
    large = FakeHasher(name="large", digests={str(big): "pfff-1"})

    config = BackendConfig(default_hasher=default, large_file_hasher=large)

    assert find_first_divergent_output(manifest, config=config) is None
    assert large.calls == [big]
    assert default.calls == []


def test_large_record_without_large_hasher(tmp_path: Path) -> None:
    big = tmp_path / "big.bin"
    big.write_bytes(b"big")
    manifest = tmp_path / "m.txt"
    write_manifest(manifest, [], [FingerprintRecord("large", "pfff-1", str(big))])

    with pytest.raises(ConfigError):
        find_first_divergent_output(manifest, config=BackendConfig())


def test_input_only_manifest_has_nothing_to_verify(tmp_path: Path) -> None:
    manifest = tmp_path / "m.txt"
    write_manifest(manifest, [FingerprintRecord("default", "aaaa", str(tmp_path / "gone.txt"))])

    assert find_first_divergent_output(manifest, config=BackendConfig()) is None
