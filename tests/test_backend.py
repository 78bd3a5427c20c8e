"""Tests for per-file fingerprinting."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from fakes import FakeHasher, set_mtime_ns
from onceonly.exceptions import ConfigError, FileUnavailableError
from onceonly.hashing import BackendConfig, compute_fingerprint, fingerprint_files, load_precalculated_index
from onceonly.types import FingerprintRecord, PrecalculatedEntry

BASE_NS = 1_700_000_000_000_000_000


def test_default_records_in_order(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "a.txt").write_bytes(b"alpha")
    (tmp_path / "b.txt").write_bytes(b"beta")
    monkeypatch.chdir(tmp_path)

    records = fingerprint_files(["a.txt", "b.txt"], config=BackendConfig())

    assert records == [
        FingerprintRecord("default", hashlib.md5(b"alpha").hexdigest(), str(tmp_path.resolve() / "a.txt")),
        FingerprintRecord("default", hashlib.md5(b"beta").hexdigest(), str(tmp_path.resolve() / "b.txt")),
    ]


def test_fresh_precalculated_entry_skips_hashing(tmp_path: Path, fake_hasher: FakeHasher) -> None:
    target = tmp_path / "out.bin"
    target.write_bytes(b"payload")
    listing = tmp_path / "hashes.md5"
    listing.write_text("deadbeef  out.bin\n", encoding="utf-8")
    set_mtime_ns(target, BASE_NS)
    set_mtime_ns(listing, BASE_NS + 1_000_000_000)
    config = BackendConfig(default_hasher=fake_hasher, large_file_hasher=fake_hasher)

    record = compute_fingerprint(str(target), index=load_precalculated_index([listing]), config=config)

    assert record == FingerprintRecord("precalculated", "deadbeef", str(target))
    assert fake_hasher.calls == []


@pytest.mark.parametrize(
    "target_offset_ns",
    [
        pytest.param(0, id="same-mtime"),
        pytest.param(1_000_000_000, id="touched-after-listing"),
    ],
)
def test_stale_precalculated_entry_is_recomputed(
    tmp_path: Path, fake_hasher: FakeHasher, target_offset_ns: int
) -> None:
    target = tmp_path / "out.bin"
    target.write_bytes(b"payload")
    set_mtime_ns(target, BASE_NS + target_offset_ns)
    index = {str(target): PrecalculatedEntry(str(target), "deadbeef", BASE_NS)}

    record = compute_fingerprint(str(target), index=index, config=BackendConfig(default_hasher=fake_hasher))

    assert record == FingerprintRecord("default", "fake-out.bin", str(target))
    assert fake_hasher.calls == [target]


def test_large_file_uses_large_hasher(tmp_path: Path) -> None:
    target = tmp_path / "big.bin"
    target.write_bytes(b"0123456789")
    default = FakeHasher(name="default")
    large = FakeHasher(name="large", digests={str(target): "pfff-digest"})
    config = BackendConfig(default_hasher=default, large_file_hasher=large, large_file_threshold_bytes=9)

    record = compute_fingerprint(str(target), config=config)

    assert record == FingerprintRecord("large", "pfff-digest", str(target))
    assert default.calls == []


def test_file_at_threshold_uses_default_hasher(tmp_path: Path) -> None:
    target = tmp_path / "edge.bin"
    target.write_bytes(b"0123456789")
    default = FakeHasher(name="default")
    large = FakeHasher(name="large")
    config = BackendConfig(default_hasher=default, large_file_hasher=large, large_file_threshold_bytes=10)

    record = compute_fingerprint(str(target), config=config)

    assert record.kind == "default"
    assert large.calls == []


def test_large_file_without_large_hasher_uses_default(tmp_path: Path, fake_hasher: FakeHasher) -> None:
    target = tmp_path / "big.bin"
    target.write_bytes(b"0123456789")

    record = compute_fingerprint(
        str(target), config=BackendConfig(default_hasher=fake_hasher, large_file_threshold_bytes=1)
    )

    assert record.kind == "default"


def test_missing_input_aborts_fingerprinting(tmp_path: Path, fake_hasher: FakeHasher) -> None:
    (tmp_path / "a.txt").write_bytes(b"alpha")
    missing = str(tmp_path / "missing.txt")

    with pytest.raises(FileUnavailableError, match="missing.txt") as excinfo:
        fingerprint_files([str(tmp_path / "a.txt"), missing], config=BackendConfig(default_hasher=fake_hasher))

    assert excinfo.value.path == missing


def test_hasher_for_large_kind_requires_large_hasher() -> None:
    with pytest.raises(ConfigError, match="large_file_hasher"):
        BackendConfig().hasher_for("large")
