"""Tests for .retag.toml loading."""

from pathlib import Path

import pytest

from retag.core.config import RetagConfig, load_config
from retag.errors import InvalidConfig


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    assert load_config(tmp_path) == RetagConfig(remote="origin")


def test_reads_remote(tmp_path: Path) -> None:
    (tmp_path / ".retag.toml").write_text('remote = "upstream"\n', encoding="utf-8")

    assert load_config(tmp_path).remote == "upstream"


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".retag.toml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == RetagConfig.default()


def test_rejects_invalid_toml(tmp_path: Path) -> None:
    (tmp_path / ".retag.toml").write_text("remote = \n", encoding="utf-8")

    with pytest.raises(InvalidConfig, match="not valid TOML"):
        load_config(tmp_path)


@pytest.mark.parametrize("value", ['""', "3", '["origin"]'])
def test_rejects_bad_remote_values(tmp_path: Path, value: str) -> None:
    (tmp_path / ".retag.toml").write_text(f"remote = {value}\n", encoding="utf-8")

    with pytest.raises(InvalidConfig, match="'remote' must be a non-empty string"):
        load_config(tmp_path)


def test_rejects_non_utf8_file(tmp_path: Path) -> None:
    (tmp_path / ".retag.toml").write_bytes(b'remote = "\xff\xfe"\n')

    with pytest.raises(InvalidConfig, match="not valid TOML"):
        load_config(tmp_path)
