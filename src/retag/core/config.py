import tomllib
from dataclasses import dataclass
from pathlib import Path

from retag.errors import InvalidConfig

CONFIG_FILENAME = ".retag.toml"
DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class RetagConfig:
    """In-memory representation of `.retag.toml`.

    Example .retag.toml:
      # Remote that tags are fetched from and force-pushed to
      remote = "upstream"
    """

    remote: str

    @staticmethod
    def default() -> "RetagConfig":
        return RetagConfig(remote=DEFAULT_REMOTE)


def load_config(repo_root: Path) -> RetagConfig:
    """Load .retag.toml from the repository root if present; otherwise return defaults.

    Raises:
        InvalidConfig: If the file is not valid TOML or a value has the wrong type
    """
    cfg_path = repo_root / CONFIG_FILENAME
    if not cfg_path.exists():
        return RetagConfig.default()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise InvalidConfig(f"{cfg_path} is not valid TOML: {e}") from e

    remote = data.get("remote", DEFAULT_REMOTE)
    if not isinstance(remote, str) or not remote.strip():
        raise InvalidConfig(f"{cfg_path}: 'remote' must be a non-empty string")
    return RetagConfig(remote=remote.strip())
