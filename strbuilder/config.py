from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .types import DEFAULT_CHARACTER_MASK, PadSide

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = "strbuilder.yaml"

# -------------------- Logging setup --------------------

_LOG = logging.getLogger("strbuilder")

def _setup_logging_once() -> None:
    if getattr(_setup_logging_once, "_inited", False):
        return
    _setup_logging_once._inited = True  # type: ignore[attr-defined]
    level = logging.DEBUG if os.environ.get("STRBUILDER_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        h.setFormatter(fmt)
        _LOG.addHandler(h)

_setup_logging_once()

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# YAML loader
# --------------------------------------------------------------------------- #
_yaml = YAML(typ="safe")


# --------------------------------------------------------------------------- #
# MODEL
# --------------------------------------------------------------------------- #
@dataclass(frozen=True)
class BuilderConfig:
    """
    Defaults used by StringBuilder operations when an argument is omitted.
    """
    character_mask: str = DEFAULT_CHARACTER_MASK
    limit: int = 100
    limit_end: str = "..."
    split_length: int = 1
    pad_string: str = " "
    pad_side: PadSide = PadSide.RIGHT

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> BuilderConfig:
        if not d:
            return BuilderConfig()
        if not isinstance(d, dict):
            raise ConfigError(f"Builder config must be a mapping, got {type(d).__name__}")

        allowed = {f.name for f in fields(BuilderConfig)}
        extra = set(d.keys()) - allowed
        if extra:
            raise ConfigError(f"BuilderConfig: unknown key(s): {', '.join(sorted(map(str, extra)))}")

        kw: Dict[str, Any] = {}
        for key in ("character_mask", "limit_end", "pad_string"):
            if key in d:
                val = d[key]
                if not isinstance(val, str):
                    raise ConfigError(f"{key}: expected string, got {type(val).__name__}")
                kw[key] = val
        for key in ("limit", "split_length"):
            if key in d:
                val = d[key]
                # bool is an int subclass, but `limit: yes` is surely a mistake
                if isinstance(val, bool) or not isinstance(val, int):
                    raise ConfigError(f"{key}: expected integer, got {type(val).__name__}")
                kw[key] = val
        if kw.get("split_length", 1) < 1:
            raise ConfigError("split_length: must be >= 1")
        if "pad_side" in d:
            try:
                kw["pad_side"] = PadSide.coerce(d["pad_side"])
            except ValueError as e:
                raise ConfigError(f"pad_side: {e}") from None

        return BuilderConfig(**kw)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["pad_side"] = self.pad_side.value
        return data


DEFAULT_CONFIG = BuilderConfig()


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(path: Path | str = DEFAULT_CFG_FILE) -> BuilderConfig:
    """
    Load builder defaults from a YAML file (default: ./strbuilder.yaml).

    • Missing file → defaults.
    • Missing schema_version → treated as the current version.
    • User keys override defaults; unknown keys are an error.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("Config %s not found, using defaults", path)
        return DEFAULT_CONFIG

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    raw = dict(raw)
    version = raw.pop("schema_version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise ConfigError(
            f"Unsupported config schema {version} "
            f"(strbuilder expects {SCHEMA_VERSION})"
        )

    cfg = BuilderConfig.from_dict(raw)
    logger.debug("Loaded builder config from %s: %s", path, cfg)
    return cfg


__all__ = [
    "SCHEMA_VERSION",
    "DEFAULT_CFG_FILE",
    "BuilderConfig",
    "DEFAULT_CONFIG",
    "load_config",
]
