"""
Redrum Configuration Management
================================

Centralized configuration for the Redrum toolkit using Python
dataclasses and TOML-based persistence.

Missing files and missing keys fall back to dataclass defaults, so the
toolkit runs out of the box without any ``config.toml`` present.

References:
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class RedrumConfig:
    """Configuration for the digest cross-analysis pipeline.

    Controls word normalisation, the alphabet-index policy for
    non-letter characters, and presentation defaults.
    """

    default_word: str = "REDRUM"
    normalize_case: bool = True
    strict_alphabet: bool = False
    placeholder: str = "?"
    top_frequencies: int = 5
    output_format: str = "console"

    def __post_init__(self) -> None:
        if not isinstance(self.placeholder, str) or len(self.placeholder) != 1:
            raise ValueError(
                f"redrum.placeholder must be a single character, got {self.placeholder!r}"
            )


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and log file."""

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class Config:
    """Master configuration aggregating global and tool settings.

    Usage:
        >>> config = Config.load()                  # from default path
        >>> config = Config.load("custom.toml")     # from custom path
        >>> print(config.redrum.default_word)
        'REDRUM'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    redrum: RedrumConfig = field(default_factory=RedrumConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> Config:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`Config` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            ValueError: If a setting is out of range (e.g. a placeholder that
                is not a single character).
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            redrum=cls._build_section(RedrumConfig, raw.get("redrum", {})),
        )

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

