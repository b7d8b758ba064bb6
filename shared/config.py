"""
Pontifex Configuration Management
==================================

Centralized configuration for the Pontifex toolkit using Python
dataclasses and TOML-based persistence.

Configuration is kept separate from code: every tunable lives in a
``config.toml`` file next to the project root (or a path given on the
command line) and missing keys fall back to the dataclass defaults.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"

NON_ALPHA_POLICIES: tuple[str, ...] = ("reject", "drop")


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class CipherConfig:
    """Configuration for the Pontifex cipher.

    Attributes:
        non_alpha_policy: What to do with characters outside A-Z once the
            message is uppercased and stripped of whitespace. ``"reject"``
            raises, ``"drop"`` removes them before encryption.
        group_size: Letters per block when ciphertext is displayed.
            ``0`` disables grouping.
        default_deck: Deck file used when ``--deck`` is not given.
    """

    non_alpha_policy: str = "reject"
    group_size: int = 5
    default_deck: Optional[str] = None

    def __post_init__(self) -> None:
        if self.non_alpha_policy not in NON_ALPHA_POLICIES:
            raise ValueError(
                f"non_alpha_policy must be one of {NON_ALPHA_POLICIES}, "
                f"got {self.non_alpha_policy!r}"
            )
        if self.group_size < 0:
            raise ValueError(f"group_size must be >= 0, got {self.group_size}")


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log destination, debug mode."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PontifexConfig:
    """Master configuration aggregating global and cipher settings.

    Usage:
        >>> config = PontifexConfig.load()                  # from default path
        >>> config = PontifexConfig.load("custom.toml")     # from custom path
        >>> print(config.cipher.non_alpha_policy)
        'reject'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    cipher: CipherConfig = field(default_factory=CipherConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PontifexConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`PontifexConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
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
            cipher=cls._build_section(CipherConfig, raw.get("cipher", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
