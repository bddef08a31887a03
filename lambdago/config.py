"""
Configuration management for lambdago.

Loads configuration from config.yaml and provides typed access. Every
section is optional; missing values fall back to the defaults below.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from . import elo


@dataclass
class EloConfig:
    """Rating calculation parameters."""
    k_factor: float = elo.K_FACTOR
    initial_rating: float = elo.INITIAL_RATING


@dataclass
class ReportConfig:
    """Chart layout parameters."""
    width_per_move: float = 5.4


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"


@dataclass
class AppConfig:
    """Main application configuration."""
    elo: EloConfig = field(default_factory=EloConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml. If None, searches in:
                     1. Current directory
                     2. Project root (relative to this file)
                     and uses the defaults when neither exists.

    Returns:
        AppConfig instance

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If config file is invalid
    """
    if config_path is None:
        search_paths = [
            Path.cwd() / "config.yaml",
            get_project_root() / "config.yaml",
        ]

        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break
        else:
            return AppConfig()
    elif not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        raise ValueError(f"Config file is empty: {config_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    elo_data = data.get("elo") or {}
    elo_config = EloConfig(
        k_factor=float(elo_data.get("k_factor", elo.K_FACTOR)),
        initial_rating=float(elo_data.get("initial_rating", elo.INITIAL_RATING)),
    )

    report_data = data.get("report") or {}
    report_config = ReportConfig(
        width_per_move=float(report_data.get("width_per_move", 5.4)),
    )

    logging_data = data.get("logging") or {}
    level = str(logging_data.get("level", "INFO")).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"Invalid logging level: {level}")

    return AppConfig(
        elo=elo_config,
        report=report_config,
        logging=LoggingConfig(level=level),
    )
