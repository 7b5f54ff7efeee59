"""Global configuration for the position sizer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

SETTINGS_DIR = Path.home() / ".position_sizer"
SETTINGS_FILE = SETTINGS_DIR / "settings.json"
SETTINGS_ENV_VAR = "POSITION_SIZER_SETTINGS"

# Keys used in the settings store; values are numeric strings.
RISK_RATIO_KEY = "risk-ratio"
RISK_PERCENTAGE_KEY = "risk-percentage"
BALANCE_KEY = "balance"
SETTINGS_KEYS: Tuple[str, str, str] = (RISK_RATIO_KEY, RISK_PERCENTAGE_KEY, BALANCE_KEY)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class InputLimits:
    """Bounds offered by the input widgets (not enforced by the sizer itself)."""

    entry_min: float = 0.0
    entry_max: float = 10_000.0

    ratio_min: float = 0.0
    ratio_max: float = 10.0
    ratio_step: float = 0.5

    risk_pct_min: float = 0.0
    risk_pct_max: float = 10.0
    risk_pct_step: float = 0.1

    balance_min: float = 0.0
    balance_max: float = 1_000_000_000.0

    def prefill(self, value: Optional[float], low: float, high: float) -> Optional[float]:
        """Saved value for a widget, or None when the widget cannot display it."""
        if value is None or not low <= value <= high:
            return None
        return value


def settings_path() -> Path:
    """Settings file location, honouring the env override."""
    override = os.environ.get(SETTINGS_ENV_VAR)
    return Path(override).expanduser() if override else SETTINGS_FILE


def ensure_settings_dir(path: Path | None = None) -> Path:
    target = (path or settings_path()).parent
    target.mkdir(parents=True, exist_ok=True)
    return target
