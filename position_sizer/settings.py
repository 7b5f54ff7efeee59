"""Persisted calculator settings on top of a small key-value store."""

from __future__ import annotations

import json
import logging
import math
import os
import tempfile
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol

from position_sizer.config import BALANCE_KEY, RISK_PERCENTAGE_KEY, RISK_RATIO_KEY, ensure_settings_dir
from position_sizer.sizing.types import TradeInput

logger = logging.getLogger(__name__)


class SettingsError(RuntimeError):
    """The settings file exists but cannot be read as a flat JSON object."""


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def set_many(self, items: Mapping[str, str]) -> None:
        ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def set_many(self, items: Mapping[str, str]) -> None:
        self._data.update({key: str(value) for key, value in items.items()})


class JsonFileStore:
    """Flat JSON object on disk, replaced atomically on every write."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsError(f"Cannot read settings file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {self.path} must contain a JSON object")
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, items: Mapping[str, str]) -> None:
        data = self._read()
        data.update({key: str(value) for key, value in items.items()})
        ensure_settings_dir(self.path)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except Exception:
            os.unlink(tmp_name)
            raise


@dataclass(frozen=True)
class SavedSettings:
    reward_to_risk_ratio: Optional[float] = None
    risk_percentage: Optional[float] = None
    account_balance: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.reward_to_risk_ratio, self.risk_percentage, self.account_balance)


def _parse_stored_number(key: str, raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric setting %s=%r", key, raw)
        return None
    if not math.isfinite(value) or value <= 0:
        logger.warning("Ignoring out-of-range setting %s=%r", key, raw)
        return None
    return value


def format_stored_number(value: float) -> str:
    """Shortest plain decimal for a number, no exponent and no trailing '.0'."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def load_settings(store: KeyValueStore) -> SavedSettings:
    return SavedSettings(
        reward_to_risk_ratio=_parse_stored_number(RISK_RATIO_KEY, store.get(RISK_RATIO_KEY)),
        risk_percentage=_parse_stored_number(RISK_PERCENTAGE_KEY, store.get(RISK_PERCENTAGE_KEY)),
        account_balance=_parse_stored_number(BALANCE_KEY, store.get(BALANCE_KEY)),
    )


def save_settings(store: KeyValueStore, trade: TradeInput) -> SavedSettings:
    """Write the three reusable settings of a successfully sized trade."""
    store.set_many(
        {
            RISK_RATIO_KEY: format_stored_number(trade.reward_to_risk_ratio),
            RISK_PERCENTAGE_KEY: format_stored_number(trade.risk_percentage),
            BALANCE_KEY: format_stored_number(trade.account_balance),
        }
    )
    logger.debug(
        "Saved settings ratio=%s risk_pct=%s balance=%s",
        trade.reward_to_risk_ratio,
        trade.risk_percentage,
        trade.account_balance,
    )
    return SavedSettings(
        reward_to_risk_ratio=float(trade.reward_to_risk_ratio),
        risk_percentage=float(trade.risk_percentage),
        account_balance=float(trade.account_balance),
    )
