# data/repository.py
import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from utils.logger import get_logger
from utils.money import to_decimal

logger = get_logger("repository")

DEFAULT_STORAGE_DIR = Path(__file__).resolve().parent / "storage"

DEFAULT_SETTINGS = {
    "low_stock_threshold": Decimal(5),
    "allow_negative_adjustments": False,
    "currency_symbol": "$",
}


class DataRepository:
    # Read-only access to the seed data and settings kept as JSON.
    # Nothing is ever written back: state lives for one run only.

    def __init__(self, storage_dir: str | Path = DEFAULT_STORAGE_DIR, filename: str = "seed.json"):
        self.storage_dir = Path(storage_dir)
        self.filename = filename

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str) -> dict:
        # Load JSON from disk. A missing, empty or malformed file yields {}
        # so callers fall back to their defaults.
        path = self._file_path(filename)
        if not path.exists():
            logger.warning(f"{path} not found, using defaults")
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return {}
                data = json.loads(text, parse_float=Decimal, parse_int=Decimal)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"{path} does not hold a JSON object, using defaults")
            return {}
        return data

    def _load(self) -> dict:
        return self._read_json(self.filename)

    def get_settings(self) -> dict:
        data = self._load().get("settings", {})
        if not isinstance(data, dict):
            data = {}
        return validate_settings(data)

    def get_catalog(self) -> dict[str, dict]:
        # {key: {"name", "kind", "price", "weight" | "unit"}, ...}
        data = self._load().get("catalog", {})
        if isinstance(data, dict):
            return data
        return {}

    def get_stock(self) -> dict[str, Decimal]:
        # {catalog key: quantity, ...}
        data = self._load().get("stock", {})
        if isinstance(data, dict):
            return data
        return {}

    def get_customers(self) -> list[dict]:
        # [{"name": ..., "orders": [[{"item": key, "quantity": n}, ...], ...]}, ...]
        data = self._load().get("customers", [])
        if isinstance(data, list):
            return data
        return []


def validate_settings(data: dict) -> dict:
    # Merge known settings over the defaults. A value of the wrong type is
    # dropped with a warning and the default is kept.
    settings = dict(DEFAULT_SETTINGS)
    for key, value in data.items():
        if key not in DEFAULT_SETTINGS:
            continue
        if key == "low_stock_threshold":
            if isinstance(value, bool):
                value = None
            else:
                try:
                    value = to_decimal(value)
                except (InvalidOperation, TypeError, ValueError):
                    value = None
            if value is not None and not value.is_finite():
                value = None
        elif key == "allow_negative_adjustments":
            if not isinstance(value, bool):
                value = None
        elif not isinstance(value, str):
            value = None
        if value is None:
            logger.warning(f"Invalid setting {key}={data[key]!r}, using {DEFAULT_SETTINGS[key]!r}")
            continue
        settings[key] = value
    return settings
