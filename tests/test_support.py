"""
Tests for the seed/config repository, money formatting and logger setup.
"""
import logging
from decimal import Decimal

import pytest

from data.repository import DEFAULT_SETTINGS, DataRepository, validate_settings
from utils.logger import LOGGER_NAME, get_logger, setup_logger
from utils.money import format_money


class TestDataRepository:
    def test_missing_file_uses_defaults(self, tmp_path):
        repo = DataRepository(tmp_path)
        assert repo.get_settings() == DEFAULT_SETTINGS
        assert repo.get_catalog() == {}
        assert repo.get_stock() == {}
        assert repo.get_customers() == []

    @pytest.mark.parametrize("content", [b"", b"{not json", b"[1, 2, 3]", b"\xff\xfe{\"settings\": {}}"])
    def test_bad_file_uses_defaults(self, tmp_path, content):
        (tmp_path / "seed.json").write_bytes(content)
        repo = DataRepository(tmp_path)
        assert repo.get_settings() == DEFAULT_SETTINGS
        assert repo.get_customers() == []

    def test_partial_settings_are_merged(self, tmp_path):
        (tmp_path / "seed.json").write_text(
            '{"settings": {"low_stock_threshold": 2.5, "unknown": 1}}', encoding="utf-8"
        )
        settings = DataRepository(tmp_path).get_settings()
        assert settings["low_stock_threshold"] == Decimal("2.5")
        assert settings["allow_negative_adjustments"] is False
        assert "unknown" not in settings

    @pytest.mark.parametrize("raw, expected", [
        ('{"low_stock_threshold": "five"}', Decimal(5)),
        ('{"low_stock_threshold": true}', Decimal(5)),
        ('{"low_stock_threshold": "7"}', Decimal(7)),
    ])
    def test_threshold_must_be_a_number(self, tmp_path, raw, expected):
        (tmp_path / "seed.json").write_text('{"settings": ' + raw + "}", encoding="utf-8")
        assert DataRepository(tmp_path).get_settings()["low_stock_threshold"] == expected

    @pytest.mark.parametrize("flag", ['"false"', '"true"', "1", "null"])
    def test_negative_adjustment_flag_must_be_boolean(self, tmp_path, flag):
        (tmp_path / "seed.json").write_text(
            '{"settings": {"allow_negative_adjustments": ' + flag + "}}", encoding="utf-8"
        )
        assert DataRepository(tmp_path).get_settings()["allow_negative_adjustments"] is False

    def test_non_string_currency_symbol(self):
        assert validate_settings({"currency_symbol": 3})["currency_symbol"] == "$"

    def test_numbers_parse_as_decimal(self):
        repo = DataRepository()
        assert repo.get_catalog()["paper"]["price"] == Decimal("5.49")
        assert isinstance(repo.get_stock()["gravel"], Decimal)


class TestFormatMoney:
    def test_two_decimals(self):
        assert format_money(Decimal("59.4")) == "$59.40"

    def test_thousands_and_rounding(self):
        assert format_money(Decimal("1234.505")) == "$1,234.51"

    def test_negative_and_symbol(self):
        assert format_money(-3, symbol="€") == "-€3.00"


class TestLogger:
    def test_setup_is_idempotent(self, tmp_path):
        logger = setup_logger(tmp_path / "logs")
        try:
            count = len(logger.handlers)
            assert setup_logger(tmp_path / "logs") is logger
            assert len(logger.handlers) == count
            assert (tmp_path / "logs").is_dir()
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_child_loggers_propagate(self):
        parent = logging.getLogger(LOGGER_NAME)
        child = get_logger("inventory")
        assert child.name == f"{LOGGER_NAME}.inventory"
        assert child.parent is parent
