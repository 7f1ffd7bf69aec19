"""
Test suite for structured logging

Tests JSON formatting, logger setup, and the debug records accounts
emit for successful operations.
"""

import json
import logging

import pytest
from decimal import Decimal
from datetime import datetime

from simple_ledger import config as config_module
from simple_ledger.clock import MutableClock
from simple_ledger.accounts import Account, InvalidAmountError
from simple_ledger.logging_config import (
    JSONFormatter, setup_logging, setup_logging_from_config, get_logger, log_action
)


class TestJSONFormatter:
    """Test JSON log formatting"""
    
    def test_format_drops_empty_fields(self):
        record = logging.LogRecord("simple_ledger", logging.INFO, __file__, 1, "hello", (), None)
        
        entry = json.loads(JSONFormatter().format(record))
        
        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert "action" not in entry
        assert "extra" not in entry
    
    def test_format_serialises_decimals(self):
        record = logging.LogRecord("simple_ledger", logging.DEBUG, __file__, 1, "deposit", (), None)
        record.action = "deposit"
        record.extra = {"amount": Decimal('250.75')}
        
        entry = json.loads(JSONFormatter().format(record))
        
        assert entry["action"] == "deposit"
        assert entry["extra"] == {"amount": "250.75"}


class TestSetupLogging:
    """Test logger configuration"""
    
    def test_setup_replaces_handlers(self):
        logger = setup_logging("DEBUG", logger_name="simple_ledger.test_setup")
        logger = setup_logging("WARNING", logger_name="simple_ledger.test_setup")
        
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.level == logging.WARNING
        assert logger.propagate is False
    
    def test_text_format(self):
        logger = setup_logging("INFO", logger_name="simple_ledger.test_text", log_format="text")
        
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
    
    def test_get_logger(self):
        assert get_logger("simple_ledger.x") is logging.getLogger("simple_ledger.x")


class TestLogAction:
    """Test structured action logging"""
    
    def test_log_action_emits_structured_record(self, caplog):
        logger = get_logger("simple_ledger.test_action")
        
        with caplog.at_level(logging.INFO, logger="simple_ledger.test_action"):
            log_action(logger, "info", "done", action="withdrawal",
                       resource="account", extra={"amount": "1.00"})
        
        record = caplog.records[-1]
        assert record.getMessage() == "done"
        assert record.action == "withdrawal"
        assert record.resource == "account"
        assert record.extra == {"amount": "1.00"}
    
    def test_log_action_respects_level(self, caplog):
        logger = get_logger("simple_ledger.test_level")
        
        with caplog.at_level(logging.WARNING, logger="simple_ledger.test_level"):
            log_action(logger, "debug", "hidden")
        
        assert not caplog.records


class TestAccountLogging:
    """Test log records produced by Account"""
    
    @pytest.fixture(autouse=True)
    def fresh_config(self, monkeypatch):
        monkeypatch.delenv("LEDGER_LOG_OPERATIONS", raising=False)
        monkeypatch.setattr(config_module, "config", config_module.LedgerConfig(_env_file=None))
    
    def test_successful_operations_logged_at_debug(self, caplog):
        account = Account(MutableClock(datetime(2024, 1, 1, 12, 0)))
        
        with caplog.at_level(logging.DEBUG, logger="simple_ledger.accounts"):
            account.deposit(Decimal('100.00'))
            account.withdraw(Decimal('40.00'))
        
        actions = [r.action for r in caplog.records if r.name == "simple_ledger.accounts"]
        assert actions == ["deposit", "withdrawal"]
        assert caplog.records[-1].extra["resulting_balance"] == "60.00"
    
    def test_rejections_not_logged(self, caplog):
        account = Account(MutableClock(datetime(2024, 1, 1, 12, 0)))
        
        with caplog.at_level(logging.DEBUG, logger="simple_ledger.accounts"):
            with pytest.raises(InvalidAmountError):
                account.deposit(Decimal('0'))
        
        assert not [r for r in caplog.records if r.name == "simple_ledger.accounts"]
    
    def test_operation_logging_can_be_disabled(self, caplog, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_OPERATIONS", "false")
        monkeypatch.setattr(config_module, "config", config_module.LedgerConfig(_env_file=None))
        account = Account(MutableClock(datetime(2024, 1, 1, 12, 0)))
        
        with caplog.at_level(logging.DEBUG, logger="simple_ledger.accounts"):
            account.deposit(Decimal('1'))
        
        assert not [r for r in caplog.records if r.name == "simple_ledger.accounts"]


class TestSetupFromConfig:
    """Test logging setup driven by LedgerConfig"""
    
    def test_uses_configured_level_and_format(self, monkeypatch):
        monkeypatch.setenv("LEDGER_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("LEDGER_LOG_FORMAT", "text")
        monkeypatch.setattr(config_module, "config", config_module.LedgerConfig(_env_file=None))
        
        logger = setup_logging_from_config()
        try:
            assert logger.name == "simple_ledger"
            assert logger.level == logging.ERROR
            assert not isinstance(logger.handlers[0].formatter, JSONFormatter)
        finally:
            for handler in logger.handlers[:]:
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
            logger.propagate = True
