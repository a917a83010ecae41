import pytest
import logging
import os
from onesky.core.config import Config
from onesky.core.logger import Logger, LoggerError

@pytest.fixture
def temp_log_file(tmp_path):
    """Create a temporary log file"""
    return tmp_path / "test.log"

@pytest.fixture
def config_with_custom_logging(temp_log_file):
    """Create a config with custom logging settings"""
    config = Config()
    config.update({
        "logging": {
            "level": "DEBUG",
            "file": str(temp_log_file)
        }
    })
    return config

@pytest.fixture
def logger(config_with_custom_logging):
    """Create a logger instance with custom config"""
    instance = Logger(config_with_custom_logging)
    yield instance
    for handler in instance.logger.handlers[:]:
        instance.logger.removeHandler(handler)
        handler.close()

def read_log(path):
    for handler in logging.getLogger("onesky").handlers:
        handler.flush()
    with open(path, 'r') as f:
        return f.read()

def test_logger_initialization(logger):
    """Test basic logger initialization"""
    assert logger.logger.level == logging.DEBUG
    assert logger.logger.name == "onesky"

def test_logger_file_handler(logger, temp_log_file):
    """Test if file handler is properly configured"""
    assert os.path.exists(temp_log_file)

    logger.debug("Test message")

    assert "Test message" in read_log(temp_log_file)

def test_logger_context(logger, temp_log_file):
    """Test logger context information"""
    logger.info("Calling getFile", extra={"operation": "getFile", "project": 1})

    log_content = read_log(temp_log_file)
    assert "operation:getFile" in log_content
    assert "project:1" in log_content
    assert " - INFO - " in log_content

def test_child_logger_records_without_context(logger, temp_log_file):
    """Records from library modules format even without context fields"""
    logging.getLogger("onesky.api.endpoints").warning("plain record")

    log_content = read_log(temp_log_file)
    assert "plain record" in log_content
    assert "operation:-" in log_content

def test_invalid_log_level():
    """Test logger initialization with invalid log level"""
    config = Config()
    config.update({"logging": {"level": "INVALID_LEVEL"}})

    with pytest.raises(LoggerError):
        Logger(config)

def test_unusable_log_file(tmp_path):
    """Test logger initialization with a log path that is a directory"""
    config = Config()
    config.update({"logging": {"file": str(tmp_path)}})

    with pytest.raises(LoggerError):
        Logger(config)

def test_multiple_handlers(config_with_custom_logging):
    """Test logger with file and console handlers"""
    config_with_custom_logging.update({"logging": {"console_output": True}})

    logger = Logger(config_with_custom_logging)
    try:
        assert len(logger.logger.handlers) == 2
    finally:
        for handler in logger.logger.handlers[:]:
            logger.logger.removeHandler(handler)
            handler.close()

def test_reconfiguring_replaces_handlers(config_with_custom_logging):
    Logger(config_with_custom_logging)
    logger = Logger(config_with_custom_logging)
    try:
        assert len(logger.logger.handlers) == 1
    finally:
        for handler in logger.logger.handlers[:]:
            logger.logger.removeHandler(handler)
            handler.close()
