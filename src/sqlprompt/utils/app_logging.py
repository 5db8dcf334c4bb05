import logging
import os
import sys

# 日志写到stderr，stdout只留给交互输出(提示符、表格、ERROR行)
LOGGER_NAME = "SqlPrompt"
DEFAULT_LOG_LEVEL = "WARNING"

log_formatter = logging.Formatter(
    fmt='%(asctime)s.%(msecs)03d | %(levelname)-7s | %(message)s',
    datefmt='%H:%M:%S'
)

logger = logging.getLogger(LOGGER_NAME)
logger.propagate = False

_handler = None


def _resolve_level(level_name: str):
    return getattr(logging, level_name.upper(), None) if level_name else None


def setup_logging(level_name: str = None, stream=None) -> logging.Logger:
    """
    初始化应用日志

    Args:
        level_name: 日志级别名称；为空时读取环境变量 LOG_LEVEL，默认 WARNING
        stream: 输出流，默认 sys.stderr
    """
    global _handler

    level_name = level_name or os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = _resolve_level(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(log_formatter)
    _handler.setLevel(level)
    logger.addHandler(_handler)
    logger.setLevel(level)

    return logger


def set_log_level(level_name: str):
    """
    运行时修改日志级别

    Args:
        level_name: DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    level = _resolve_level(level_name)
    if not isinstance(level, int):
        logger.warning(f"[AppLogging] Invalid log level: {level_name}")
        return

    logger.setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)
    logger.info(f"[AppLogging] Log level changed to: {level_name.upper()}")
