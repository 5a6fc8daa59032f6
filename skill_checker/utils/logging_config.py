"""
Logging setup for the Resume Skill Checker
"""
import functools
import inspect
import logging
import logging.config
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from skill_checker.utils import config as settings

DETAILED_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-40s | %(funcName)-20s:%(lineno)-4d | %(message)s"
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# ENVIRONMENT -> setup_logging kwargs; unknown environments use production
PRESETS: Dict[str, Dict[str, Any]] = {
    "production": {"level": None, "enable_file": True, "console_format": "detailed"},
    "development": {"level": "DEBUG", "enable_file": True, "console_format": "detailed"},
    "testing": {"level": "WARNING", "enable_file": False, "console_format": "simple"},
}


def _rotating_file(filename: Path, level: str) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "detailed",
        "filename": str(filename),
        "maxBytes": 10485760,  # 10MB
        "backupCount": 5,
        "encoding": "utf8"
    }


def setup_logging(level: str = "INFO", enable_file: bool = True, console_format: str = "detailed") -> None:
    """
    Route the package, uvicorn and pdfminer loggers to the console and,
    optionally, to dated rotating files under LOG_DIR (all records plus an
    errors-only file).
    """
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": console_format,
            "stream": "ext://sys.stdout"
        }
    }

    if enable_file:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now().strftime('%Y%m%d')
        handlers["file"] = _rotating_file(log_dir / f"skill_checker_{stamp}.log", level)
        handlers["error_file"] = _rotating_file(log_dir / f"skill_checker_errors_{stamp}.log", "ERROR")

    names = list(handlers)
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {"format": DETAILED_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "simple": {"format": SIMPLE_FORMAT},
        },
        "handlers": handlers,
        "loggers": {
            "": {"level": level, "handlers": names, "propagate": False},
            "uvicorn": {"level": "INFO", "handlers": names, "propagate": False},
            "uvicorn.access": {"level": "INFO", "handlers": ["console"], "propagate": False},
        },
    })

    get_logger("logging").info(f"Logging configured - level {level}, handlers {names}")


def configure_for_environment():
    """Apply the preset for the ENVIRONMENT setting"""
    preset = dict(PRESETS.get(settings.ENVIRONMENT, PRESETS["production"]))
    preset["level"] = preset["level"] or settings.LOG_LEVEL
    setup_logging(**preset)


def get_logger(name: str) -> logging.Logger:
    """Logger under the skill_checker namespace (usually called with __name__)"""
    if name.startswith("skill_checker."):
        return logging.getLogger(name)
    return logging.getLogger(f"skill_checker.{name}")


def log_function_call(func):
    """
    Debug-log entry, exit and duration of a sync or async callable.
    Failures are logged at ERROR and re-raised.
    """
    logger = get_logger(func.__module__)

    def _failed(start_time, exc):
        logger.error(f"Error in {func.__name__} after {time.time() - start_time:.3f}s: {exc}")

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        start_time = time.time()
        logger.debug(f"Entering {func.__name__}")
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            _failed(start_time, e)
            raise
        logger.debug(f"Completed {func.__name__} in {time.time() - start_time:.3f}s")
        return result

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        start_time = time.time()
        logger.debug(f"Entering {func.__name__}")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _failed(start_time, e)
            raise
        logger.debug(f"Completed {func.__name__} in {time.time() - start_time:.3f}s")
        return result

    return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper


class PerformanceMonitor:
    """Time a block; warn when it runs longer than ``threshold_ms``"""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None, threshold_ms: float = 1000):
        self.operation_name = operation_name
        self.logger = logger or get_logger("performance")
        self.threshold_ms = threshold_ms
        self.start_time = None
        self.elapsed_ms = None

    def __enter__(self):
        self.start_time = time.time()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.time() - self.start_time) * 1000

        if exc_type is not None:
            self.logger.info(f"{self.operation_name} gave up after {self.elapsed_ms:.2f}ms: {exc_val}")
        elif self.elapsed_ms > self.threshold_ms:
            self.logger.warning(f"{self.operation_name} took {self.elapsed_ms:.2f}ms (threshold {self.threshold_ms}ms)")
        else:
            self.logger.debug(f"{self.operation_name} took {self.elapsed_ms:.2f}ms")
        return False
