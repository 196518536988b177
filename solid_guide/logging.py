"""
Simple logger implementations following SOLID principles.
Implements Logger protocol for different logging backends.
"""
import logging
from datetime import datetime

from prefect import get_run_logger
from prefect.exceptions import MissingContextError


class ConsoleLogger:
    """Simple console logger implementation"""

    def __init__(self, name: str = "solid_guide", level: str = "INFO"):
        self.name = name
        self.level = level.upper()

    def info(self, message: str) -> None:
        """Log info message to console"""
        self._log("INFO", message)

    def error(self, message: str) -> None:
        """Log error message to console"""
        self._log("ERROR", message)

    def debug(self, message: str) -> None:
        """Log debug message to console"""
        if self.level == "DEBUG":
            self._log("DEBUG", message)

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        print(f"[{timestamp}] {level} - {self.name}: {message}")


class PrefectLogger:
    """Logger that uses Prefect's run logger when inside a flow or task run"""

    def __init__(self, logger_name: str = "solid_guide"):
        self.logger_name = logger_name

    def info(self, message: str) -> None:
        """Log info message via Prefect"""
        self._emit("info", message)

    def error(self, message: str) -> None:
        """Log error message via Prefect"""
        self._emit("error", message)

    def debug(self, message: str) -> None:
        """Log debug message via Prefect"""
        self._emit("debug", message)

    def _emit(self, level: str, message: str) -> None:
        try:
            run_logger = get_run_logger()
        except MissingContextError:
            # Outside a run Prefect has no logger to hand out
            prefix = "" if level == "info" else f"{level.upper()}: "
            print(f"{prefix}{message}")
            return
        getattr(run_logger, level)(message)


class StandardLogger:
    """Logger using Python's standard logging module"""

    def __init__(self, logger_name: str = "solid_guide", level: str = "INFO"):
        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Add console handler if no handlers exist
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def info(self, message: str) -> None:
        """Log info message"""
        self.logger.info(message)

    def error(self, message: str) -> None:
        """Log error message"""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log debug message"""
        self.logger.debug(message)


class LoggerFactory:
    """Factory for creating logger instances"""

    @staticmethod
    def create_console_logger(name: str = "solid_guide", level: str = "INFO") -> ConsoleLogger:
        return ConsoleLogger(name, level)

    @staticmethod
    def create_prefect_logger(name: str = "solid_guide") -> PrefectLogger:
        return PrefectLogger(name)

    @staticmethod
    def create_standard_logger(name: str = "solid_guide", level: str = "INFO") -> StandardLogger:
        return StandardLogger(name, level)

    @classmethod
    def create(cls, logger_type: str, name: str = "solid_guide", level: str = "INFO"):
        """Create a logger by type name"""
        if logger_type == "console":
            return cls.create_console_logger(name, level)
        elif logger_type == "prefect":
            return cls.create_prefect_logger(name)
        elif logger_type == "standard":
            return cls.create_standard_logger(name, level)
        raise ValueError(f"Unknown logger type: {logger_type}")


def log_info(logger, message: str) -> None:
    """Log info message if logger available"""
    if logger:
        logger.info(message)
    else:
        print(message)


def log_error(logger, message: str) -> None:
    """Log error message if logger available"""
    if logger:
        logger.error(message)
    else:
        print(f"ERROR: {message}")
