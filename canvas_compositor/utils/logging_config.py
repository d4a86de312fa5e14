"""
Centralized logging configuration for Canvas Compositor

The engine modules only create module-level loggers; an embedding
application calls LoggingConfig.setup_logging() once at startup to route
them to a log file and the terminal.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union


LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
CONSOLE_FORMAT = '[%(levelname)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingConfig:
    """Central logging configuration"""

    _initialized = False
    _log_file_path: Optional[Path] = None
    _handlers: List[logging.Handler] = []
    _logger_name: Optional[str] = None

    @classmethod
    def setup_logging(
        cls,
        log_dir: Path,
        log_file_name: str = "canvas_compositor.log",
        file_level: Union[int, str] = logging.DEBUG,
        console_level: Union[int, str] = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Install file and console handlers, once

        Args:
            log_dir: Directory for the log file, created if missing
            log_file_name: Log file name inside log_dir
            file_level: Level for the file handler
            console_level: Level for the stdout handler
            logger_name: Logger to attach to, root logger if None.
                Pass "canvas_compositor" to capture only engine output.
        """
        if cls._initialized:
            return

        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_file_path = log_dir / log_file_name

        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)

        file_handler = logging.FileHandler(cls._log_file_path, encoding='utf-8')
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

        for handler in (file_handler, console_handler):
            logger.addHandler(handler)

        cls._handlers = [file_handler, console_handler]
        cls._logger_name = logger_name
        cls._initialized = True
        logger.info("Logging to %s", cls._log_file_path)

    @classmethod
    def shutdown(cls):
        """Remove the handlers installed by setup_logging"""
        logger = logging.getLogger(cls._logger_name)
        for handler in cls._handlers:
            logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._initialized = False
        cls._log_file_path = None
        cls._logger_name = None

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the log file path"""
        return cls._log_file_path


__all__ = ['LoggingConfig']
