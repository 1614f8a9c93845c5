import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = 'linear_dict'
LOG_FILENAME = 'linear_dict.log'

class DictionaryLogger:
    """Facade over the process-wide ``linear_dict`` logger.

    Handlers live on the shared logger, not on this object. A console handler
    is attached once per process and a file handler once per distinct
    ``log_dir``. File handlers stay open for the life of the process, so every
    dictionary writes to every log file opened so far.
    """

    def __init__(self, log_dir: Optional[Path] = None):
        self.logger = logging.getLogger(LOGGER_NAME)
        if self.logger.level == logging.NOTSET:
            self.logger.setLevel(logging.INFO)

        if not self._has_console_handler():
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(
                logging.Formatter('%(levelname)s: %(message)s')
            )
            self.logger.addHandler(console_handler)

        if log_dir:
            log_file = str((Path(log_dir) / LOG_FILENAME).resolve())
            if not self._has_file_handler(log_file):
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(
                    logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
                )
                self.logger.addHandler(file_handler)
                self.info(f"Logging to {log_file}")

    def _has_file_handler(self, log_file: str) -> bool:
        return any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
                   for h in self.logger.handlers)

    def _has_console_handler(self) -> bool:
        # FileHandler subclasses StreamHandler
        return any(type(h) is logging.StreamHandler for h in self.logger.handlers)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)
