"""
Provide logged base Class for reporting byte counts.
"""

import contextlib
import io
import logging
import os

from .byte import byte2human
from .config import Config


class Logged(object):
    """
    Provide logging of sizes in human-readable format.

    Sizes are rendered with the unit names and directive of
    logger_config (a Config, mapping, preset name or YAML file).
    Nested setup_logger() calls share one handler; it is removed when
    the outermost close_logger() is done.
    """

    logger_config = None
    logger_count = 0

    def __init__(self, **kwargs):
        kwargs.setdefault("silent", True)
        self.setup_logger(**kwargs)

    @contextlib.contextmanager
    def logenv(self, message=None, **kwargs):
        """
        Context manager for logging; message is logged on exit.
        """
        self.setup_logger(**kwargs)
        try:
            yield
        finally:
            self.close_logger(message=message)

    def setup_logger(self, silent=True, logfile=None, level=logging.INFO, format=None):
        """
        Set up logger named after the class.

        Parameters:
        silent = True - no output unless logging is set up elsewhere
        logfile - write to file rather than stderr
        format - format string for logging.Formatter
        """
        self.logger_count += 1
        if self.logger_count > 1:
            return
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.setLevel(level)
        self.logger_handler = None
        # leave output to handlers installed by the application
        if logging.getLogger("").handlers or self.logger.handlers:
            return
        if silent:
            handler = logging.NullHandler()
        elif logfile is not None:
            handler = logging.FileHandler(logfile, "w")
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(format or " [%(name)s] %(message)s"))
        self.logger.addHandler(handler)
        self.logger_handler = handler

    def close_logger(self, message=None):
        """
        Log message and remove handler if this closes the outermost setup.
        """
        if message is not None:
            self.logger.info(message)
        assert self.logger_count > 0, "logger is not set up"
        self.logger_count -= 1
        if self.logger_count == 0 and self.logger_handler is not None:
            self.logger.removeHandler(self.logger_handler)
            self.logger_handler.close()
            self.logger_handler = None

    def size2human(self, size, directive=None):
        """
        Return size rendered with logger_config.
        """
        if not isinstance(self.logger_config, Config):
            self.logger_config = Config(self.logger_config)
        return byte2human(size, directive=directive, config=self.logger_config)

    def logger_size_info(self, label, size, directive=None):
        """
        Log size information.
        """
        self.logger.info(f"{label:s} ({self.size2human(size, directive):s})")

    def logger_sizes_info(self, sizes, directive="%8.1f"):
        """
        Log table of (label, size) pairs with aligned labels and sizes.
        """
        sizes = list(sizes)
        if len(sizes) == 0:
            return
        width = max(len(label) for label, _ in sizes)
        for label, size in sizes:
            self.logger.info(f"{label:<{width}s} {self.size2human(size, directive):s}")

    def logger_file_info(self, f):
        """
        Log name and size of open file.
        """
        if isinstance(f, io.IOBase):
            stat = os.fstat(f.fileno())
            self.logger_size_info(f"Loading {f.name!s}", stat.st_size)
