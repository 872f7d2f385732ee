"""Structured logging for fastwild."""

import json
import sys
import time


LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class Logger:
    """JSON-structured logger writing one object per line to stderr."""

    def __init__(self, component: str = "harness", level: str = "INFO"):
        self.component = component
        self.level = level.upper()
        if self.level not in LEVELS:
            raise ValueError(f"Unknown log level: {level}")

    def _log(self, level: str, message: str, **kwargs):
        """Internal logging method."""
        if LEVELS[level] < LEVELS[self.level]:
            return

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "component": self.component,
            "message": message,
            **kwargs
        }
        print(json.dumps(log_entry, ensure_ascii=False), file=sys.stderr)

    def info(self, message: str, **kwargs):
        """Log info level message."""
        self._log("INFO", message, **kwargs)

    def warn(self, message: str, **kwargs):
        """Log warning level message."""
        self._log("WARN", message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error level message."""
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug level message."""
        self._log("DEBUG", message, **kwargs)
