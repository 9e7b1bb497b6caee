# src/infrastructure/error_log.py

from datetime import datetime

from src.domain.interfaces import ErrorLogPort


class FileErrorLog(ErrorLogPort):
    """
    Append-only error log, one `HH:MM:SS: message` line per entry.

    The file is opened per call in append mode, so concurrent writers and
    external log rotation need no coordination. Write failures are dropped.
    """

    def __init__(self, log_path: str):
        self._log_path = log_path

    def log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        entry = f"{timestamp}: {message}\n"
        try:
            with open(self._log_path, "a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(entry)
        except OSError:
            return
