# src/domain/interfaces.py

from abc import ABC, abstractmethod


class ErrorLogPort(ABC):
    """
    Port for the operator-facing error log.
    Implementations must never raise: logging is best-effort.
    """

    @abstractmethod
    def log(self, message: str) -> None: ...
