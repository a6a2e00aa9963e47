"""Error types raised or reported while analysing log files."""

from __future__ import annotations

from typing import Iterator, Optional, Type, TypeVar

_E = TypeVar("_E", bound=BaseException)


class LogFileNotFoundError(Exception):
    """A configured log file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"file not found: {self.path}"


class ParsingError(Exception):
    """A log file could not be parsed."""

    def __init__(self, log_id: str, message: str) -> None:
        super().__init__(log_id, message)
        self.log_id = log_id
        self.message = message

    def __str__(self) -> str:
        return f"parsing error for log {self.log_id}: {self.message}"


def _chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield an exception followed by the exceptions it was raised from."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if err.__cause__ is not None:
            err = err.__cause__
        elif err.__suppress_context__:
            err = None
        else:
            err = err.__context__


def _find(err: Optional[BaseException], kind: Type[_E]) -> Optional[_E]:
    return next((e for e in _chain(err) if isinstance(e, kind)), None)


def is_file_not_found_error(err: Optional[BaseException]) -> bool:
    """Return True if a LogFileNotFoundError is in the exception chain."""
    return _find(err, LogFileNotFoundError) is not None


def is_parsing_error(err: Optional[BaseException]) -> bool:
    """Return True if a ParsingError is in the exception chain."""
    return _find(err, ParsingError) is not None


def get_file_not_found_error(
    err: Optional[BaseException],
) -> Optional[LogFileNotFoundError]:
    """Return the first LogFileNotFoundError in the chain, or None."""
    return _find(err, LogFileNotFoundError)


def get_parsing_error(err: Optional[BaseException]) -> Optional[ParsingError]:
    """Return the first ParsingError in the chain, or None."""
    return _find(err, ParsingError)