"""Concurrent analysis of configured log files."""

from __future__ import annotations

import os
import random
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Iterable, List, Optional

from .config import LogConfig
from .errors import LogFileNotFoundError, ParsingError
from .reporter import LogResult, Status


def analyze_log(log_config: LogConfig, rng: Optional[Any] = None) -> LogResult:
    """Analyse one log file.

    The file must be accessible. Reading is simulated by a pause of 50 to
    200 ms, and one analysis in ten fails with a parsing error.
    """
    source = random if rng is None else rng
    try:
        os.stat(log_config.path)
    except FileNotFoundError:
        return LogResult(
            log_id=log_config.id,
            file_path=log_config.path,
            status=Status.FAILED,
            message="Fichier introuvable.",
            error_details=str(LogFileNotFoundError(log_config.path)),
        )
    except OSError as exc:
        return LogResult(
            log_id=log_config.id,
            file_path=log_config.path,
            status=Status.FAILED,
            message="Fichier inaccessible.",
            error_details=str(exc),
        )

    time.sleep((50 + source.randrange(151)) / 1000)

    if source.random() < 0.1:
        error = ParsingError(log_config.id, "erreur de format de ligne")
        return LogResult(
            log_id=log_config.id,
            file_path=log_config.path,
            status=Status.FAILED,
            message="Erreur de parsing.",
            error_details=str(error),
        )
    return LogResult(
        log_id=log_config.id,
        file_path=log_config.path,
        status=Status.OK,
        message="Analyse terminée avec succès.",
    )


def analyze_logs(
    configs: Iterable[LogConfig], rng: Optional[Any] = None
) -> List[LogResult]:
    """Analyse every log in its own thread; results come in completion order."""
    configs = list(configs)
    if not configs:
        return []
    with ThreadPoolExecutor(max_workers=len(configs)) as pool:
        futures = [pool.submit(analyze_log, cfg, rng) for cfg in configs]
        return [future.result() for future in as_completed(futures)]