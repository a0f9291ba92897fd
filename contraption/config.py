"""Environment driven settings for the contraption tools."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from joblib import cpu_count

WORKERS_ENV_VAR = "CONTRAPTION_WORKERS"
BATCH_SIZE_ENV_VAR = "CONTRAPTION_BATCH_SIZE"
BACKEND_ENV_VAR = "CONTRAPTION_BACKEND"
INPUT_ENV_VAR = "CONTRAPTION_INPUT_ROOT"

MAX_CONCURRENT_TRIALS = 16
DEFAULT_BACKEND = "loky"
BACKENDS = ("loky", "threading", "multiprocessing", "sequential")


@dataclass(frozen=True)
class SearchSettings:
    """Worker pool configuration for the maximization search."""

    workers: int
    batch_size: int
    backend: str = DEFAULT_BACKEND

    @property
    def pre_dispatch(self) -> int:
        return max(self.workers, self.batch_size)


def default_input_root() -> Path:
    return Path(__file__).resolve().parent / "inputs"


def resolve_input_root() -> Path:
    value = os.environ.get(INPUT_ENV_VAR)
    if value:
        return Path(value).expanduser()
    return default_input_root()


def _read_positive_int(env_var: str, override: Optional[int], name: str) -> Optional[int]:
    if override is not None:
        value: object = override
        source = name
    else:
        raw = os.environ.get(env_var)
        if not raw:
            return None
        value = raw
        source = env_var
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{source} must be an integer, got {value!r}") from exc
    if number < 1:
        raise ValueError(f"{source} must be at least 1, got {number}")
    return number


def resolve_settings(
    workers: Optional[int] = None,
    batch_size: Optional[int] = None,
    backend: Optional[str] = None,
) -> SearchSettings:
    """Resolve search settings from explicit overrides and the environment.

    Parameters
    ----------
    workers:
        Number of concurrent trials. Falls back to ``CONTRAPTION_WORKERS`` and
        then to the CPU count, capped at :data:`MAX_CONCURRENT_TRIALS`.
    batch_size:
        Upper bound on trials dispatched ahead of free workers. Falls back to
        ``CONTRAPTION_BATCH_SIZE`` and then to twice the worker count.
    backend:
        joblib backend name. Falls back to ``CONTRAPTION_BACKEND``.
    """

    resolved_workers = _read_positive_int(WORKERS_ENV_VAR, workers, "workers")
    if resolved_workers is None:
        resolved_workers = max(1, min(MAX_CONCURRENT_TRIALS, cpu_count()))

    resolved_batch = _read_positive_int(BATCH_SIZE_ENV_VAR, batch_size, "batch_size")
    if resolved_batch is None:
        resolved_batch = 2 * resolved_workers

    resolved_backend = (backend or os.environ.get(BACKEND_ENV_VAR) or DEFAULT_BACKEND).lower()
    if resolved_backend not in BACKENDS:
        raise ValueError(
            f"{BACKEND_ENV_VAR} must be one of {', '.join(BACKENDS)}, got {resolved_backend!r}"
        )

    return SearchSettings(
        workers=resolved_workers,
        batch_size=resolved_batch,
        backend=resolved_backend,
    )
