"""
Wall-clock timing for verification and sparse solves.

VerifyLinSys.time_check and the factorize/solve entries of a
SparseSolution's timing dict are produced here.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total elapsed time plus named sections, in seconds.

    Sections accumulate: timing the same name twice adds the two spans.
    They may nest inside each other and always nest inside the total.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('mat_vec_mul'):
            ax = trip.mat_vec_mul(x)
        with timer.section('residual'):
            update_vector(ax, -1.0, rhs)
        timer.stop()
        timer.result()
        # {'total_seconds': 4.1e-05, 'mat_vec_mul': 2.9e-05, 'residual': 6.0e-06}
    """

    def __init__(self) -> None:
        self._t0: float | None = None
        self._total: float | None = None
        self._sections: dict[str, float] = {}

    def start(self) -> None:
        self._t0 = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._t0

    @property
    def running(self) -> bool:
        return self._t0 is not None and self._total is None

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to section `name`."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = self._sections.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """
        Timing breakdown.

        Returns:
            {'total_seconds': ..., <section>: ...}; a fresh dict each call

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block; the Timer is stopped on exit, even on error.

    Usage:
        with timed() as timer:
            v = trip.mat_vec_mul(u)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
