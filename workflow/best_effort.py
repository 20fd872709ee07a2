import concurrent.futures
import logging
import time
from collections.abc import Callable, Sequence

from models import SinkOutcome

logger = logging.getLogger(__name__)

Task = tuple[str, Callable[[], SinkOutcome]]


def guarded(name: str, fn: Callable[[], SinkOutcome]) -> SinkOutcome:
    try:
        return fn()
    except Exception as err:
        logger.exception('Sink %s failed', name)
        return SinkOutcome(sink=name, failures=[str(err)])


def run_best_effort(tasks: Sequence[Task], timeout: float) -> list[SinkOutcome]:
    """
    Run independent tasks concurrently and collect one outcome per task.

    No task can abort another, and this function never raises. A task still running once the
    shared deadline passes is reported as failed and left to finish in the background.
    """
    if not tasks:
        return []

    executor = concurrent.futures.ThreadPoolExecutor(max_workers=len(tasks), thread_name_prefix='best-effort')
    futures = [(name, executor.submit(guarded, name, fn)) for name, fn in tasks]
    deadline = time.monotonic() + timeout

    outcomes = []
    try:
        for name, future in futures:
            try:
                outcomes.append(future.result(timeout=max(deadline - time.monotonic(), 0)))
            except concurrent.futures.TimeoutError:
                logger.warning('Sink %s did not finish within %.1fs', name, timeout)
                future.cancel()
                outcomes.append(SinkOutcome(sink=name, failures=[f'timed out after {timeout}s']))
    finally:
        executor.shutdown(wait=False)

    return outcomes


def describe(outcome: SinkOutcome) -> str:
    if outcome.ok:
        return f'{outcome.sink}=ok({outcome.delivered})'

    return f'{outcome.sink}=failed({"; ".join(outcome.failures)})'


def log_summary(context: str, outcomes: list[SinkOutcome]) -> None:
    summary = ', '.join(describe(outcome) for outcome in outcomes)

    if all(outcome.ok for outcome in outcomes):
        logger.info('Fan-out for %s: %s', context, summary)
    else:
        logger.warning('Fan-out for %s: %s', context, summary)
