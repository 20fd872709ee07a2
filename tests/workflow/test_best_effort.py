import threading

from unittest_parametrize import ParametrizedTestCase

from models import SinkOutcome
from workflow.best_effort import log_summary, run_best_effort


class TestBestEffort(ParametrizedTestCase):
    def test_collects_outcomes_in_task_order(self) -> None:
        outcomes = run_best_effort(
            [
                ('first', lambda: SinkOutcome(sink='first', delivered=1)),
                ('second', lambda: SinkOutcome(sink='second', delivered=2)),
            ],
            timeout=5,
        )

        self.assertEqual([outcome.sink for outcome in outcomes], ['first', 'second'])
        self.assertEqual([outcome.delivered for outcome in outcomes], [1, 2])

    def test_raising_task_does_not_affect_others(self) -> None:
        def boom() -> SinkOutcome:
            raise RuntimeError('boom')

        outcomes = run_best_effort([('boom', boom), ('fine', lambda: SinkOutcome(sink='fine'))], timeout=5)

        self.assertEqual(outcomes[0], SinkOutcome(sink='boom', failures=['boom']))
        self.assertTrue(outcomes[1].ok)

    def test_slow_task_times_out(self) -> None:
        release = threading.Event()

        def slow() -> SinkOutcome:
            release.wait(5)
            return SinkOutcome(sink='slow')

        try:
            outcomes = run_best_effort([('slow', slow)], timeout=0.05)
        finally:
            release.set()

        self.assertFalse(outcomes[0].ok)
        self.assertIn('timed out', outcomes[0].failures[0])

    def test_no_tasks(self) -> None:
        self.assertEqual(run_best_effort([], timeout=1), [])

    def test_log_summary_levels(self) -> None:
        with self.assertLogs('workflow.best_effort', level='INFO') as logs:
            log_summary('assignment a1', [SinkOutcome(sink='audit', delivered=1)])
            log_summary('assignment a1', [SinkOutcome(sink='push', failures=['down'])])

        self.assertEqual(logs.records[0].levelname, 'INFO')
        self.assertIn('audit=ok(1)', logs.output[0])
        self.assertEqual(logs.records[1].levelname, 'WARNING')
        self.assertIn('push=failed(down)', logs.output[1])
