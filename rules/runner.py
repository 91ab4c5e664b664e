"""Host-side scheduling of rule evaluations on a thread pool."""
import logging
import time
from concurrent.futures import CancelledError, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from rules.errors import RuleEvaluationError

logger = logging.getLogger("iorules.rules.runner")


class RuleRunner:
    def __init__(self, rules, max_workers=4):
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.rules = list(rules)
        self.max_workers = max_workers

    def schedule(self, items, preferences=None):
        """Create one unstarted task per rule."""
        return [rule.evaluate(items, preferences) for rule in self.rules]

    def run_tasks(self, tasks, timeout=None):
        """Run tasks concurrently. Returns (results, failures) in task order.

        ``failures`` holds (rule_id, exception) for tasks that raised, were
        cancelled or missed the deadline; nothing is retried. ``timeout`` is
        in seconds for the whole run. Tasks still pending at the deadline are
        cancelled; ones already running are left to finish in the background.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        results = []
        failures = []
        executor = ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            for task in tasks:
                executor.submit(task.run)
            for task in tasks:
                remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
                try:
                    results.append(task.result(remaining))
                except CancelledError as e:
                    logger.warning(f"Evaluation of {task.rule_id} was cancelled")
                    failures.append((task.rule_id, e))
                except FutureTimeoutError as e:
                    task.cancel()
                    logger.warning(f"Evaluation of {task.rule_id} timed out after {timeout}s")
                    failures.append((task.rule_id, e))
                except RuleEvaluationError as e:
                    logger.warning(f"Evaluation of {task.rule_id} failed: {e}")
                    failures.append((task.rule_id, e))
        finally:
            executor.shutdown(wait=deadline is None, cancel_futures=True)
        return results, failures

    def run(self, items, preferences=None, timeout=None):
        return self.run_tasks(self.schedule(items, preferences), timeout)
