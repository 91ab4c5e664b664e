"""Deferred, cancellable, single-shot rule evaluation."""
import logging
import threading
from concurrent.futures import Future

from rules.errors import RuleEvaluationError

logger = logging.getLogger("iorules.rules.evaluation")


class EvaluationTask:
    """Wraps one rule evaluation until a host decides to run it.

    Nothing executes on construction. ``run()`` executes the body at most
    once, in the calling thread; ``cancel()`` before that prevents the body
    from ever running. ``result()`` blocks until the body has finished.
    """

    def __init__(self, rule_id, func, *args, **kwargs):
        self.rule_id = rule_id
        self._func = func
        self._args = args
        self._kwargs = kwargs
        self._future = Future()
        self._lock = threading.Lock()
        self._started = False

    def run(self):
        with self._lock:
            if self._started:
                return
            self._started = True
        if not self._future.set_running_or_notify_cancel():
            logger.debug(f"Evaluation of {self.rule_id} cancelled before start")
            return
        try:
            result = self._func(*self._args, **self._kwargs)
        except RuleEvaluationError as e:
            self._future.set_exception(e)
        except Exception as e:
            error = RuleEvaluationError(self.rule_id, f"Evaluation of rule '{self.rule_id}' failed: {e}")
            error.__cause__ = e
            self._future.set_exception(error)
        else:
            self._future.set_result(result)
        finally:
            self._func = self._args = self._kwargs = None

    def cancel(self):
        """Cancel if not started yet. Returns False once running or finished."""
        return self._future.cancel()

    def cancelled(self):
        return self._future.cancelled()

    def done(self):
        return self._future.done()

    def running(self):
        return self._future.running()

    def result(self, timeout=None):
        """The RuleResult; raises RuleEvaluationError, CancelledError or TimeoutError."""
        return self._future.result(timeout)

    def add_done_callback(self, fn):
        self._future.add_done_callback(lambda _f: fn(self))

