"""
Status polling - bounded, fixed-delay retry loop built on tenacity
"""
import enum
import logging
import time
from typing import Any, Callable

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from ..config import MAX_RETRIES, RETRY_DELAY_MS
from ..exceptions import MaxRetriesExceeded
from .ngrok_api import NgrokApiClient

logger = logging.getLogger(__name__)

DEFAULT_DELAY = RETRY_DELAY_MS / 1000


class PollState(str, enum.Enum):
    IDLE = "idle"
    ATTEMPTING = "attempting"
    WAITING_TO_RETRY = "waiting_to_retry"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class StatusPoller:
    """
    Run an operation until it succeeds, retrying after a fixed delay.

    The attempt count is shared across the whole chain of retries. An
    operation that always fails is attempted exactly max_retries times, with
    one delay between consecutive attempts, and then MaxRetriesExceeded is
    raised. Only Exception subclasses are retried; KeyboardInterrupt stops
    polling immediately.

    Pass a fake sleep to drive the poller in tests without waiting.
    """

    def __init__(
        self,
        operation: Callable[[], Any],
        max_retries: int = MAX_RETRIES,
        delay: float = DEFAULT_DELAY,
        sleep: Callable[[float], Any] = time.sleep
    ):
        self.operation = operation
        self.max_retries = max_retries
        self.delay = delay
        self.sleep = sleep
        self.state = PollState.IDLE
        self.attempts = 0
        self.retries = 0
        self.result = None

    def _before_attempt(self, retry_state: RetryCallState):
        self.state = PollState.ATTEMPTING
        self.attempts = retry_state.attempt_number

    def _before_sleep(self, retry_state: RetryCallState):
        self.state = PollState.WAITING_TO_RETRY
        self.retries += 1
        logger.debug(f"Attempt {retry_state.attempt_number} failed: {retry_state.outcome.exception()}")

    def _give_up(self, retry_state: RetryCallState):
        self.state = PollState.EXHAUSTED
        raise MaxRetriesExceeded() from retry_state.outcome.exception()

    def run(self) -> Any:
        """Attempt immediately, then retry until success or the ceiling"""
        if self.state != PollState.IDLE:
            raise RuntimeError(f"poller already {self.state.value}")

        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_fixed(self.delay),
            retry=retry_if_exception_type(Exception),
            sleep=self.sleep,
            before=self._before_attempt,
            before_sleep=self._before_sleep,
            retry_error_callback=self._give_up,
        )
        self.result = retrying(self.operation)
        self.state = PollState.SUCCEEDED
        logger.debug(f"Succeeded after {self.attempts} attempt(s)")
        return self.result


def display_public_url(
    client: NgrokApiClient,
    max_retries: int = MAX_RETRIES,
    delay: float = DEFAULT_DELAY,
    sleep: Callable[[float], Any] = time.sleep,
    echo: Callable[[str], Any] = print
) -> str:
    """Poll the ngrok API until it reports a public URL, then echo it once"""
    def show():
        url = client.get_public_url()
        echo(url)
        return url

    poller = StatusPoller(show, max_retries=max_retries, delay=delay, sleep=sleep)
    return poller.run()
