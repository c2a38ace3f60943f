import logging
import time
from dataclasses import dataclass
from functools import wraps

from google.api_core import exceptions as gexc

logger = logging.getLogger(__name__)

# Errors worth another attempt. Permission and validation errors are not.
TRANSIENT_ERRORS = (
    gexc.ServiceUnavailable,
    gexc.DeadlineExceeded,
    gexc.TooManyRequests,
    gexc.InternalServerError,
    gexc.Aborted,
    ConnectionError,
    TimeoutError,
)


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    initial_delay: float = 0.5
    multiplier: float = 2.0
    max_delay: float = 8.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        if self.initial_delay < 0 or self.max_delay < 0:
            raise ValueError("Retry delays must not be negative.")

    def delay_for(self, attempt):
        """Backoff before retry number `attempt` (1-based)."""
        return min(self.initial_delay * (self.multiplier ** (attempt - 1)), self.max_delay)


def with_retry(policy, sleep=time.sleep, retry_on=TRANSIENT_ERRORS):
    """Decorator retrying the wrapped call on transient errors with exponential backoff."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            attempt = 1
            while True:
                try:
                    return f(*args, **kwargs)
                except retry_on as e:
                    if attempt >= policy.max_attempts:
                        logger.error(f"{f.__name__} failed after {attempt} attempts: {e}")
                        raise
                    delay = policy.delay_for(attempt)
                    logger.warning(f"{f.__name__} failed (attempt {attempt}/{policy.max_attempts}): {e}. Retrying in {delay:.2f}s")
                    sleep(delay)
                    attempt += 1
        return decorated_function
    return decorator


class RetryingStore:
    """Wraps a StoreClient so every store round-trip goes through `with_retry`."""

    def __init__(self, store, policy=None, sleep=time.sleep):
        self.store = store
        self.policy = policy or RetryPolicy()
        retry = with_retry(self.policy, sleep=sleep)
        self.list_collections = retry(store.list_collections)
        self.fetch_page = retry(store.fetch_page)
        self.delete_batch = retry(store.delete_batch)
        self.set_document = retry(store.set_document)
