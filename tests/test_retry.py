import unittest
from unittest.mock import MagicMock
from google.api_core import exceptions as gexc
from backend.purger import BatchCollectionPurger
from backend.retry import RetryPolicy, RetryingStore, with_retry
from fake_store import FakeStore

class FlakyStore(FakeStore):
    """Fails the first `failures` batch commits with a transient error."""

    def __init__(self, failures, **kwargs):
        super().__init__(**kwargs)
        self.failures = failures

    def delete_batch(self, collection, doc_ids):
        if self.failures > 0:
            self.failures -= 1
            raise gexc.ServiceUnavailable("backend unavailable")
        super().delete_batch(collection, doc_ids)

class TestRetryPolicy(unittest.TestCase):
    def test_exponential_delays_are_capped(self):
        policy = RetryPolicy(max_attempts=6, initial_delay=0.5, multiplier=2.0, max_delay=3.0)
        self.assertEqual([policy.delay_for(n) for n in range(1, 6)], [0.5, 1.0, 2.0, 3.0, 3.0])

    def test_invalid_policy(self):
        with self.assertRaises(ValueError):
            RetryPolicy(max_attempts=0)
        with self.assertRaises(ValueError):
            RetryPolicy(initial_delay=-1)

class TestWithRetry(unittest.TestCase):
    def setUp(self):
        self.sleeps = []
        self.policy = RetryPolicy(max_attempts=3, initial_delay=0.5)

    def test_succeeds_after_transient_failures(self):
        call = MagicMock(side_effect=[gexc.ServiceUnavailable("x"), gexc.DeadlineExceeded("y"), "done"])
        call.__name__ = 'call'
        wrapped = with_retry(self.policy, sleep=self.sleeps.append)(call)

        self.assertEqual(wrapped(1, key='v'), "done")
        self.assertEqual(call.call_count, 3)
        call.assert_called_with(1, key='v')
        self.assertEqual(self.sleeps, [0.5, 1.0])

    def test_gives_up_after_max_attempts(self):
        call = MagicMock(side_effect=gexc.TooManyRequests("quota"))
        call.__name__ = 'call'
        wrapped = with_retry(self.policy, sleep=self.sleeps.append)(call)

        with self.assertRaises(gexc.TooManyRequests):
            wrapped()
        self.assertEqual(call.call_count, 3)
        self.assertEqual(len(self.sleeps), 2)

    def test_permission_errors_are_not_retried(self):
        call = MagicMock(side_effect=gexc.PermissionDenied("nope"))
        call.__name__ = 'call'
        wrapped = with_retry(self.policy, sleep=self.sleeps.append)(call)

        with self.assertRaises(gexc.PermissionDenied):
            wrapped()
        self.assertEqual(call.call_count, 1)
        self.assertEqual(self.sleeps, [])

class TestRetryingStore(unittest.TestCase):
    def test_purge_survives_transient_commit_failures(self):
        sleeps = []
        inner = FlakyStore(2, data={'activities': {f"a{i}": {} for i in range(25)}})
        store = RetryingStore(inner, RetryPolicy(max_attempts=3, initial_delay=0.1), sleep=sleeps.append)

        deleted = BatchCollectionPurger(store, page_size=10).purge('activities')

        self.assertEqual(deleted, 25)
        self.assertEqual(inner.count('activities'), 0)
        self.assertEqual(inner.commit_sizes('activities'), [10, 10, 5])
        self.assertEqual(sleeps, [0.1, 0.2])

    def test_persistent_failure_reaches_the_purger(self):
        inner = FlakyStore(10, data={'activities': {"a": {}}})
        store = RetryingStore(inner, RetryPolicy(max_attempts=2, initial_delay=0), sleep=lambda s: None)

        with self.assertRaises(gexc.ServiceUnavailable):
            BatchCollectionPurger(store).purge('activities')
        self.assertEqual(inner.failures, 8)
        self.assertEqual(inner.count('activities'), 1)

if __name__ == '__main__':
    unittest.main()
