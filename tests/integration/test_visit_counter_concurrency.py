"""
Concurrency tests for the visit counter

Each worker thread opens its own database connection, so these tests use
transactional test cases against the file-backed test database.

Run with: pytest tests/integration/test_visit_counter_concurrency.py -v
"""
import threading

import pytest
from django.db import connection

from analytics.counters import VisitCounterStore
from analytics.models import VisitCounter

WORKERS = 20


def run_concurrently(target, workers=WORKERS):
    """Start `workers` threads on target at once; return (results, errors)."""
    barrier = threading.Barrier(workers)
    results = []
    errors = []
    lock = threading.Lock()

    def worker():
        try:
            barrier.wait()
            value = target()
            with lock:
                results.append(value)
        except Exception as exc:
            with lock:
                errors.append(exc)
        finally:
            connection.close()

    threads = [threading.Thread(target=worker) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=60)

    return results, errors


@pytest.mark.django_db(transaction=True)
class TestVisitCounterConcurrency:

    def test_concurrent_increments_are_not_lost(self):
        results, errors = run_concurrently(lambda: VisitCounterStore().increment('site_visits'))

        assert errors == []
        assert sorted(results) == list(range(1, WORKERS + 1))
        assert VisitCounter.objects.get(key='site_visits').count == WORKERS

    def test_concurrent_increments_on_existing_counter(self):
        VisitCounter.objects.create(key='site_visits', count=100)

        results, errors = run_concurrently(lambda: VisitCounterStore().increment('site_visits'))

        assert errors == []
        assert sorted(results) == list(range(101, 101 + WORKERS))
        assert VisitCounterStore().get_or_create('site_visits') == 100 + WORKERS

    def test_concurrent_first_reads_create_one_record(self):
        results, errors = run_concurrently(lambda: VisitCounterStore().get_or_create('site_visits'))

        assert errors == []
        assert results == [0] * WORKERS
        assert VisitCounter.objects.filter(key='site_visits').count() == 1

    def test_mixed_reads_and_increments(self):
        store_calls = [
            (lambda: VisitCounterStore().increment('site_visits')) if i % 2 else
            (lambda: VisitCounterStore().get_or_create('site_visits'))
            for i in range(WORKERS)
        ]
        calls = iter(store_calls)
        calls_lock = threading.Lock()

        def next_call():
            with calls_lock:
                call = next(calls)
            return call()

        results, errors = run_concurrently(next_call)

        assert errors == []
        assert len(results) == WORKERS
        assert VisitCounter.objects.get(key='site_visits').count == WORKERS // 2
