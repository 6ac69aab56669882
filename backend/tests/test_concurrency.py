import threading

from quakequiz.models import Score
from quakequiz.services.identity import resolve_identity, submit_score


def _run_together(flask_app, jobs):
    """Start every job at the same moment, each in its own app context and session."""
    barrier = threading.Barrier(len(jobs))
    results = [None] * len(jobs)
    errors = []

    def worker(index, job):
        with flask_app.app_context():
            try:
                barrier.wait()
                results[index] = job()
            except Exception as exc:
                errors.append(exc)

    threads = [threading.Thread(target=worker, args=(i, job)) for i, job in enumerate(jobs)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    assert not errors, errors
    return results


def test_simultaneous_first_logins_create_one_player(file_app):
    def start():
        created, identity = resolve_identity('alice', '1234')
        return created, identity.id

    outcomes = _run_together(file_app, [start for _ in range(8)])

    assert sum(1 for created, _ in outcomes if created) == 1
    assert len({identity_id for _, identity_id in outcomes}) == 1
    assert Score.query.filter_by(nickname='alice').count() == 1


def test_simultaneous_scores_keep_the_highest(file_app):
    resolve_identity('alice', '1234')
    submitted = [37, 5, 88, 61, 88, 12, 99, 40, 73, 0, 56, 98, 21, 64, 90]

    def submit(value):
        return lambda: submit_score('alice', value).score

    returned = _run_together(file_app, [submit(v) for v in submitted])

    assert all(0 <= value <= max(submitted) for value in returned)
    assert Score.query.filter_by(nickname='alice').one().score == max(submitted)
