"""
Monitor tests: recovering records from log traffic and tracking the task tree.
"""

import logging

from progresslogging import (
    PROGRESS,
    ROOT_ID,
    ProgressMonitor,
    ProgressState,
    as_progress,
    derive_id,
    log_progress,
    with_progress,
)


def _log_plain(logger, message, **fields):
    logger.log(PROGRESS, message, extra=fields)


def test_structured_record_is_returned_as_is(captured):
    with with_progress(name="load"):
        pass
    assert as_progress(captured[0]) is captured[0].msg.progress


def test_flat_protocol(progress_logger, captured):
    _log_plain(progress_logger, "downloading", progress=0.25, _id="job-1")
    _log_plain(progress_logger, "downloading", progress=float("nan"), _id="job-1")
    _log_plain(progress_logger, "downloading", progress=None, _id="job-1")
    _log_plain(progress_logger, "downloading", progress="done", _id="job-1")

    records = [as_progress(r) for r in captured]
    assert {p.id for p in records} == {derive_id("job-1")}
    assert {p.parent_id for p in records} == {ROOT_ID}
    assert {p.name for p in records} == {"downloading"}
    assert [p.state for p in records] == [
        ProgressState.IN_PROGRESS,
        ProgressState.INDETERMINATE,
        ProgressState.INDETERMINATE,
        ProgressState.DONE,
    ]
    assert records[0].fraction == 0.25


def test_records_without_progress_value_are_not_progress(progress_logger, captured):
    progress_logger.log(PROGRESS, "plain message")
    _log_plain(progress_logger, "flag", progress=True)
    _log_plain(progress_logger, "word", progress="halfway")

    assert [as_progress(r) for r in captured] == [None, None, None]


def test_call_site_identity_without_id(progress_logger, captured):
    for fraction in (0.1, 0.2):
        progress_logger.log(PROGRESS, "step", extra={"progress": fraction})
    progress_logger.log(PROGRESS, "step", extra={"progress": 0.3})

    first, second, third = (as_progress(r) for r in captured)
    assert first.id == second.id
    assert third.id != first.id


def test_monitor_tracks_active_tasks(monitor):
    with with_progress(name="job") as job:
        assert monitor.get(job.id).state is ProgressState.INDETERMINATE
        log_progress(0.4)
        assert monitor.get(job.id).fraction == 0.4
        assert [p.id for p in monitor.active()] == [job.id]

    assert monitor.get(job.id) is None
    assert monitor.snapshot() == []


def test_monitor_tree(monitor):
    with with_progress(name="job") as job:
        with with_progress(name="a") as a, with_progress(name="b", parent_id=job.id) as b:
            assert [p.id for p in monitor.roots()] == [job.id]
            assert {p.id for p in monitor.children(job.id)} == {a.id, b.id}
            assert monitor.children(a.id) == []


def test_monitor_can_retain_finished_tasks(progress_logger):
    with ProgressMonitor(retain_done=True).watching(progress_logger) as monitor:
        with with_progress(name="job") as job:
            pass
        assert monitor.get(job.id).done
        assert monitor.active() == []
        monitor.clear()
        assert monitor.snapshot() == []


def test_watching_restores_logger():
    logger = logging.getLogger("progresslogging.tests.watch")
    logger.setLevel(logging.WARNING)
    monitor = ProgressMonitor()

    with monitor.watching(logger):
        assert logger.level == PROGRESS
        assert monitor in logger.handlers

    assert logger.level == logging.WARNING
    assert monitor not in logger.handlers
