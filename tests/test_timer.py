"""Tests for the elapsed-time stopwatch."""

import time

from file_loader.timer import Timer


def test_unstarted_timer_reports_zero():
    assert Timer().elapsed() == 0.0


def test_started_timer_counts_milliseconds():
    timer = Timer(start=True)
    time.sleep(0.02)

    elapsed = timer.elapsed()

    assert 15.0 <= elapsed < 1000.0
