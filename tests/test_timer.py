from unittest.mock import patch

import pytest

from epaplace.timer import Timer


def test_initial_value():
    t = Timer(4.0)
    assert list(t) == [4.0]
    assert t.sum() == 4.0


def test_start_stop_records_interval():
    t = Timer()
    with patch("time.perf_counter", side_effect=[10.0, 13.0]):
        t.start()
        t.stop()
    assert list(t) == [3.0]


def test_pause_is_subtracted():
    t = Timer()
    with patch("time.perf_counter", side_effect=[0.0, 2.0, 5.0, 10.0]):
        t.start()
        t.pause()
        t.resume()
        assert t.sum_pauses() == 3.0
        t.stop()
    assert list(t) == [7.0]
    assert t.sum_pauses() == 0.0


def test_insert_and_average():
    t = Timer()
    values = [1.0, 2.0, 6.0]
    t.insert(0, values)
    assert list(t) == values
    assert len(t) == len(values)
    assert t.average() == pytest.approx(t.sum() / len(values))
    t.insert(1, [5.0])
    assert list(t)[1] == 5.0


def test_clear_and_empty_average():
    t = Timer(1.0)
    t.clear()
    assert len(t) == 0
    assert t.sum() == 0.0
    with pytest.raises(ZeroDivisionError):
        t.average()


def test_real_clock_non_negative():
    t = Timer()
    t.start()
    t.stop()
    assert all(d >= 0.0 for d in t)