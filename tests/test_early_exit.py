from unittest import mock

from kvlab.mr.worker import KeyValue
from kvlab.mrapps.early_exit import map_func, reduce_func


def test_map_emits_filename_once():
    assert map_func("pg-tom_sawyer.txt", "lots of words") == [
        KeyValue("pg-tom_sawyer.txt", "1")
    ]


def test_reduce_counts_without_sleeping():
    with mock.patch("time.sleep") as sleep_mock:
        assert reduce_func("pg-grimm.txt", ["1", "1"]) == "2"
    assert sleep_mock.call_count == 0


def test_reduce_sleeps_for_slow_keys():
    with mock.patch("time.sleep") as sleep_mock:
        assert reduce_func("pg-sherlock_holmes.txt", ["1"]) == "1"
    assert sleep_mock.call_args == mock.call(3)