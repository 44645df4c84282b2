from unittest import mock

from kvlab.mr.worker import KeyValue
from kvlab.mrapps.crash import map_func, maybe_crash, reduce_func

EXPECTED_MAP = [
    KeyValue("a", "in.txt"),
    KeyValue("b", "6"),
    KeyValue("c", "3"),
    KeyValue("d", "xyzzy"),
]


def test_low_roll_exits():
    with mock.patch("secrets.randbelow", side_effect=[100]), mock.patch(
        "os._exit"
    ) as exit_mock, mock.patch("time.sleep") as sleep_mock:
        result = map_func("in.txt", "abc")
    assert exit_mock.call_args == mock.call(1)
    assert sleep_mock.call_count == 0
    assert result == EXPECTED_MAP


def test_middle_roll_sleeps():
    with mock.patch("secrets.randbelow", side_effect=[500, 2500]), mock.patch(
        "os._exit"
    ) as exit_mock, mock.patch("time.sleep") as sleep_mock:
        result = reduce_func("k", ["y", "x"])
    assert exit_mock.call_count == 0
    assert sleep_mock.call_args == mock.call(2.5)
    assert result == "x y"


def test_high_roll_does_nothing():
    with mock.patch("secrets.randbelow", return_value=900), mock.patch(
        "os._exit"
    ) as exit_mock, mock.patch("time.sleep") as sleep_mock:
        assert maybe_crash() is None
        result = map_func("in.txt", "abc")
    assert exit_mock.call_count == 0
    assert sleep_mock.call_count == 0
    assert result == EXPECTED_MAP


@mock.patch("secrets.randbelow", return_value=999)
def test_map_output(_randbelow):
    assert map_func("in.txt", "abc") == EXPECTED_MAP


@mock.patch("secrets.randbelow", return_value=999)
def test_reduce_sorts_and_joins(_randbelow):
    assert reduce_func("a", ["pg-b", "pg-a"]) == "pg-a pg-b"