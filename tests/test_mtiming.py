import os
import time
from unittest import mock

from kvlab.mrapps.mtiming import map_func, nparallel, reduce_func


def test_nparallel_counts_itself_and_removes_marker(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("time.sleep") as sleep_mock:
        assert nparallel("map") == 1
    assert sleep_mock.call_args == mock.call(1)
    assert os.listdir(tmp_path) == []


def test_map_reports_time_and_parallelism(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    pid = os.getpid()
    before = time.time()
    with mock.patch("time.sleep"):
        result = map_func("in.txt", "data")
    assert [kv.key for kv in result] == [f"times-{pid}", f"parallel-{pid}"]
    assert abs(float(result[0].value) - before) < 1.0
    assert result[1].value == "1"


def test_reduce_sorts_and_joins():
    assert reduce_func("k", ["3", "1", "2"]) == "1 2 3"