import os
from unittest import mock

from kvlab.mr.worker import KeyValue
from kvlab.mrapps.jobcount import map_func, reduce_func


def test_each_map_leaves_a_marker(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("time.sleep") as sleep_mock:
        first = map_func("a.txt", "x")
        second = map_func("b.txt", "y")
    assert first == [KeyValue("a", "x")]
    assert second == first
    assert sleep_mock.call_count == 2
    delay = sleep_mock.call_args.args[0]
    assert 2.0 <= delay < 5.0
    markers = [n for n in os.listdir(tmp_path) if n.startswith("mr-worker-jobcount")]
    assert len(markers) == 2
    assert all(str(os.getpid()) in name for name in markers)
    assert reduce_func("a", ["x", "x"]) == "2"


def test_reduce_ignores_other_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "mr-out-0").write_text("a 1\n")
    (tmp_path / "mr-worker-jobcount-1-0").write_text("x")
    assert reduce_func("a", []) == "1"