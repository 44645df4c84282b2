import os
from unittest import mock

from kvlab.mrapps.rtiming import map_func, nparallel, reduce_func


def test_map_emits_ten_distinct_keys():
    result = map_func("in.txt", "ignored")
    keys = [kv.key for kv in result]
    assert keys == list("abcdefghij")
    assert {kv.value for kv in result} == {"1"}


def test_nparallel_only_counts_its_phase(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / f"mr-worker-map-{os.getppid()}").write_text("x")
    with mock.patch("time.sleep"):
        assert nparallel("reduce") == 1