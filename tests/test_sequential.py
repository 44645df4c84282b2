import pytest

from kvlab.mr.sequential import load_app, main, run_sequential
from kvlab.mr.worker import KeyValue
from kvlab.mrapps import indexer, wc


def test_load_app_accepts_names_and_paths():
    assert load_app("wc") == (wc.map_func, wc.reduce_func)
    assert load_app("../mrapps/indexer.so") == (indexer.map_func, indexer.reduce_func)


def test_load_app_rejects_unknown_name():
    with pytest.raises(ValueError):
        load_app("nosuchapp.so")


def test_word_count_output(tmp_path):
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("x x y")
    second.write_text("x")
    out = tmp_path / "out"
    run_sequential(wc.map_func, wc.reduce_func, [first, second], out)
    lines = out.read_text().splitlines()
    assert lines == ["x 3", "y 1"]


def test_output_keys_sorted_and_distinct(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("pear apple fig apple banana pear fig fig")
    out = tmp_path / "out"
    run_sequential(wc.map_func, wc.reduce_func, [source], out)
    keys = [line.split(" ")[0] for line in out.read_text().splitlines()]
    assert keys == sorted(set(keys))
    total = sum(int(line.split(" ")[1]) for line in out.read_text().splitlines())
    assert total == len(source.read_text().split())


def test_reduce_receives_values_grouped_by_key(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("unused")

    def mapper(filename, contents):
        return [KeyValue("b", "1"), KeyValue("a", "2"), KeyValue("b", "3")]

    out = tmp_path / "out"
    run_sequential(mapper, lambda key, values: "+".join(values), [source], out)
    assert out.read_text() == "a 2\nb 1+3\n"


def test_missing_input_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        run_sequential(wc.map_func, wc.reduce_func, [tmp_path / "absent"], tmp_path / "out")


def test_main_usage_error():
    assert main(["wc.so"]) == 1


def test_main_writes_default_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_text("hi there hi")
    assert main(["wc.so", "in.txt"]) == 0
    assert (tmp_path / "mr-out-0").read_text().splitlines() == ["hi 2", "there 1"]


def test_main_unknown_app(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_text("hi")
    assert main(["bogus.so", "in.txt"]) == 1
    assert not (tmp_path / "mr-out-0").exists()