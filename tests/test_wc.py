from kvlab.mr.worker import KeyValue
from kvlab.mrapps.wc import map_func, reduce_func


def test_map_splits_on_non_letters():
    result = map_func("ignored.txt", "Hello, world! 42 hello")
    assert [kv.key for kv in result] == ["Hello", "world", "hello"]
    assert all(kv.value == "1" for kv in result)


def test_map_keeps_unicode_letters_together():
    result = map_func("f", "café naïve")
    assert result == [KeyValue("café", "1"), KeyValue("naïve", "1")]


def test_map_of_text_without_letters_is_empty():
    assert map_func("f", "123 -- 456\n") == []


def test_map_ignores_filename():
    assert map_func("a.txt", "one two") == map_func("b.txt", "one two")


def test_reduce_counts_values():
    assert reduce_func("word", ["1", "1", "1"]) == "3"
    assert reduce_func("word", []) == "0"