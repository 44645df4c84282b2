from unittest import mock

from kvlab.mrapps import crash, nocrash


def test_map_keys_and_constant():
    result = nocrash.map_func("in.txt", "hello")
    assert [kv.key for kv in result] == ["a", "b", "c", "d"]
    assert result[0].value == "in.txt"
    assert result[3].value == "xyzzy"


def test_map_lengths_match_inputs():
    result = nocrash.map_func("name", "contents!")
    assert int(result[1].value) == len("name")
    assert int(result[2].value) == len("contents!")


@mock.patch("secrets.randbelow", return_value=999)
def test_same_output_as_crash_app(_randbelow):
    assert nocrash.map_func("f.txt", "data") == crash.map_func("f.txt", "data")
    assert nocrash.reduce_func("k", ["b", "a"]) == crash.reduce_func("k", ["b", "a"])


def test_reduce_does_not_modify_input():
    values = ["c", "a", "b"]
    assert nocrash.reduce_func("k", values) == "a b c"
    assert values == ["c", "a", "b"]