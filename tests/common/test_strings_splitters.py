from dlnaprofile.common.strings.splitters import csv_to_list, extension_set, normalize_extension


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_list_input():
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]


def test_csv_to_list_string_input():
    assert csv_to_list(" a, b ,c ,, d ") == ["a", "b", "c", "d"]


def test_normalize_extension():
    assert normalize_extension(".MPG") == "mpg"
    assert normalize_extension("ts") == "ts"
    assert normalize_extension("  .M2T ") == "m2t"
    assert normalize_extension(".") is None
    assert normalize_extension("") is None
    assert normalize_extension(None) is None


def test_extension_set_normalizes_and_dedupes():
    assert extension_set("aac, .ADTS,m4a,,aac") == frozenset({"aac", "adts", "m4a"})
    assert extension_set(None) == frozenset()
