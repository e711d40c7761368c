import random

import pytest

from strbuilder import BuilderConfig, PadSide, ReplaceResult, StringBuilder


# ---------------------------------------------------------------------------
# append / prepend / case
# ---------------------------------------------------------------------------

def test_append():
    assert StringBuilder("test.").append("append.").to_string() == "test.append."


def test_append_coerces_value():
    assert StringBuilder("test.").append(5).to_string() == "test.5"


def test_prepend():
    assert StringBuilder("test.").prepend("prepend.").to_string() == "prepend.test."


def test_downcase():
    assert StringBuilder("TeST").downcase().to_string() == "test"


def test_upcase():
    assert StringBuilder("tesT").upcase().to_string() == "TEST"


def test_case_mapping_is_unicode_aware():
    assert StringBuilder("straße").upcase().to_string() == "STRASSE"
    assert StringBuilder("ÄÖÜ Ωμέγα").downcase().to_string() == "äöü ωμέγα"


@pytest.mark.parametrize("text, uc, lc", [
    ("abc", "Abc", "abc"),
    ("ABC", "ABC", "aBC"),
    ("élan", "Élan", "élan"),
    ("", "", ""),
    ("1abc", "1abc", "1abc"),
])
def test_uc_first_lc_first(text, uc, lc):
    b = StringBuilder(text)
    assert b.uc_first().to_string() == uc
    assert b.lc_first().to_string() == lc


def test_reverse():
    assert StringBuilder("abcd").reverse().to_string() == "dcba"
    assert StringBuilder("日本語").reverse().to_string() == "語本日"


# ---------------------------------------------------------------------------
# trim family
# ---------------------------------------------------------------------------

def test_trim():
    assert StringBuilder("  \t\nTest\t\n  ").trim().to_string() == "Test"


def test_ltrim():
    assert StringBuilder("   \t\nTest\t\n  ").ltrim().to_string() == "Test\t\n  "


def test_rtrim():
    assert StringBuilder("  \t\nTest\t\n  ").rtrim().to_string() == "  \t\nTest"


def test_trim_default_mask_covers_nul_and_vertical_tab():
    assert StringBuilder("\0\x0B\r x \r\x0B\0").trim().to_string() == "x"


def test_trim_keeps_other_whitespace():
    # \f and the no-break space are not in the default mask
    assert StringBuilder("\f x\u00a0").trim().to_string() == "\f x\u00a0"


@pytest.mark.parametrize("text, mask, both, left, right", [
    ("xxhixx", "x", "hi", "hixx", "xxhi"),
    ("abcHELLOxyz", "a..z", "HELLO", "HELLOxyz", "abcHELLO"),
    ("0123abc3210", "0..9", "abc", "abc3210", "0123abc"),
    ("..a..b", "a..", "b", "b", "..a..b"),
    ("  keep  ", "", "  keep  ", "  keep  ", "  keep  "),
])
def test_trim_with_mask(text, mask, both, left, right):
    b = StringBuilder(text)
    assert b.trim(mask).to_string() == both
    assert b.ltrim(mask).to_string() == left
    assert b.rtrim(mask).to_string() == right


# ---------------------------------------------------------------------------
# sub_str
# ---------------------------------------------------------------------------

def test_sub_str():
    assert StringBuilder("abcdefg").sub_str(4).to_string() == "efg"


@pytest.mark.parametrize("start, length, expected", [
    (-3, None, "efg"),
    (1, 3, "bcd"),
    (1, -2, "bcde"),
    (0, 100, "abcdefg"),
    (7, None, ""),
    (10, None, ""),
    (-10, None, "abcdefg"),
    (-10, 2, "ab"),
    (2, 0, ""),
    (5, -4, ""),
    (-2, -1, "f"),
])
def test_sub_str_ranges(start, length, expected):
    assert StringBuilder("abcdefg").sub_str(start, length).to_string() == expected


def test_sub_str_counts_code_points():
    assert StringBuilder("日本語テキスト").sub_str(3, 2).to_string() == "テキ"
    assert StringBuilder("日本語テキスト").subStr(-3).to_string() == "キスト"


# ---------------------------------------------------------------------------
# padding
# ---------------------------------------------------------------------------

def test_pad():
    assert StringBuilder("pad").pad(10, "-").to_string() == "pad-------"


@pytest.mark.parametrize("side, expected", [
    (PadSide.BOTH, "---pad----"),
    (PadSide.LEFT, "-------pad"),
    (PadSide.RIGHT, "pad-------"),
    ("both", "---pad----"),
    ("LEFT", "-------pad"),
])
def test_pad_with_side(side, expected):
    assert StringBuilder("pad").pad(10, "-", side).to_string() == expected


def test_left_pad():
    assert StringBuilder("pad").left_pad(10, "-").to_string() == "-------pad"
    assert StringBuilder("pad").leftPad(10, "-").to_string() == "-------pad"


def test_right_pad():
    assert StringBuilder("pad").right_pad(10, "-").to_string() == "pad-------"
    assert StringBuilder("pad").rightPad(10, "-").to_string() == "pad-------"


@pytest.mark.parametrize("length, string, side, expected", [
    (8, "-", PadSide.BOTH, "--pad---"),
    (10, "ab", PadSide.RIGHT, "padabababa"),
    (10, "ab", PadSide.LEFT, "abababapad"),
    (10, "ab", PadSide.BOTH, "abapadabab"),
    (2, "-", PadSide.RIGHT, "pad"),
    (3, "-", PadSide.LEFT, "pad"),
    (-1, "-", PadSide.BOTH, "pad"),
    (5, None, PadSide.RIGHT, "pad  "),
    (5, "", PadSide.LEFT, "  pad"),
])
def test_pad_cases(length, string, side, expected):
    assert StringBuilder("pad").pad(length, string, side).to_string() == expected


def test_pad_default_side_is_right():
    assert StringBuilder("ab").pad(4, "*").to_string() == "ab**"


def test_pad_unknown_side():
    with pytest.raises(ValueError):
        StringBuilder("pad").pad(10, "-", "up")


# ---------------------------------------------------------------------------
# replace / ireplace
# ---------------------------------------------------------------------------

def test_replace():
    assert StringBuilder("PHP,Ruby,Python").replace(",", "/").to_string() == "PHP/Ruby/Python"


def test_ireplace():
    assert StringBuilder("PHP,Ruby,Python").ireplace("p", "p").to_string() == "pHp,Ruby,python"


def test_replace_is_case_sensitive():
    assert StringBuilder("PHP,Ruby,Python").replace("p", "x").to_string() == "PHP,Ruby,Python"


def test_replace_counted():
    res = StringBuilder("PHP,Ruby,Python").replace_counted(",", "/")
    assert isinstance(res, ReplaceResult)
    assert res.count == 2
    assert res.text == "PHP/Ruby/Python"
    assert res.builder.to_string() == "PHP/Ruby/Python"


def test_ireplace_counted():
    res = StringBuilder("PHP,Ruby,Python").ireplace_counted("p", "P")
    assert res.count == 3
    assert res.text == "PHP,Ruby,Python"


def test_replace_counted_no_match():
    res = StringBuilder("abc").replace_counted("z", "y")
    assert res.count == 0
    assert res.text == "abc"


@pytest.mark.parametrize("search, replace, expected, count", [
    (["a", "b"], ["1", "2"], "1122c", 4),
    (["a", "b"], ["1"], "11c", 4),
    (["a", "b"], "-", "----c", 4),
    ("", "x", "aabbc", 0),
    (["", "c"], ["x", "y"], "aabby", 1),
])
def test_replace_lists(search, replace, expected, count):
    res = StringBuilder("aabbc").replace_counted(search, replace)
    assert res.text == expected
    assert res.count == count


def test_replace_lists_apply_in_order():
    assert StringBuilder("ab").replace(["a", "b"], ["b", "c"]).to_string() == "cc"


def test_replace_generator_search_with_list_replace():
    res = StringBuilder("aabbc").replace_counted((s for s in ["a", "b"]), ["1", "2"])
    assert res.text == "1122c"
    assert res.count == 4


def test_replace_list_replacement_needs_list_search():
    with pytest.raises(TypeError):
        StringBuilder("abc").replace("a", ["x"])


def test_ireplace_replacement_is_literal():
    assert StringBuilder("Abc").ireplace("a", r"\1").to_string() == "\\1bc"
    assert StringBuilder("a.c").ireplace(".", "+").to_string() == "a+c"


def test_ireplace_unicode():
    assert StringBuilder("ÄBC").ireplace("ä", "x").to_string() == "xBC"


# ---------------------------------------------------------------------------
# limit
# ---------------------------------------------------------------------------

def test_limit():
    assert StringBuilder("abcdefghijklmnopqrstuvwxyz").limit(10).to_string() == "abcdefghij..."


def test_limit_on_short():
    assert StringBuilder("abc").limit(10).to_string() == "abc"


def test_limit_with_end():
    assert StringBuilder("abcdefghijklmnopqrstuvwxyz").limit(10, ",,,").to_string() == "abcdefghij,,,"


def test_limit_returns_self_when_short_enough():
    b = StringBuilder("abc")
    assert b.limit(10) is b
    assert b.limit(3) is b


def test_limit_default_is_100():
    short = StringBuilder("x" * 100)
    assert short.limit() is short
    assert StringBuilder("x" * 101).limit().to_string() == "x" * 100 + "..."


def test_limit_trims_trailing_whitespace_of_body():
    assert StringBuilder("abcde     fghij").limit(8).to_string() == "abcde..."


def test_limit_trims_default_whitespace_under_custom_mask():
    Builder = StringBuilder.with_config(BuilderConfig(character_mask="x"))
    assert Builder("abcde     fghij").limit(8).to_string() == "abcde..."
    # configured mask characters stay in the cut body
    assert Builder("abcxxxxxxxxx").limit(8).to_string() == "abcxxxxx..."


def test_limit_keeps_whitespace_inside_end():
    assert StringBuilder("abcdefghij").limit(3, " ... ").to_string() == "abc ... "


def test_limit_uses_display_width():
    b = StringBuilder("日本語テキスト")
    # every character is two columns wide
    assert b.limit(5).to_string() == "日本..."
    assert b.limit(14) is b
    assert b.limit(13).to_string() == "日本語テキス..."


# ---------------------------------------------------------------------------
# shuffle
# ---------------------------------------------------------------------------

def test_shuffle(rng):
    b = StringBuilder("abc")
    out = b.shuffle(rng).to_string()
    assert len(out) == 3
    assert sorted(out) == ["a", "b", "c"]
    assert b.to_string() == "abc"


def test_shuffle_is_reproducible_with_seed():
    b = StringBuilder("the quick brown fox")
    first = b.shuffle(random.Random(7)).to_string()
    second = b.shuffle(random.Random(7)).to_string()
    assert first == second


def test_shuffle_without_rng_is_permutation():
    out = StringBuilder("日本語abc").shuffle().to_string()
    assert sorted(out) == sorted("日本語abc")


def test_shuffle_empty():
    assert StringBuilder("").shuffle().to_string() == ""


# ---------------------------------------------------------------------------
# chaining
# ---------------------------------------------------------------------------

def test_chain():
    out = (
        StringBuilder.make("  <b>Hello</b>, world  ")
        .strip_tags()
        .trim()
        .replace("world", "there")
        .upcase()
        .append("!")
        .to_string()
    )
    assert out == "HELLO, THERE!"
