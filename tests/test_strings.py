import pytest

from tokshell.ft.strings import (
    split,
    strchr,
    strcmp,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def _sign(value):
    return (value > 0) - (value < 0)


class TestStrlcpy:
    def test_fits(self):
        assert strlcpy("hello", 10) == ("hello", 5)

    def test_truncates_to_size_minus_one(self):
        text, total = strlcpy("hello", 3)
        assert text == "he"
        assert total == len("hello")

    def test_zero_size(self):
        assert strlcpy("hello", 0) == ("", 5)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            strlcpy("hello", -1)


class TestStrlcat:
    def test_fits(self):
        assert strlcat("foo", "bar", 10) == ("foobar", 6)

    def test_truncates(self):
        text, total = strlcat("foo", "bar", 5)
        assert text == "foob"
        assert total == len("foobar")

    def test_zero_size(self):
        assert strlcat("foo", "bar", 0) == ("foo", 3)

    def test_full_buffer(self):
        assert strlcat("foobar", "xy", 4) == ("foobar", 4 + len("xy"))

    def test_result_never_exceeds_buffer(self):
        for size in range(1, 12):
            text, _ = strlcat("abc", "defgh", size)
            assert len(text) <= max(size - 1, len("abc"))


class TestStrchr:
    def test_first_occurrence(self):
        assert strchr("hello", "l") == 2

    def test_missing(self):
        assert strchr("hello", "z") is None

    def test_nul_gives_end(self):
        assert strchr("hello", "\0") == len("hello")
        assert strchr("hello", 0) == len("hello")

    def test_int_wraps_at_256(self):
        assert strchr("hello", ord("e") + 256) == 1

    def test_bad_argument(self):
        with pytest.raises(ValueError):
            strchr("hello", "ll")


class TestStrrchr:
    def test_last_occurrence(self):
        assert strrchr("hello", "l") == 3

    def test_missing(self):
        assert strrchr("hello", "z") is None

    def test_nul_gives_end(self):
        assert strrchr("abc", 0) == len("abc")

    def test_agrees_with_rfind(self):
        text = "abracadabra"
        for ch in set(text):
            assert strrchr(text, ch) == text.rfind(ch)


class TestStrnstr:
    def test_found(self):
        assert strnstr("Foo Bar Baz", "Bar", 11) == 4

    def test_beyond_length(self):
        assert strnstr("Foo Bar Baz", "Bar", 6) is None

    def test_exact_length(self):
        assert strnstr("Foo Bar Baz", "Bar", 7) == 4

    def test_empty_needle(self):
        assert strnstr("abc", "", 0) == 0

    def test_missing(self):
        assert strnstr("abc", "x", 3) is None


class TestCompare:
    def test_equal(self):
        assert strcmp("abc", "abc") == 0

    def test_prefix_shorter(self):
        assert strcmp("ab", "abc") == -ord("c")
        assert strcmp("abc", "ab") == ord("c")

    def test_difference_of_codes(self):
        assert strcmp("abd", "abc") == ord("d") - ord("c")

    @pytest.mark.parametrize(
        "a, b", [("", ""), ("a", ""), ("apple", "apply"), ("zeta", "alpha"), ("x", "xy")]
    )
    def test_sign_matches_ordering(self, a, b):
        assert _sign(strcmp(a, b)) == (a > b) - (a < b)

    def test_strncmp_limit(self):
        assert strncmp("abcdef", "abcxyz", 3) == 0
        assert strncmp("abcdef", "abcxyz", 4) == ord("d") - ord("x")

    def test_strncmp_zero(self):
        assert strncmp("a", "b", 0) == 0

    def test_strncmp_past_end(self):
        assert strncmp("ab", "abc", 10) == -ord("c")
        assert strncmp("ab", "ab", 10) == 0


class TestSubstr:
    def test_middle(self):
        assert substr("hello world", 6, 5) == "world"

    def test_start_past_end(self):
        assert substr("hello", 10, 3) == ""

    def test_length_clipped(self):
        assert substr("hello", 3, 100) == "lo"

    def test_negative_start(self):
        with pytest.raises(ValueError):
            substr("hello", -1, 2)


class TestJoinTrimSplit:
    def test_join(self):
        assert strjoin("foo", "bar") == "foobar"

    def test_join_missing(self):
        with pytest.raises(TypeError):
            strjoin(None, "bar")

    def test_trim(self):
        assert strtrim("xxhelloxyx", "xy") == "hello"

    def test_trim_everything(self):
        assert strtrim("aaaa", "a") == ""

    def test_trim_empty_set(self):
        assert strtrim("  hi  ", "") == "  hi  "

    def test_split_drops_empty(self):
        assert split("  hello  world ", " ") == ["hello", "world"]

    def test_split_only_separators(self):
        assert split(",,,", ",") == []

    def test_split_round_trip(self):
        words = ["ls", "-la", "/tmp"]
        assert split(" ".join(words), " ") == words

    def test_split_bad_separator(self):
        with pytest.raises(ValueError):
            split("a b", "ab")


class TestMapping:
    def test_strmapi_uses_index(self):
        result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
        assert result == "AbCd"

    def test_strmapi_identity(self):
        assert strmapi("hello", lambda i, ch: ch) == "hello"

    def test_striteri_in_place(self):
        buf = list("abcd")
        striteri(buf, lambda i, ch: ch.upper() if i % 2 else None)
        assert buf == ["a", "B", "c", "D"]

    def test_striteri_visits_all_indices(self):
        seen = []
        buf = list("xyz")
        striteri(buf, lambda i, ch: seen.append((i, ch)))
        assert seen == [(0, "x"), (1, "y"), (2, "z")]
        assert buf == list("xyz")