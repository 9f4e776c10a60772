"""Tests for crumb.http.headers — incoming Headers and outgoing MutableHeaders."""

import pytest

from crumb.http.headers import Headers, MutableHeaders


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_getitem(self) -> None:
        h = _h(("Cookie", "a=1"))
        assert h["Cookie"] == "a=1"

    def test_case_insensitive(self) -> None:
        h = _h(("Cookie", "a=1"))
        assert h["cookie"] == "a=1"
        assert h["COOKIE"] == "a=1"

    def test_missing_key_raises(self) -> None:
        h = _h(("Accept", "*/*"))
        with pytest.raises(KeyError):
            h["Cookie"]

    def test_contains(self) -> None:
        h = _h(("Cookie", "a=1"))
        assert "cookie" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        h = _h(("Accept", "*/*"))
        assert 42 not in h  # type: ignore[operator]

    def test_len_deduplicates(self) -> None:
        h = _h(("Cookie", "a=1"), ("Cookie", "b=2"))
        assert len(h) == 1

    def test_iter_yields_unique_lowercase_keys(self) -> None:
        h = _h(("Accept", "*/*"), ("Cookie", "a=1"), ("Accept", "text/xml"))
        assert list(h) == ["accept", "cookie"]

    def test_get_with_default(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get("accept") == "*/*"
        assert h.get("cookie") is None
        assert h.get("cookie", "") == ""

    def test_get_list(self) -> None:
        h = _h(("Cookie", "a=1"), ("Cookie", "b=2"))
        assert h.get_list("cookie") == ["a=1", "b=2"]
        assert h.get_list("x-missing") == []

    def test_from_pairs_dict(self) -> None:
        h = Headers.from_pairs({"Cookie": "a=1", "Accept": "*/*"})
        assert h["cookie"] == "a=1"
        assert h.raw == ((b"Cookie", b"a=1"), (b"Accept", b"*/*"))

    def test_from_pairs_tuples(self) -> None:
        h = Headers.from_pairs((("Cookie", "a=1"), ("Cookie", "b=2")))
        assert h.get_list("Cookie") == ["a=1", "b=2"]

    def test_repr(self) -> None:
        assert "cookie" in repr(_h(("Cookie", "a=1")))


class TestMutableHeaders:
    def test_append_keeps_duplicates(self) -> None:
        h = MutableHeaders()
        h.append("Set-Cookie", "a=1;")
        h.append("Set-Cookie", "b=2;")
        assert h.get_list("set-cookie") == ["a=1;", "b=2;"]

    def test_set_replaces_all_entries(self) -> None:
        h = MutableHeaders()
        h.append("X-Thing", "1")
        h.append("x-thing", "2")
        h.set("X-Thing", "3")
        assert h.get_list("x-thing") == ["3"]

    def test_get_first_value(self) -> None:
        h = MutableHeaders((("A", "1"), ("a", "2")))
        assert h.get("A") == "1"
        assert h.get("missing") is None
        assert h.get("missing", "x") == "x"

    def test_contains_and_len(self) -> None:
        h = MutableHeaders((("A", "1"), ("a", "2"), ("B", "3")))
        assert "a" in h
        assert "b" in h
        assert "c" not in h
        assert 1 not in h  # type: ignore[operator]
        assert len(h) == 2
        assert list(h) == ["a", "b"]

    def test_items_in_order(self) -> None:
        h = MutableHeaders()
        h.append("Set-Cookie", "a=1;")
        h.append("Vary", "Cookie")
        assert h.items() == [("Set-Cookie", "a=1;"), ("Vary", "Cookie")]

    def test_raw_lowercases_names(self) -> None:
        h = MutableHeaders()
        h.append("Set-Cookie", "a=1;")
        assert h.raw == [(b"set-cookie", b"a=1;")]

    def test_repr(self) -> None:
        h = MutableHeaders((("A", "1"),))
        assert repr(h) == "MutableHeaders([('A', '1')])"
