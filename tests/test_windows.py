import pytest

from genolab.utils import chunks, windows


class TestWindows:

    def test_basic_windows(self):
        assert list(windows("ABCD", 2)) == ["AB", "BC", "CD"]

    def test_window_of_full_length(self):
        assert list(windows("ABCD", 4)) == ["ABCD"]

    def test_sequence_shorter_than_window(self):
        assert list(windows("AB", 3)) == []

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            list(windows("ABCD", 0))


class TestChunks:

    def test_basic_chunks(self):
        assert list(chunks("ATGATGATG", 3)) == ["ATG", "ATG", "ATG"]

    def test_short_last_chunk(self):
        assert list(chunks("ATGATGAT", 3)) == ["ATG", "ATG", "AT"]

    def test_empty(self):
        assert list(chunks("", 3)) == []

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            list(chunks("ATG", -1))
