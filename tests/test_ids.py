"""Tests for ID generation."""

import time

import pytest

from context_server.ids import SUFFIX_LENGTH, generate_id, to_base36, uuid_id


class TestBase36:
    def test_zero(self):
        assert to_base36(0) == "0"

    def test_single_digit(self):
        assert to_base36(35) == "z"

    def test_carry(self):
        assert to_base36(36) == "10"

    def test_large(self):
        assert int(to_base36(1_700_000_000_000), 36) == 1_700_000_000_000

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            to_base36(-1)


class TestGenerateId:
    def test_ten_thousand_distinct(self):
        ids = {generate_id() for _ in range(10_000)}
        assert len(ids) == 10_000

    def test_lowercase_base36(self):
        id = generate_id()
        assert id == id.lower()
        assert id.isalnum()

    def test_time_prefix(self):
        before = time.time_ns() // 1_000_000
        id = generate_id()
        after = time.time_ns() // 1_000_000
        millis = int(id[:-SUFFIX_LENGTH], 36)
        assert before <= millis <= after

    def test_suffix_zero_padded(self, monkeypatch):
        monkeypatch.setattr("context_server.ids.time.time_ns", lambda: 36_000_000)
        monkeypatch.setattr("context_server.ids.secrets.randbelow", lambda n: 35)
        assert generate_id() == "10" + "00000000z"

    def test_roughly_time_ordered(self):
        first = generate_id()
        time.sleep(0.005)
        second = generate_id()
        assert first[:-SUFFIX_LENGTH] < second[:-SUFFIX_LENGTH]


def test_uuid_id_is_128_bit_hex():
    id = uuid_id()
    assert len(id) == 32
    int(id, 16)
