"""Unit tests for keyservice/core/key_generator.py."""

import re

import pytest

from keyservice.core.key_generator import (
    SECRET_ALPHABET,
    SECRET_LENGTH,
    build_prefix,
    generate_id,
    generate_key,
    generate_secret,
)


@pytest.mark.unit
class TestGenerateSecret:
    def test_alphabet_has_62_characters(self):
        assert len(SECRET_ALPHABET) == 62
        assert len(set(SECRET_ALPHABET)) == 62

    def test_default_length_is_32(self):
        assert len(generate_secret()) == SECRET_LENGTH == 32

    def test_every_character_is_alphanumeric(self):
        for _ in range(50):
            assert all(c in SECRET_ALPHABET for c in generate_secret())

    def test_each_call_produces_a_new_secret(self):
        secrets = {generate_secret() for _ in range(20)}
        assert len(secrets) == 20

    def test_custom_length(self):
        assert len(generate_secret(8)) == 8


@pytest.mark.unit
class TestGenerateId:
    def test_id_has_key_prefix_and_uuid_segment(self):
        key_id = generate_id()
        assert re.fullmatch(r"key_[0-9a-f]{8}", key_id)

    def test_ids_differ(self):
        assert len({generate_id() for _ in range(20)}) == 20


@pytest.mark.unit
class TestPrefixAndKey:
    @pytest.mark.parametrize("environment", ["live", "test", "ci", "staging"])
    def test_prefix_format(self, environment):
        assert build_prefix(environment) == f"br_{environment}_"

    def test_key_starts_with_prefix_and_has_secret_tail(self):
        key = generate_key("br_test_")
        assert key.startswith("br_test_")
        assert len(key) == len("br_test_") + 32
        assert all(c in SECRET_ALPHABET for c in key[len("br_test_"):])
