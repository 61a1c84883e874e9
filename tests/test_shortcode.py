"""Tests for short code generation."""

import random

import pytest
from shortit.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_random_default_length(self):
        generator = ShortCodeGenerator()

        code = generator.generate_random()
        assert len(code) == 8
        assert generator.is_valid_format(code)

    def test_generate_random_custom_length(self):
        generator = ShortCodeGenerator(default_length=8)

        code = generator.generate_random(length=12)
        assert len(code) == 12
        assert generator.is_valid_format(code)

    def test_codes_use_only_url_safe_characters(self):
        generator = ShortCodeGenerator(rng=random.Random(1234))

        codes = [generator.generate_random() for _ in range(500)]
        seen = set("".join(codes))

        assert seen <= set(ShortCodeGenerator.URL_SAFE_CHARS)
        # 4000 draws from 64 symbols covers well beyond the digits alone
        assert len(seen) > 50

    def test_seeded_rng_is_reproducible(self):
        first = ShortCodeGenerator(rng=random.Random(7)).generate_random()
        second = ShortCodeGenerator(rng=random.Random(7)).generate_random()

        assert first == second

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValueError):
            ShortCodeGenerator(default_length=0)

    def test_is_valid_format(self):
        assert ShortCodeGenerator.is_valid_format("abc12345")
        assert ShortCodeGenerator.is_valid_format("ABC_1-23")

        assert not ShortCodeGenerator.is_valid_format("")
        assert not ShortCodeGenerator.is_valid_format("abc 123")
        assert not ShortCodeGenerator.is_valid_format("abc@123")
        assert not ShortCodeGenerator.is_valid_format("abc#123")
