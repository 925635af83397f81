"""Tests for PersonName and MessageText."""
import dataclasses

import pytest

from onion_app.core.errors import ValidationError
from onion_app.features.greetings.domain.value_objects import MessageText, PersonName


class TestPersonName:
    """PersonName validation."""

    @pytest.mark.parametrize("raw", ["Ada", "  Ada  ", "x" * 100, "Jean-Luc Picard"])
    def test_valid_names_are_trimmed(self, raw):
        assert PersonName(raw).value == raw.strip()

    @pytest.mark.parametrize("raw", ["", " ", "\t\n", None])
    def test_empty_or_whitespace_rejected(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            PersonName(raw)
        assert excinfo.value.reason == "empty or whitespace"
        assert excinfo.value.field == "name"

    def test_too_long_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            PersonName("x" * 101)
        assert excinfo.value.reason == "exceeds maximum length"
        assert "100" in excinfo.value.message

    @pytest.mark.parametrize("raw", [" " + "a" * 100, "  " + "y" * 100 + "\t", "a" * 100 + "\n"])
    def test_padded_name_over_max_rejected(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            PersonName(raw)
        assert excinfo.value.reason == "exceeds maximum length"

    def test_padded_name_within_max_is_trimmed(self):
        assert PersonName(" " + "a" * 98 + " ").value == "a" * 98

    def test_non_string_rejected(self):
        with pytest.raises(TypeError):
            PersonName(42)

    def test_equality_is_by_value(self):
        assert PersonName("Ada") == PersonName(" Ada ")
        assert hash(PersonName("Ada")) == hash(PersonName("Ada"))
        assert PersonName("Ada") != PersonName("ada")

    def test_is_immutable(self):
        name = PersonName("Ada")
        with pytest.raises(dataclasses.FrozenInstanceError):
            name.value = "Grace"

    def test_str_returns_value(self):
        assert str(PersonName(" Ada ")) == "Ada"


class TestMessageText:
    """MessageText validation."""

    def test_valid_message_is_trimmed(self):
        assert MessageText("  Hi there  ").value == "Hi there"

    def test_max_length_accepted(self):
        assert len(MessageText("m" * 200).value) == 200

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_rejected(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            MessageText(raw)
        assert excinfo.value.reason == "empty or whitespace"

    def test_too_long_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            MessageText("m" * 201)
        assert excinfo.value.reason == "exceeds maximum length"

    def test_padded_message_over_max_rejected(self):
        with pytest.raises(ValidationError):
            MessageText("m" * 200 + " ")

    def test_default_for_name(self):
        assert MessageText.default_for(PersonName("Ada")).value == "Hello, Ada!"

    def test_default_for_longest_name_fits(self):
        message = MessageText.default_for(PersonName("n" * 100))
        assert len(message.value) == 108

    def test_not_equal_to_person_name(self):
        assert MessageText("Ada") != PersonName("Ada")
