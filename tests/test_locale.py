"""Tests for locale header serialization."""

from stripe_sdk.models.enums import SupportLocale


class TestShortString:
    def test_brazilian_portuguese(self):
        assert SupportLocale.PT_BR.to_short_string() == "pt-br"

    def test_plain_tags(self):
        assert SupportLocale.PT.to_short_string() == "pt"
        assert SupportLocale.ZH.to_short_string() == "zh"
        assert SupportLocale.AUTO.to_short_string() == "auto"

    def test_all_lowercase(self):
        for locale in SupportLocale:
            assert locale.to_short_string() == locale.to_short_string().lower()
