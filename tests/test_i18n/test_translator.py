"""
Translator Test Suite

Tests for locale resolution, fallbacks and placeholder substitution.

Usage:
    pytest tests/test_i18n/test_translator.py -v
"""

import logging
import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

from evm_send_confirm.i18n.strings import CATALOGS, STRINGS_DE, STRINGS_EN
from evm_send_confirm.i18n.translator import Translator


class TestTranslator:

    def test_english_default(self):
        assert Translator().get_string("Send_Confirmation_YouSend") == "You Send"

    @pytest.mark.parametrize("locale", ["de", "de-CH", "de_DE", "DE"])
    def test_language_part_is_matched(self, locale):
        translator = Translator(locale)
        assert translator.locale == "de"
        assert translator.get_string("NotAvailable") == "k. A."

    def test_unknown_locale_falls_back_to_english(self, caplog):
        with caplog.at_level(logging.WARNING):
            translator = Translator("fr")

        assert translator.locale == "en"
        assert "Unsupported locale" in caplog.text

    def test_placeholders(self):
        message = Translator().get_string("EthereumTransaction_Error_InsufficientBalance", "1 ETH")
        assert message == "Insufficient balance. Required: 1 ETH"

    def test_missing_key_falls_back_to_english(self):
        catalogs = {"en": {"Swap_Price": "Price"}, "de": {}}
        assert Translator("de", catalogs=catalogs).get_string("Swap_Price") == "Price"

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            Translator().get_string("No_Such_Key")


class TestCatalogs:

    def test_german_covers_every_english_key(self):
        assert set(STRINGS_DE) == set(STRINGS_EN)

    def test_placeholder_counts_match(self):
        for key, template in STRINGS_EN.items():
            assert template.count("{0}") == STRINGS_DE[key].count("{0}"), key

    def test_registered_catalogs(self):
        assert set(CATALOGS) == {"en", "de"}
