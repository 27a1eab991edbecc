"""Tests for the CheckMacValue signer."""

import re
from decimal import Decimal

import pytest
from logistics.enums import LogisticsSubType
from logistics.errors import ChecksumMismatch, CredentialMissing
from logistics.security.checkmac import (
    CHECK_MAC_FIELD,
    CheckMacEncoder,
    canonical_query,
    dotnet_url_encode,
    render_value,
)

HASH_KEY = "5294y06JbISpM5x9"
HASH_IV = "v77hoKGq4kWxNNIS"

# Reference values computed with an independent encodeURIComponent-based
# signer and pinned here.
REFERENCE_FIELDS = {"MerchantID": "2000132", "MerchantTradeNo": "Test123456"}
REFERENCE_CHECK_MAC = "2C7A3CEDEEAE9A38D17F9303B5FACFFC"
EMPTY_CHECK_MAC = "6421D45A6BCF3206F6E02E27219F84C4"
PUNCTUATION_CHECK_MAC = "CFC538DDBD4622EF9384B6F0099877E1"
UNICODE_CHECK_MAC = "905F45C38800D0B3FBEC3476DBD429CD"


def _notification():
    return {
        "MerchantID": "2000132",
        "MerchantTradeNo": "123456",
        "RtnCode": "1",
        "RtnMsg": "OK",
    }


class TestConstruction:
    def test_requires_hash_key(self):
        with pytest.raises(CredentialMissing) as exc:
            CheckMacEncoder("", HASH_IV)
        assert exc.value.field == "HashKey"

    def test_requires_hash_iv(self):
        with pytest.raises(CredentialMissing) as exc:
            CheckMacEncoder(HASH_KEY, "")
        assert exc.value.field == "HashIV"

    def test_repr_hides_secrets(self, encoder):
        assert HASH_KEY not in repr(encoder)
        assert HASH_IV not in repr(encoder)


class TestGenerateCheckMacValue:
    def test_reference_fixture(self, encoder):
        assert encoder.generate_check_mac_value(REFERENCE_FIELDS) == REFERENCE_CHECK_MAC

    def test_empty_field_map(self, encoder):
        assert encoder.generate_check_mac_value({}) == EMPTY_CHECK_MAC

    def test_dotnet_punctuation_profile(self, encoder):
        assert encoder.generate_check_mac_value({"Test": "Test ( ) * ! - _ ."}) == PUNCTUATION_CHECK_MAC

    def test_unicode_and_reserved_characters(self, encoder):
        data = {
            "MerchantID": "2000132",
            "GoodsName": "測試商品",
            "GoodsAmount": 100,
            "ServerReplyURL": "https://example.com/callback?a=1&b=2",
        }
        assert encoder.generate_check_mac_value(data) == UNICODE_CHECK_MAC

    def test_format_is_32_uppercase_hex(self, encoder):
        value = encoder.generate_check_mac_value(_notification())
        assert re.fullmatch(r"[0-9A-F]{32}", value)

    def test_deterministic(self, encoder):
        data = _notification()
        assert encoder.generate_check_mac_value(data) == encoder.generate_check_mac_value(data)

    def test_independent_of_insertion_order(self, encoder):
        data = _notification()
        reversed_data = dict(reversed(list(data.items())))
        assert encoder.generate_check_mac_value(data) == encoder.generate_check_mac_value(reversed_data)

    def test_ignores_existing_check_mac_value(self, encoder):
        data = _notification()
        with_claim = {**data, CHECK_MAC_FIELD: "WHATEVER"}
        assert encoder.generate_check_mac_value(with_claim) == encoder.generate_check_mac_value(data)

    def test_value_case_matters_after_lowercasing_only_for_non_letters(self, encoder):
        # The encoded string is lowercased, so only non-letter changes alter the digest
        assert encoder.generate_check_mac_value({"A": "abc"}) == encoder.generate_check_mac_value({"A": "ABC"})
        assert encoder.generate_check_mac_value({"A": "abc"}) != encoder.generate_check_mac_value({"A": "abd"})

    def test_different_keys_give_different_values(self):
        first = CheckMacEncoder(HASH_KEY, HASH_IV).generate_check_mac_value(REFERENCE_FIELDS)
        second = CheckMacEncoder("anotherKey123456", HASH_IV).generate_check_mac_value(REFERENCE_FIELDS)
        assert first != second

    def test_integral_float_matches_int(self, encoder):
        assert encoder.generate_check_mac_value({"GoodsAmount": 100.0}) == encoder.generate_check_mac_value(
            {"GoodsAmount": 100}
        )


class TestCanonicalQuery:
    def test_sorts_case_insensitively_and_keeps_casing(self):
        data = {"b": "2", "C": "3", "a": "1"}
        assert canonical_query(data) == "a=1&b=2&C=3"

    def test_keys_differing_only_by_case_sort_deterministically(self):
        first = canonical_query({"ab": "1", "AB": "2", "Ac": "3"})
        second = canonical_query({"Ac": "3", "AB": "2", "ab": "1"})
        assert first == second == "AB=2&ab=1&Ac=3"

    def test_excludes_check_mac_value(self):
        assert canonical_query({"A": "1", CHECK_MAC_FIELD: "X"}) == "A=1"

    def test_values_with_separators_are_not_escaped_here(self):
        assert canonical_query({"A": "x&y=z"}) == "A=x&y=z"


class TestDotnetUrlEncode:
    def test_space_becomes_plus(self):
        assert dotnet_url_encode("a b") == "a+b"

    def test_lowercases_everything(self):
        assert dotnet_url_encode("A=B&C") == "a%3db%26c"

    def test_keeps_dotnet_literals(self):
        assert dotnet_url_encode("-_.!*()") == "-_.!*()"

    def test_utf8_escapes_lowercased(self):
        assert dotnet_url_encode("測") == "%e6%b8%ac"


class TestRenderValue:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ""),
            ("abc", "abc"),
            (0, "0"),
            (500, "500"),
            (1234567, "1234567"),
            (100.0, "100"),
            (12.5, "12.5"),
            (Decimal("100.50"), "100.50"),
            (True, "true"),
            (False, "false"),
            (LogisticsSubType.FAMI_C2C, "FAMIC2C"),
        ],
    )
    def test_render(self, value, expected):
        assert render_value(value) == expected


class TestEncodePayload:
    def test_adds_check_mac_value(self, encoder):
        payload = encoder.encode_payload(REFERENCE_FIELDS)
        assert payload[CHECK_MAC_FIELD] == REFERENCE_CHECK_MAC
        assert payload["MerchantTradeNo"] == "Test123456"

    def test_does_not_mutate_input(self, encoder):
        data = dict(REFERENCE_FIELDS)
        encoder.encode_payload(data)
        assert CHECK_MAC_FIELD not in data

    def test_replaces_stale_check_mac_value(self, encoder):
        payload = encoder.encode_payload({**REFERENCE_FIELDS, CHECK_MAC_FIELD: "STALE"})
        assert payload[CHECK_MAC_FIELD] == REFERENCE_CHECK_MAC


class TestVerify:
    def test_round_trip(self, encoder):
        assert encoder.verify_response(encoder.encode_payload(_notification())) is True

    def test_empty_map_round_trip(self, encoder):
        assert encoder.verify_response(encoder.encode_payload({})) is True

    def test_claim_compared_case_insensitively(self, encoder):
        data = _notification()
        data[CHECK_MAC_FIELD] = encoder.generate_check_mac_value(data).lower()
        assert encoder.verify_response(data) is True

    def test_incorrect_value(self, encoder):
        data = {**_notification(), CHECK_MAC_FIELD: "INVALID_CHECKSUM"}
        assert encoder.verify_response(data) is False

    def test_missing_claim(self, encoder):
        assert encoder.verify_response(_notification()) is False

    def test_non_ascii_claim_does_not_raise(self, encoder):
        data = {**_notification(), CHECK_MAC_FIELD: "檢查碼"}
        assert encoder.verify_response(data) is False

    @pytest.mark.parametrize("field", ["MerchantID", "MerchantTradeNo", "RtnCode", "RtnMsg"])
    def test_tampered_value_detected(self, encoder, field):
        signed = encoder.encode_payload(_notification())
        signed[field] = signed[field] + "9"
        assert encoder.verify_response(signed) is False

    def test_added_field_detected(self, encoder):
        signed = encoder.encode_payload(_notification())
        signed["GoodsAmount"] = "0"
        assert encoder.verify_response(signed) is False

    def test_verify_or_fail_returns_data(self, encoder):
        signed = encoder.encode_payload(_notification())
        assert encoder.verify_or_fail(signed) is signed

    def test_verify_or_fail_raises(self, encoder):
        with pytest.raises(ChecksumMismatch):
            encoder.verify_or_fail({"MerchantID": "2000132", CHECK_MAC_FIELD: "INVALID"})
