"""Tests for the status and error code catalogs."""

import pytest

from vesal import (
    ERRORS,
    LEGACY_ERRORS,
    LEGACY_MESSAGE_STATUSES,
    MESSAGE_STATUSES,
    Language,
    get_legacy_message_status_text,
    get_legacy_status_text,
    get_message_status_text,
    get_status_text,
    success_text,
)


class TestGetStatusText:
    def test_zero_is_success(self):
        assert get_status_text(0) == "success"
        assert get_status_text(0, Language.EN) == "success"

    def test_known_code_persian(self):
        assert get_status_text(14) == "مانده اعتبار ریالی مورد نیاز برای ارسال پیامک کافی نیست"

    def test_known_code_english(self):
        assert get_status_text(14, Language.EN) == "Insufficient credit to send the message"

    def test_language_accepts_plain_string(self):
        assert get_status_text(1, "en") == "Invalid recipient number"  # type: ignore[arg-type]

    def test_unknown_code_is_empty(self):
        assert get_status_text(999) == ""
        assert get_status_text(-104) == ""

    def test_lookup_is_idempotent(self):
        assert get_status_text(18) == get_status_text(18)
        assert get_status_text(12345) == get_status_text(12345) == ""


class TestLegacyStatusText:
    def test_insufficient_credit(self):
        assert get_legacy_status_text(-104) == "اعتبار کم است"
        assert get_legacy_status_text(-104, Language.EN) == "Insufficient credit"

    def test_zero_is_success(self):
        assert get_legacy_status_text(0) == "success"

    def test_positive_v2_codes_are_unknown(self):
        assert get_legacy_status_text(14) == ""


class TestMessageStatusText:
    def test_v2_delivered(self):
        assert get_message_status_text(1) == "رسیده به گوشی"
        assert get_message_status_text(1, Language.EN) == "Delivered to handset"

    def test_v2_missing_id(self):
        assert "24" in get_message_status_text(-1, Language.EN)

    def test_v2_zero_is_a_state_not_success(self):
        assert get_message_status_text(0, Language.EN) == "No status received yet"

    def test_legacy_states(self):
        assert get_legacy_message_status_text(500, Language.EN) == "Rejected"
        assert get_legacy_message_status_text(0, Language.EN) == "Sent to operator"

    def test_unknown_state_is_empty(self):
        assert get_message_status_text(77) == ""
        assert get_legacy_message_status_text(77) == ""


class TestStatusCatalog:
    @pytest.mark.parametrize("catalog", [ERRORS, MESSAGE_STATUSES, LEGACY_ERRORS, LEGACY_MESSAGE_STATUSES])
    def test_every_entry_is_bilingual(self, catalog):
        for code in catalog.entries:
            assert catalog.get(code, Language.FA)
            assert catalog.get(code, Language.EN)

    def test_membership(self):
        assert 14 in ERRORS
        assert -104 in LEGACY_ERRORS
        assert -104 not in ERRORS

    def test_get_unknown_returns_none(self):
        assert ERRORS.get(999) is None

    def test_entries_are_read_only(self):
        with pytest.raises(TypeError):
            ERRORS.entries[999] = ("x", "y")  # type: ignore[index]

    def test_legacy_error_codes_are_negative(self):
        assert all(code < 0 for code in LEGACY_ERRORS.entries)


class TestSuccessText:
    def test_persian(self):
        assert success_text() == "پیام با موفقیت رسید"

    def test_english(self):
        assert success_text(Language.EN) == "Message sent successfully"
