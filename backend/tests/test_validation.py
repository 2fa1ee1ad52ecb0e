"""
Noteful Backend — Input Validation Unit Tests
==============================================

What we test:
    ✅ Canonical ids parse; malformed, non-canonical and non-string ids raise
       InvalidIdentifierError
    ✅ Empty folder references mean "no folder"
    ✅ Tag id lists report the array-specific message
    ✅ Required text fields reject None and ""
"""

from uuid import UUID, uuid4

import pytest

from noteful.exceptions import InvalidIdentifierError, ValidationError
from noteful.services.validation import (
    parse_id,
    parse_id_list,
    parse_optional_id,
    require_text,
)


class TestParseId:

    def test_valid_uuid_string(self):
        value = uuid4()
        assert parse_id(str(value)) == value

    def test_uuid_instance_passes_through(self):
        value = uuid4()
        assert parse_id(value) is value

    @pytest.mark.parametrize("value", ["99", "", "not-an-id", "111111111111111111111104", None, 42])
    def test_malformed_values_rejected(self, value):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_id(value)
        assert exc_info.value.message == "The `id` is not valid"

    @pytest.mark.parametrize("form", ["hex", "braces", "urn"])
    def test_non_canonical_forms_rejected(self, form):
        value = uuid4()
        text = {"hex": value.hex, "braces": f"{{{value}}}", "urn": value.urn}[form]
        with pytest.raises(InvalidIdentifierError):
            parse_id(text)

    def test_uppercase_canonical_form_accepted(self):
        value = uuid4()
        assert parse_id(str(value).upper()) == value

    @pytest.mark.parametrize("value", [99, 1.5, True, ["x"], {"id": "x"}])
    def test_non_string_values_rejected(self, value):
        with pytest.raises(InvalidIdentifierError):
            parse_id(value)

    def test_field_name_in_message(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_id("99", field="folderId")
        assert exc_info.value.message == "The `folderId` is not valid"
        assert exc_info.value.field == "folderId"


class TestParseOptionalId:

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_reference(self, value):
        assert parse_optional_id(value, "folderId") is None

    def test_present_reference(self):
        value = uuid4()
        assert parse_optional_id(str(value), "folderId") == value

    def test_malformed_reference(self):
        with pytest.raises(InvalidIdentifierError, match="folderId"):
            parse_optional_id("99", "folderId")

    def test_numeric_reference(self):
        with pytest.raises(InvalidIdentifierError, match="folderId"):
            parse_optional_id(99, "folderId")


class TestParseIdList:

    def test_empty_and_none(self):
        assert parse_id_list(None) == []
        assert parse_id_list([]) == []

    def test_all_valid(self):
        ids = [uuid4(), uuid4()]
        result = parse_id_list([str(i) for i in ids])
        assert result == ids
        assert all(isinstance(i, UUID) for i in result)

    def test_one_bad_entry_fails_the_list(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_id_list([str(uuid4()), "99"])
        assert exc_info.value.message == "The `tags` array contains an invalid `id`"

    def test_numeric_entry_fails_the_list(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            parse_id_list([str(uuid4()), 123])
        assert exc_info.value.message == "The `tags` array contains an invalid `id`"


class TestRequireText:

    def test_returns_value(self):
        assert require_text("School", "name") == "School"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require_text(value, "title")
        assert exc_info.value.message == "Missing `title` in request body"
        assert exc_info.value.field == "title"
