"""
Unit Tests for parsing and draft serialization.
"""

import json

import pytest

from eval_toolkit.core.models import EvaluationDraft, QuestionDraft
from eval_toolkit.core.utils.serialization import (
    parse_document,
    draft_to_json,
    draft_from_dict,
    draft_from_json,
)


class TestParseDocument:
    """Tests for parse_document."""

    def test_parse_when_object_then_data(self, valid_json, valid_document):
        result = parse_document(valid_json)

        assert result.ok
        assert result.data == valid_document
        assert result.error is None

    def test_parse_when_syntax_error_then_decoder_message(self):
        result = parse_document("{ invalid")

        assert not result.ok
        assert result.data is None
        assert result.error.startswith("Invalid JSON: ")
        assert "line 1" in result.error

    def test_parse_when_empty_then_error(self):
        assert parse_document("").error.startswith("Invalid JSON: ")

    @pytest.mark.parametrize("text", ["[]", "[{}]", "42", '"quiz"', "null", "true"])
    def test_parse_when_top_level_not_object_then_error(self, text):
        result = parse_document(text)

        assert result.error == "The JSON document must be an object"

    def test_parse_when_nan_literal_then_error(self):
        result = parse_document('{"duration": NaN}')

        assert result.error == "Invalid JSON: NaN is not valid JSON"

    def test_parse_when_bytes_with_bom_then_decoded(self, valid_json, valid_document):
        raw = b"\xef\xbb\xbf" + valid_json.encode("utf-8")

        assert parse_document(raw).data == valid_document

    def test_parse_when_text_with_bom_then_decoded(self, valid_json, valid_document):
        assert parse_document("\ufeff" + valid_json).data == valid_document

    def test_parse_when_invalid_utf8_then_error(self):
        result = parse_document(b'{"title": "\xff"}')

        assert result.error.startswith("Invalid JSON: ")

    def test_parse_when_nesting_too_deep_then_error(self):
        result = parse_document("[" * 100000)

        assert not result.ok
        assert result.error.startswith("Invalid JSON: ")


class TestDraftSerialization:
    """Tests for draft JSON helpers."""

    @pytest.fixture
    def draft(self) -> EvaluationDraft:
        return EvaluationDraft(
            id="eval-1",
            title="Géométrie",
            subject="Math",
            date="2025-01-15",
            duration=60,
            total_points=4,
            professor_id="prof-1",
            class_ids=("c1",),
            status="draft",
            questions=(
                QuestionDraft(
                    id="q1",
                    number=1,
                    statement="Angle sum?",
                    model_answer="180",
                    points=4,
                    estimated_lines=5,
                ),
            ),
        )

    def test_draft_to_json_when_called_then_keeps_unicode(self, draft):
        text = draft_to_json(draft)

        assert "Géométrie" in text
        assert json.loads(text)["totalPoints"] == 4

    def test_draft_from_json_when_dumped_then_equal(self, draft):
        assert draft_from_json(draft_to_json(draft)) == draft

    def test_draft_from_dict_when_field_missing_then_key_error(self, draft):
        data = draft.to_dict()
        del data["status"]

        with pytest.raises(KeyError):
            draft_from_dict(data)
