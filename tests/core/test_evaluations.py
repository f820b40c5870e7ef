"""
Unit Tests for EvaluationDraft, QuestionDraft and the default table.
"""

import dataclasses
from datetime import datetime

import pytest

from eval_toolkit.core.models import (
    DefaultContext,
    EvaluationDraft,
    FieldDefault,
    QuestionDraft,
    EVALUATION_DEFAULTS,
    QUESTION_DEFAULTS,
    WARNED_FIELDS,
)


def make_question(**overrides) -> QuestionDraft:
    fields = dict(
        id="q1",
        number=1,
        statement="2+2?",
        model_answer="4",
        points=10,
        estimated_lines=5,
    )
    fields.update(overrides)
    return QuestionDraft(**fields)


def make_draft(**overrides) -> EvaluationDraft:
    fields = dict(
        id="eval-1",
        title="Quiz",
        subject="Math",
        date="2025-01-15",
        duration=60,
        total_points=10,
        professor_id="prof-1",
        class_ids=("c1",),
        status="draft",
        questions=(make_question(),),
    )
    fields.update(overrides)
    return EvaluationDraft(**fields)


class TestQuestionDraft:
    """Tests for QuestionDraft construction."""

    def test_init_when_numeric_id_then_raises_error(self):
        with pytest.raises(ValueError, match="question id must be a string"):
            make_question(id=1)

    def test_init_when_zero_estimated_lines_then_raises_error(self):
        with pytest.raises(ValueError, match="estimated_lines must be positive"):
            make_question(estimated_lines=0)

    def test_init_when_bool_points_then_raises_error(self):
        with pytest.raises(ValueError, match="points must be a number"):
            make_question(points=True)

    def test_to_dict_when_called_then_uses_camel_case(self):
        data = make_question().to_dict()

        assert data == {
            "id": "q1",
            "number": 1,
            "statement": "2+2?",
            "modelAnswer": "4",
            "points": 10,
            "estimatedLines": 5,
        }


class TestEvaluationDraft:
    """Tests for EvaluationDraft construction and serialization."""

    def test_init_when_no_questions_then_raises_error(self):
        with pytest.raises(ValueError, match="questions must not be empty"):
            make_draft(questions=())

    def test_init_when_unknown_status_then_raises_error(self):
        with pytest.raises(ValueError, match="Invalid status"):
            make_draft(status="archived")

    def test_init_when_non_string_class_id_then_raises_error(self):
        with pytest.raises(ValueError, match="class_ids"):
            make_draft(class_ids=("c1", 2))

    def test_question_points_when_called_then_sums_questions(self):
        draft = make_draft(
            total_points=7,
            questions=(make_question(points=3), make_question(id="q2", points=4)),
        )

        assert draft.question_points == 7

    def test_from_dict_when_to_dict_output_then_equal(self):
        draft = make_draft()

        assert EvaluationDraft.from_dict(draft.to_dict()) == draft

    def test_to_dict_when_called_then_class_ids_is_list(self):
        assert make_draft(class_ids=("a", "a")).to_dict()["classIds"] == ["a", "a"]


class TestDefaults:
    """Tests for the shared default table."""

    @pytest.fixture
    def context(self) -> DefaultContext:
        return DefaultContext(now=datetime(2025, 6, 1, 9, 30), professor_id="prof-3", position=2)

    def test_warned_fields_when_listed_then_in_message_order(self):
        assert WARNED_FIELDS == ("id", "professorId", "status", "classIds")

    def test_generated_id_when_called_twice_then_differs(self, context):
        first = EVALUATION_DEFAULTS["id"].value(context)
        second = EVALUATION_DEFAULTS["id"].value(context)

        assert first.startswith("eval-")
        assert first != second

    def test_date_default_when_called_then_iso_date_of_now(self, context):
        assert EVALUATION_DEFAULTS["date"].value(context) == "2025-06-01"

    def test_professor_default_when_context_has_user_then_uses_it(self, context):
        assert EVALUATION_DEFAULTS["professorId"].value(context) == "prof-3"

    def test_question_defaults_when_position_given_then_position_based(self, context):
        assert QUESTION_DEFAULTS["id"].value(context) == "q2"
        assert QUESTION_DEFAULTS["number"].value(context) == 2
        assert QUESTION_DEFAULTS["estimatedLines"].value(context) == 5
        assert QUESTION_DEFAULTS["modelAnswer"].value(context) == ""

    def test_table_keys_when_compared_then_match_draft_fields(self):
        assert set(QUESTION_DEFAULTS) == set(make_question().to_dict())
        assert set(EVALUATION_DEFAULTS) <= set(make_draft().to_dict())

    def test_field_default_when_built_then_only_value_and_warning(self, context):
        default = FieldDefault(factory=lambda ctx: ctx.position, warning="missing")

        assert [f.name for f in dataclasses.fields(FieldDefault)] == ["factory", "warning"]
        assert default.value(context) == 2
