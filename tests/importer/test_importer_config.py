"""
Unit tests for ImporterConfig.
"""

import pytest

from eval_toolkit.importer import ImporterConfig


class TestImporterConfig:
    """Tests for ImporterConfig dataclass."""

    def test_init_when_defaults_then_json_only(self):
        config = ImporterConfig()

        assert config.accepted_extensions == (".json",)
        assert config.professor_id is None
        assert config.check_output is True

    def test_init_when_zero_size_limit_then_raises_error(self):
        with pytest.raises(ValueError, match="max_file_bytes must be positive"):
            ImporterConfig(max_file_bytes=0)

    def test_init_when_no_extensions_then_raises_error(self):
        with pytest.raises(ValueError, match="accepted_extensions must not be empty"):
            ImporterConfig(accepted_extensions=())

    def test_init_when_extension_without_dot_then_raises_error(self):
        with pytest.raises(ValueError, match="must start with '.'"):
            ImporterConfig(accepted_extensions=("json",))

    def test_init_when_professor_id_not_string_then_raises_error(self):
        with pytest.raises(ValueError, match="professor_id must be a string"):
            ImporterConfig(professor_id=12)

    def test_accepts_when_upper_case_suffix_then_true(self):
        assert ImporterConfig().accepts("Quiz.JSON")

    def test_accepts_when_other_suffix_then_false(self):
        assert not ImporterConfig().accepts("quiz.txt")
        assert not ImporterConfig().accepts("json")
