"""Unit tests for activity default durations."""

import pytest

from quicklog.parser.activity import infer_default_duration


class TestInferDefaultDuration:
    """Tests for infer_default_duration."""

    @pytest.mark.parametrize(
        "text,minutes",
        [
            ("daily standup", 15),
            ("team huddle", 15),
            ("call with Sam", 30),
            ("1:1 with manager", 30),
            ("code review", 30),
            ("candidate interview", 45),
            ("sprint retro", 45),
            ("ML lecture", 90),
            ("security training", 90),
            ("deep work", 120),
            ("coding the parser", 120),
            ("company offsite", 180),
            ("hackathon", 180),
        ],
    )
    def test_keyword_groups(self, text: str, minutes: int) -> None:
        """Test keywords map to their group's duration."""
        assert infer_default_duration(text) == minutes

    def test_first_group_wins(self) -> None:
        """Test earlier groups take precedence."""
        assert infer_default_duration("standup call") == 15

    def test_case_insensitive(self) -> None:
        """Test keyword matching ignores case."""
        assert infer_default_duration("STANDUP") == 15

    def test_whole_words_only(self) -> None:
        """Test keywords do not match inside other words."""
        assert infer_default_duration("dentist") == 60
        assert infer_default_duration("recall notes") == 60

    def test_fallback(self) -> None:
        """Test unknown activities use the fallback."""
        assert infer_default_duration("team meeting") == 60
        assert infer_default_duration("gardening", fallback=25) == 25
