"""Unit tests for configuration limits."""

import pytest
from pydantic import ValidationError

from huddle.config import CommentSettings
from huddle.domain.model.comment import MAX_TEXT_LENGTH, MAX_THREAD_DEPTH


class TestCommentSettings:
    """Settings may tighten the model limits but never raise them."""

    def test_defaults_match_model_limits(self):
        settings = CommentSettings()

        assert settings.max_depth == MAX_THREAD_DEPTH
        assert settings.max_text_length == MAX_TEXT_LENGTH

    def test_tighter_limits_are_accepted(self):
        settings = CommentSettings(max_depth=1, max_text_length=280)

        assert settings.max_depth == 1
        assert settings.max_text_length == 280

    @pytest.mark.parametrize(
        "overrides",
        [
            {"max_depth": MAX_THREAD_DEPTH + 1},
            {"max_text_length": MAX_TEXT_LENGTH + 1},
        ],
    )
    def test_limits_above_model_ceiling_are_rejected(self, overrides):
        with pytest.raises(ValidationError):
            CommentSettings(**overrides)
