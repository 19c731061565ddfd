"""
Unit tests for localization/models.py - request and result shapes
"""
import math
import pytest
from datetime import timezone

from config.constants import REVIEW_THRESHOLD
from localization.models import (
    ContentType,
    TranslationRequest,
    TranslationResult,
    ReviewQueueItem,
)
from translators.base import ErrorKind, ProviderID


class TestTranslationRequest:
    """Test TranslationRequest normalisation."""

    def test_duplicate_locales_collapse(self):
        request = TranslationRequest("Hello", "en", ["de", "de", "es"])
        assert request.target_locales == frozenset({"de", "es"})

    def test_content_type_coerced_from_string(self):
        request = TranslationRequest("Hello", "en", ["de"], content_type="marketing")
        assert request.content_type is ContentType.MARKETING

    def test_unknown_content_type_rejected(self):
        with pytest.raises(ValueError):
            TranslationRequest("Hello", "en", ["de"], content_type="legal")

    def test_single_locale_string(self):
        request = TranslationRequest("Hello", "en", "de")
        assert request.target_locales == frozenset({"de"})

    def test_word_count(self):
        request = TranslationRequest("Save 20% on   every plan", "en", ["de"])
        assert request.word_count == 5

    def test_request_is_immutable(self):
        request = TranslationRequest("Hello", "en", ["de"])
        with pytest.raises(AttributeError):
            request.source_text = "Bye"

    def test_request_ids_are_unique(self):
        a = TranslationRequest("Hello", "en", ["de"])
        b = TranslationRequest("Hello", "en", ["de"])
        assert a.request_id != b.request_id


class TestTranslationResult:
    """Test the success/failure shape invariant."""

    def test_success_shape(self):
        result = TranslationResult.success("de", "Hallo", 0.92, ProviderID.CLAUDE, ["style:precise"])
        assert result.is_success
        assert result.needs_review is False
        assert result.error is None
        assert result.fallback_content is None
        assert result.adaptations == ("style:precise",)

    def test_failure_shape(self):
        result = TranslationResult.failure("es", ErrorKind.TIMEOUT, "Bonjour", "slow")
        assert not result.is_success
        assert result.fallback_content == "Bonjour"
        assert result.content is None
        assert result.quality_score is None

    @pytest.mark.parametrize("score,expected", [
        (0.0, True),
        (0.65, True),
        (0.7999, True),
        (REVIEW_THRESHOLD, False),
        (1.0, False),
    ])
    def test_needs_review_threshold(self, score, expected):
        result = TranslationResult.success("de", "Hallo", score, ProviderID.CLAUDE)
        assert result.needs_review is expected

    def test_both_shapes_rejected(self):
        with pytest.raises(ValueError):
            TranslationResult(
                locale="de", content="Hallo", quality_score=0.9,
                provider_used=ProviderID.CLAUDE, needs_review=False,
                error=ErrorKind.TIMEOUT, fallback_content="Hello",
            )

    def test_neither_shape_rejected(self):
        with pytest.raises(ValueError):
            TranslationResult(locale="de")

    @pytest.mark.parametrize("score", [-0.1, 1.5, math.nan])
    def test_out_of_range_score_rejected(self, score):
        with pytest.raises(ValueError):
            TranslationResult.success("de", "Hallo", score, ProviderID.CLAUDE)

    def test_inconsistent_review_flag_rejected(self):
        with pytest.raises(ValueError):
            TranslationResult(
                locale="de", content="Hallo", quality_score=0.5,
                provider_used=ProviderID.CLAUDE, needs_review=False,
            )

    def test_failure_requires_fallback(self):
        with pytest.raises(ValueError):
            TranslationResult(locale="de", error=ErrorKind.TIMEOUT)

    def test_to_dict_success(self):
        result = TranslationResult.success(
            "de", "Hallo", 0.5, ProviderID.OPENAI, sub_scores={"grammar": 0.5}
        )
        data = result.to_dict()
        assert data["provider_used"] == "openai"
        assert data["needs_review"] is True
        assert "error" not in data

    def test_to_dict_failure(self):
        data = TranslationResult.failure("de", ErrorKind.QUOTA_EXCEEDED, "Hello").to_dict()
        assert data == {
            "locale": "de",
            "error": "quota-exceeded",
            "fallback_content": "Hello",
            "error_message": None,
        }


class TestReviewQueueItem:
    """Test ReviewQueueItem construction."""

    def test_for_result(self):
        result = TranslationResult.success("ja", "こんにちは", 0.4, ProviderID.CLAUDE)
        item = ReviewQueueItem.for_result(result, request_id="abc")

        assert item.locale == "ja"
        assert item.quality_score == 0.4
        assert item.result is result
        assert item.request_id == "abc"
        assert item.enqueued_at.tzinfo == timezone.utc
