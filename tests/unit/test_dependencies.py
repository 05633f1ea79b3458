"""Unit tests for dependency helpers."""

from types import SimpleNamespace

import pytest
from langchain_google_genai import HarmBlockThreshold, HarmCategory

from app.core.exceptions import AuthenticationError
from app.dependencies import (
    SAFETY_CATEGORIES,
    build_safety_settings,
    get_current_user,
)


class TestBuildSafetySettings:
    def test_applies_threshold_to_every_category(self) -> None:
        safety = build_safety_settings("BLOCK_MEDIUM_AND_ABOVE")

        assert set(safety) == set(SAFETY_CATEGORIES)
        assert HarmCategory.HARM_CATEGORY_HARASSMENT in safety
        assert all(
            level == HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE
            for level in safety.values()
        )

    def test_unknown_threshold(self) -> None:
        with pytest.raises(KeyError):
            build_safety_settings("BLOCK_EVERYTHING")


class TestGetCurrentUser:
    """Identity extraction from middleware state."""

    def test_reads_state(self) -> None:
        request = SimpleNamespace(
            state=SimpleNamespace(
                external_id="sub-1",
                email="a@test.com",
                user_metadata={"full_name": "Ada", "avatar_url": "https://a/b.png"},
            )
        )

        user = get_current_user(request)  # type: ignore[arg-type]

        assert user.external_id == "sub-1"
        assert user.email == "a@test.com"
        assert user.name == "Ada"
        assert user.avatar_url == "https://a/b.png"

    def test_name_preferred_over_full_name(self) -> None:
        request = SimpleNamespace(
            state=SimpleNamespace(
                external_id="sub-1",
                email=None,
                user_metadata={"name": "Short", "full_name": "Long Name"},
            )
        )
        assert get_current_user(request).name == "Short"  # type: ignore[arg-type]

    def test_missing_identity(self) -> None:
        request = SimpleNamespace(state=SimpleNamespace())
        with pytest.raises(AuthenticationError):
            get_current_user(request)  # type: ignore[arg-type]
