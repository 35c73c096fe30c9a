"""Tests for backend wiring and caller identity."""
from unittest.mock import patch

import pytest

from pulse import dependencies
from pulse.dependencies import (
    build_memory_backend,
    configure_backend,
    get_alert_manager,
    get_current_user,
    get_survey_service,
)
from pulse.errors import Unauthorized
from pulse.models import UserRole
from pulse.services import CachedQuestionCatalog


@pytest.fixture(autouse=True)
def reset_backend():
    yield
    configure_backend(None)


class TestBackendWiring:
    """Tests for backend construction."""

    def test_memory_backend_seeded(self):
        backend = build_memory_backend()
        assert len(backend.catalog.get_questions()) == 5
        assert backend.users.get_user("7").role == UserRole.ADMIN
        assert backend.alerts.get_alert("1") is not None
        assert backend.scopes.get_direct_reports("4") == ["1", "2"]

    def test_memory_backend_unseeded(self):
        backend = build_memory_backend(seed_demo=False)
        assert backend.alerts.get_alerts_for_user("1") == []

    def test_configure_resets_services(self, backend):
        configure_backend(backend)
        service = get_survey_service()
        manager = get_alert_manager()
        assert get_survey_service() is service
        assert manager.store is backend.alerts

        configure_backend(build_memory_backend(seed_demo=False))
        assert get_survey_service() is not service

    def test_question_cache_wrapping(self, redis_cache):
        settings = dependencies.get_settings().model_copy(update={"question_cache_enabled": True})
        with patch("pulse.dependencies.get_settings", return_value=settings), \
                patch("pulse.dependencies.get_redis_cache", return_value=redis_cache):
            backend = dependencies._build_backend()
        assert isinstance(backend.catalog, CachedQuestionCatalog)
        assert len(backend.catalog.get_questions()) == 5


class TestCurrentUser:
    """Tests for X-User-Id resolution."""

    def test_resolves_identity(self, backend):
        configure_backend(backend)
        identity = get_current_user(x_user_id=" 10 ")
        assert identity.id == "10"
        assert identity.role == UserRole.MANAGER

    @pytest.mark.parametrize("header", [None, "", "   ", "999", "14"])
    def test_rejects(self, backend, header):
        configure_backend(backend)
        with pytest.raises(Unauthorized):
            get_current_user(x_user_id=header)
