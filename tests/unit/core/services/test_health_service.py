"""Tests for HealthService."""

from unittest.mock import patch

from django.db.utils import OperationalError

import pytest

from core.enums import HealthStatus
from core.services.health_service import HealthService


@pytest.mark.django_db
class TestHealthService:
    """Test suite for HealthService."""

    def test_liveness(self):
        """Test liveness never checks dependencies."""
        assert HealthService().get_liveness_status().status == "alive"

    def test_ready_when_database_up(self):
        """Test readiness with a reachable database."""
        readiness = HealthService().get_readiness_status()

        assert readiness.status == "ready"
        assert readiness.degraded is False
        assert readiness.dependencies["database"].status == HealthStatus.HEALTHY

    @patch("core.services.health_service.connection.ensure_connection")
    def test_degraded_when_database_down(self, mock_ensure_connection):
        """Test readiness is degraded, not failed, without a database."""
        mock_ensure_connection.side_effect = OperationalError("refused")

        readiness = HealthService().get_readiness_status()

        assert readiness.ready is True
        assert readiness.status == "degraded"
        assert readiness.dependencies["database"].healthy is False

    @patch("core.services.health_service.connection.ensure_connection")
    def test_cache_expires(self, mock_ensure_connection):
        """Test a zero TTL checks the database every time."""
        service = HealthService(cache_ttl_seconds=0)

        service.check_database_health()
        service.check_database_health()

        assert mock_ensure_connection.call_count == 2
