"""
Integration tests for per-client rate limiting.
"""
import pytest
from django.core.cache import cache
from django.urls import reverse
from prometheus_client import REGISTRY
from rest_framework.test import APIClient

LIMIT = 3


@pytest.fixture
def limited_client(settings):
    """API client with a small rate limit and a clean counter store."""
    settings.RATE_LIMIT_PER_MINUTE = LIMIT
    settings.NUM_PROXIES = 0
    cache.clear()
    yield APIClient()
    cache.clear()


@pytest.mark.django_db
@pytest.mark.integration
class TestRateLimit:
    """Integration tests for RateLimitMiddleware."""

    def test_limit_applies_per_peer(self, limited_client):
        """Test requests beyond the limit get 429."""
        statuses = [
            limited_client.get(reverse("ping"), REMOTE_ADDR="203.0.113.9").status_code
            for _ in range(LIMIT + 1)
        ]

        assert statuses == [200] * LIMIT + [429]

    def test_rotating_forwarded_for_shares_bucket(self, limited_client):
        """Test an untrusted peer cannot get fresh buckets by rotating X-Forwarded-For."""
        responses = [
            limited_client.get(
                reverse("ping"),
                REMOTE_ADDR="203.0.113.10",
                HTTP_X_FORWARDED_FOR=f"198.51.100.{i}",
            )
            for i in range(LIMIT + 2)
        ]

        assert [r.status_code for r in responses][-2:] == [429, 429]
        assert responses[-1].json()["error"]["code"] == "RATE_LIMIT_EXCEEDED"
        assert "Retry-After" in responses[-1]

    def test_rejections_use_normalized_endpoint_label(self, limited_client):
        """Test license paths are collapsed in the rejection metric label."""
        labels = {"error_type": "rate_limit_exceeded", "endpoint": "/api/licenses/{key}/{product}"}
        before = REGISTRY.get_sample_value("errors_total", labels) or 0.0

        for _ in range(LIMIT + 1):
            response = limited_client.get(
                "/api/licenses/ABCD-1234-EFGH-5678/Demo", REMOTE_ADDR="203.0.113.11"
            )

        assert response.status_code == 429
        assert REGISTRY.get_sample_value("errors_total", labels) == before + 1
        raw = dict(labels, endpoint="/api/licenses/ABCD-1234-EFGH-5678/Demo")
        assert REGISTRY.get_sample_value("errors_total", raw) is None
