from unittest.mock import MagicMock


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_ready(self, client, supabase):
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}
        supabase.table.assert_called_once_with("profiles")

    def test_not_ready_when_store_fails(self, client, supabase):
        supabase.table.return_value.select.return_value.limit.return_value.execute.side_effect = Exception("down")

        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "unavailable"}

    def test_not_ready_when_unconfigured(self, unconfigured_client):
        response = unconfigured_client.get("/ready")

        assert response.status_code == 503
