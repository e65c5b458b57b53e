from unittest.mock import MagicMock, patch

from community_directory.database import supabase_client
from community_directory.database.supabase_client import SupabaseClient, check_connection


class TestSupabaseClient:
    def test_unconfigured_returns_none(self):
        assert SupabaseClient.get_service_client() is None

    def test_client_created_once(self, test_settings, monkeypatch):
        monkeypatch.setattr(test_settings, "supabase_url", "https://abc.supabase.co")
        monkeypatch.setattr(test_settings, "supabase_service_role_key", "service-key")

        with patch.object(supabase_client, "create_client", return_value=MagicMock()) as create:
            first = SupabaseClient.get_service_client()
            second = SupabaseClient.get_service_client()

        assert first is second
        create.assert_called_once()
        assert create.call_args.args == ("https://abc.supabase.co", "service-key")


class TestCheckConnection:
    def test_none_client(self):
        assert check_connection(None) is False

    def test_select_succeeds(self):
        client = MagicMock()

        assert check_connection(client) is True
        client.table.assert_called_once_with("profiles")

    def test_select_fails(self):
        client = MagicMock()
        client.table.return_value.select.return_value.limit.return_value.execute.side_effect = Exception("down")

        assert check_connection(client) is False
