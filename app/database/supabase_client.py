from supabase import create_client, Client
from app.config import settings


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        """Shared anon client for table reads. Never used for sign-in, so it holds no user session."""
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Use for role lookups, provisioning and sign-out."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    def new_client(cls) -> Client:
        """Uncached anon client. sign_up/sign_in store their session on it, so it lives for one request."""
        return create_client(settings.supabase_url, settings.supabase_key)

    @classmethod
    def for_user(cls, access_token: str) -> Client:
        """Fresh anon-key client that sends the caller's JWT, so RLS runs as that caller.

        Never cached: each request gets its own client.
        """
        client = cls.new_client()
        client.postgrest.auth(access_token)
        return client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_auth_supabase() -> Client:
    return SupabaseClient.new_client()


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()
