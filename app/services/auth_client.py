# app/services/auth_client.py
import requests
from requests import RequestException

from app.utils.settings import SUPABASE_URL, SUPABASE_ANON_KEY, AUTH_TIMEOUT_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)


class AuthClient:
    """Ustala email konta na podstawie tokena Bearer (Supabase /auth/v1/user)."""

    def __init__(self, base_url: str | None = None, api_key: str | None = None, timeout: int = AUTH_TIMEOUT_SECONDS):
        self.base_url = (base_url if base_url is not None else SUPABASE_URL).rstrip("/")
        self.api_key = api_key if api_key is not None else SUPABASE_ANON_KEY
        self.timeout = timeout

    def get_user_email(self, token: str) -> str | None:
        if not self.base_url or not token:
            return None

        url = f"{self.base_url}/auth/v1/user"
        logger.info(f"AuthClient GET {url}")

        try:
            resp = requests.get(
                url,
                headers={"apikey": self.api_key, "Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (RequestException, ValueError) as e:
            logger.warning(f"Could not resolve user from token: {e}")
            return None

        email = data.get("email") if isinstance(data, dict) else None
        return email or None
