"""Test doubles shared across test modules."""

from app.services.auth_client import AuthClient


class FakeGateway:
    """Zastepuje Stripe: zapamietuje parametry sesji, zwraca staly URL."""

    def __init__(self, customers: dict[str, str] | None = None):
        self.customers = customers or {}
        self.customer_lookups: list[str] = []
        self.sessions: list[dict] = []

    def find_customer_id(self, email: str) -> str | None:
        self.customer_lookups.append(email)
        return self.customers.get(email)

    def create_checkout_session(self, params: dict) -> tuple[str, str]:
        self.sessions.append(params)
        session_id = f"cs_test_{len(self.sessions)}"
        return session_id, f"https://checkout.stripe.com/c/pay/{session_id}"


class FakeAuthClient(AuthClient):
    def __init__(self, users: dict[str, str] | None = None):
        super().__init__(base_url="", api_key="")
        self.users = users or {}

    def get_user_email(self, token: str) -> str | None:
        return self.users.get(token)
