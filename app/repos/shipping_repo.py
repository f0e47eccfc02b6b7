# app/repos/shipping_repo.py
from app.domain.schemas import ShippingDetailsOut
from app.repos.kv_store import KeyValueStore

SHIPPING_DETAILS_KEY = "shipping_details"


class ShippingRepo:
    def __init__(self, store: KeyValueStore):
        self.store = store

    def save(self, details: ShippingDetailsOut) -> None:
        self.store.set(SHIPPING_DETAILS_KEY, details.model_dump(mode="json", by_alias=True))

    def get_latest(self) -> ShippingDetailsOut | None:
        data = self.store.get(SHIPPING_DETAILS_KEY)
        if data is None:
            return None
        return ShippingDetailsOut.model_validate(data)
