# app/services/shipping_service.py
from datetime import datetime, timezone
from enum import Enum
from typing import Callable

from pydantic.alias_generators import to_camel

from app.domain.errors import ShippingValidationError, StorageError, PersistenceError
from app.domain.schemas import ShippingDetailsIn, ShippingDetailsOut
from app.repos.shipping_repo import ShippingRepo
from app.services.page_lifecycle import PageLifecycle
from app.utils.settings import SHIPPING_REDIRECT_DELAY_SECONDS
from app.utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "address",
    "city",
    "state",
    "zip_code",
)

COMPLETED_REDIRECT = "/payment-success?shipping_complete=true"

FIELD_ALIASES = {to_camel(name): name for name in ShippingDetailsIn.model_fields}


class CaptureState(str, Enum):
    COLLECTING = "collecting"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


def missing_fields(form: ShippingDetailsIn) -> list[str]:
    return [f for f in REQUIRED_FIELDS if not getattr(form, f).strip()]


def validate_shipping(form: ShippingDetailsIn) -> None:
    missing = missing_fields(form)
    if missing:
        raise ShippingValidationError(missing)


class ShippingCapture:
    """
    Formularz wysylki jako maszyna stanow:

        collecting -> submitting -> submitted (przejscie na strone sukcesu)
                         |
                         +-> collecting (blad walidacji albo zapisu, z komunikatem)
    """

    def __init__(
        self,
        repo: ShippingRepo,
        session_id: str | None = None,
        form: ShippingDetailsIn | None = None,
        lifecycle: PageLifecycle | None = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.repo = repo
        self.session_id = session_id or None
        self.form = form or ShippingDetailsIn()
        self.lifecycle = lifecycle
        self.clock = clock
        self.state = CaptureState.COLLECTING
        self.error: str | None = None
        self.missing: list[str] = []

    def update_field(self, field: str, value: str) -> None:
        """Pole po nazwie pythonowej (zip_code) albo nazwie z formularza (zipCode)."""
        if self.state != CaptureState.COLLECTING:
            return
        field = FIELD_ALIASES.get(field, field)
        if field not in ShippingDetailsIn.model_fields:
            raise KeyError(field)
        self.form = self.form.model_copy(update={field: value})

    def submit(self, navigate: Callable[[str], None] | None = None) -> ShippingDetailsOut:
        if self.state != CaptureState.COLLECTING:
            raise RuntimeError(f"Cannot submit while {self.state.value}")

        self.state = CaptureState.SUBMITTING
        self.error = None
        self.missing = []

        try:
            validate_shipping(self.form)
        except ShippingValidationError as e:
            self.state = CaptureState.COLLECTING
            self.error = "All fields except delivery instructions are required."
            self.missing = e.missing_fields
            logger.info(f"Shipping form incomplete: {', '.join(e.missing_fields)}")
            raise

        record = ShippingDetailsOut(
            **self.form.model_dump(),
            order_date=self.clock(),
            session_id=self.session_id,
        )

        try:
            self.repo.save(record)
        except StorageError as e:
            self.state = CaptureState.COLLECTING
            self.error = "Error saving shipping details. Please try again."
            logger.error(f"Saving shipping details failed: {e}")
            raise PersistenceError(self.error) from e

        logger.info(f"Shipping details saved (session {self.session_id})")

        def advance(_record: ShippingDetailsOut) -> None:
            self.state = CaptureState.SUBMITTED
            if navigate is not None and self.lifecycle is not None:
                self.lifecycle.schedule(SHIPPING_REDIRECT_DELAY_SECONDS, lambda: navigate(COMPLETED_REDIRECT))

        # bez cyklu zycia (np. endpoint HTTP) stan zmienia sie od razu
        if self.lifecycle is None:
            advance(record)
        else:
            self.lifecycle.deliver(record, advance)

        return record
