# app/domain/errors.py


class ConfigurationError(RuntimeError):
    """Brak wymaganej konfiguracji (np. klucza do Stripe)."""


class StorageError(RuntimeError):
    """Blad magazynu klucz/wartosc (redis niedostepny, zly JSON itp.)."""


class PersistenceError(RuntimeError):
    """Nie udalo sie zapisac rekordu - stan nie przechodzi dalej."""


class ReviewValidationError(ValueError):
    def __init__(self, message: str = "Please complete all fields"):
        super().__init__(message)


class ShippingValidationError(ValueError):
    def __init__(self, missing_fields: list[str]):
        self.missing_fields = missing_fields
        super().__init__("Please complete all required fields")
