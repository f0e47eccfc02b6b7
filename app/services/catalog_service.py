# app/services/catalog_service.py
from typing import Dict, Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.catalog import BUILTIN_PRODUCTS, builtin_product, details_for_category
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCT_FIELDS = (
    "id", "name", "price", "original_price", "image",
    "rating", "reviews", "category", "in_stock",
)


def _product_dict(source) -> Dict[str, Any]:
    if isinstance(source, dict):
        data = {f: source.get(f) for f in PRODUCT_FIELDS}
        data["description"] = source.get("description")
    else:
        data = {f: getattr(source, f) for f in PRODUCT_FIELDS}
        data["description"] = source.description
    data["rating"] = float(data["rating"] or 0)
    return data


class CatalogService:
    """
    Odczyt katalogu z bazy. Baza pusta albo niedostepna -> wbudowany katalog.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> List[Dict[str, Any]]:
        try:
            products = self.repo.list_in_stock()
        except SQLAlchemyError as e:
            logger.warning(f"Catalog store unreachable, using built-in products: {e}")
            products = []

        if not products:
            logger.info("Catalog store empty, serving built-in products")
            return [_product_dict(p) for p in BUILTIN_PRODUCTS]

        return [_product_dict(p) for p in products]

    def get_product(self, product_id: str) -> Dict[str, Any] | None:
        product = None
        try:
            product = self.repo.get_product(product_id)
        except SQLAlchemyError as e:
            logger.warning(f"Product {product_id} lookup failed, trying built-in catalog: {e}")

        if product is None:
            product = builtin_product(product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
            return None

        return _product_dict(product)

    def get_product_detail(self, product_id: str) -> Dict[str, Any] | None:
        """
        Produkt + opis, galeria, cechy i specyfikacja.
        Cechy/specyfikacja z tabeli wg kategorii.
        """
        product = self.get_product(product_id)
        if product is None:
            return None

        details = details_for_category(product["category"])
        product["description"] = product["description"] or details["description"]
        product["images"] = [product["image"]] if product["image"] else []
        product["features"] = list(details["features"])
        product["specifications"] = dict(details["specifications"])
        return product
