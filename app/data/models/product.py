from datetime import datetime, timezone

from sqlalchemy import Column, String, Boolean, Integer, Numeric, DateTime, Text

from app.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(64), primary_key=True)
    name = Column(String, nullable=False)

    price = Column(Numeric(10, 2), nullable=False)
    original_price = Column(Numeric(10, 2), nullable=True)

    image = Column(String, nullable=False, default="")
    rating = Column(Numeric(2, 1), nullable=False, default=0)
    reviews = Column(Integer, nullable=False, default=0)
    category = Column(String, nullable=False)
    in_stock = Column(Boolean, nullable=False, default=True)

    # opcjonalny opis - jesli pusty, bierzemy domyslny dla kategorii
    description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
