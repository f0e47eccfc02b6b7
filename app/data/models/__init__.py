#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.product import ProductModel
from app.data.models.review import ReviewModel

__all__ = ["ProductModel", "ReviewModel"]
