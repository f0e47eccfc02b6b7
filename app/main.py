# app/main.py
from app.api import create_app
from app.data.database import Base, engine
from app.data.seed import seed
from app.utils.logging import setup_logging, get_logger
import uvicorn

setup_logging()
logger = get_logger(__name__)

# IMPORT WSZYSTKICH MODELI NA POCZATKU (PRZED JAKIMKOLWIEK CREATE_ALL)
from app.data.models.product import ProductModel
from app.data.models.review import ReviewModel

logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")

try:
    Base.metadata.create_all(bind=engine)
    seed()
    logger.info("Database tables ready")
except Exception as e:
    # katalog ma wbudowany fallback - serwis startuje bez bazy
    logger.error(f"Database init failed, serving built-in catalog: {e}")


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
