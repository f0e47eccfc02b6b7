# app/api/__init__.py
from fastapi import FastAPI
from app.api.routers import products, cart, payments, pages
from app.api.routers.health import router as health_router

def create_app():
    app = FastAPI(title="Storefront Checkout Service", version="1.0.0")
    app.include_router(health_router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(payments.router)
    app.include_router(pages.router)
    return app
