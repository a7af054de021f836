# app/api/__init__.py
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from app.api.responses import register_error_handlers
from app.api.routers import health, products
from app.data.database import build_session_factory


def create_app(engine: Engine) -> FastAPI:
    """
    Aplikacja z wstrzyknietym engine (pula polaczen).
    Engine tworzony raz przy starcie procesu, sesje per request przez get_db.
    """
    app = FastAPI(
        title="Product Service",
        version="1.0.0",
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(products.router)

    return app
