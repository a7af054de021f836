# app/main.py
import uvicorn

from app.api import create_app
from app.data.database import build_engine, init_db
from app.utils.logging import get_logger
from app.utils.settings import APP_HOST, APP_PORT, DATABASE_URL

logger = get_logger(__name__)

engine = build_engine(DATABASE_URL)

logger.info("Initializing database...")
try:
    init_db(engine)
    logger.info("Database tables ready")
except Exception:
    logger.exception("Failed to create tables")
    raise

app = create_app(engine)

if __name__ == "__main__":
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
