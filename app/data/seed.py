# app/data/seed.py
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from app.data.models.product import ProductModel
from app.utils.logging import get_logger

logger = get_logger(__name__)


def seed(session_factory: sessionmaker, count: int = 10) -> int:
    """Produkty "Product i" z cena (i+1)*10, tylko gdy tabela jest pusta."""
    db = session_factory()
    try:
        # not forcing: only seed if empty
        if db.execute(select(ProductModel.id).limit(1)).first():
            return 0

        total = max(count, 1)
        for i in range(total):
            db.add(ProductModel(name=f"Product {i}", price=Decimal((i + 1) * 10)))
        db.commit()

        logger.info(f"Seeded {total} products")
        return total
    finally:
        db.close()


if __name__ == "__main__":
    from app.data.database import build_engine, build_session_factory, init_db
    from app.utils.settings import DATABASE_URL

    engine = build_engine(DATABASE_URL)
    init_db(engine)
    seed(build_session_factory(engine))
