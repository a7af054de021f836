# app/repos/product_repo.py
from decimal import Decimal
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel


class ProductRepo:
    """
    Dostep do tabeli products.
    Kazda metoda to jedno zapytanie z parametrami, bez walidacji wejscia.
    None / False oznacza brak wiersza, bledy bazy (SQLAlchemyError) leca wyzej.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def list_products(
        self,
        min_price: Decimal,
        max_price: Decimal,
        count: int,
        start: int,
    ) -> List[ProductModel]:
        stmt = (
            select(ProductModel)
            .where(ProductModel.price.between(min_price, max_price))
            .order_by(ProductModel.id)
            .limit(count)
            .offset(start)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_product(self, name: str, price: Decimal) -> ProductModel:
        product = ProductModel(name=name, price=price)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product_id: int, name: str, price: Decimal) -> ProductModel | None:
        return self._update(product_id, {"name": name, "price": price})

    def update_price(self, product_id: int, price: Decimal) -> ProductModel | None:
        return self._update(product_id, {"price": price})

    def delete_product(self, product_id: int) -> bool:
        result = self.db.execute(
            delete(ProductModel).where(ProductModel.id == product_id)
        )
        self.db.commit()
        return result.rowcount > 0

    def _update(self, product_id: int, values: dict) -> ProductModel | None:
        #UPDATE ... RETURNING, 0 wierszy = brak produktu
        stmt = (
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(**values)
            .returning(ProductModel)
        )
        product = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        return product
