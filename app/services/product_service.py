# app/services/product_service.py
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from sqlalchemy.orm import Session

from app.domain.schemas import ProductIn, ProductOut
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def discounted_price(price: Decimal, discount: Decimal) -> Decimal:
    """
    Cena po rabacie procentowym, zaokraglona do groszy (half up).
    discount musi byc juz zwalidowany do zakresu [0, 100].
    """
    return to_cents(price * (1 - discount / 100))


class ProductService:
    """
    Use case'y dla domeny product.
    query (get, list) tylko odczyt, commands (create, update, delete, discount) modyfikuja stan.
    None z metody = produkt nie istnieje.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    #query
    def get_product(self, product_id: int) -> ProductOut | None:
        product = self.repo.get_product(product_id)
        if not product:
            return None
        return ProductOut.model_validate(product)

    def list_products(
        self,
        min_price: Decimal,
        max_price: Decimal,
        count: int,
        start: int,
    ) -> List[ProductOut]:
        products = self.repo.list_products(min_price, max_price, count, start)
        return [ProductOut.model_validate(p) for p in products]

    #commands
    def create_product(self, payload: ProductIn) -> ProductOut:
        created = self.repo.create_product(payload.name, to_cents(payload.price))
        logger.info(f"Utworzono produkt {created.id} ({created.name}, {created.price})")
        return ProductOut.model_validate(created)

    def update_product(self, product_id: int, payload: ProductIn) -> ProductOut | None:
        updated = self.repo.update_product(product_id, payload.name, to_cents(payload.price))
        if not updated:
            logger.warning(f"Produkt {product_id} nie istnieje, brak aktualizacji")
            return None

        logger.info(f"Zaktualizowano produkt {product_id}")
        return ProductOut.model_validate(updated)

    def delete_product(self, product_id: int) -> bool:
        deleted = self.repo.delete_product(product_id)
        if deleted:
            logger.info(f"Usunieto produkt {product_id}")
        else:
            logger.info(f"Produkt {product_id} nie istnial, nic do usuniecia")
        return deleted

    def apply_discount(self, product_id: int, discount: Decimal) -> ProductOut | None:
        product = self.repo.get_product(product_id)
        if not product:
            logger.warning(f"Produkt {product_id} nie istnieje, rabat pominiety")
            return None

        old_price = product.price
        new_price = discounted_price(old_price, discount)
        updated = self.repo.update_price(product_id, new_price)

        #produkt mogl zniknac miedzy odczytem a zapisem
        if not updated:
            return None

        logger.info(
            f"Rabat {discount}% na produkt {product_id}: {old_price} -> {new_price}"
        )
        return ProductOut.model_validate(updated)
