# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.api import params
from app.api.responses import PRODUCT_NOT_FOUND, respond_with_error
from app.data.database import get_db
from app.domain.schemas import ProductIn, ProductOut, ResultOut
from app.services.product_service import ProductService

router = APIRouter(tags=["products"])


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def valid_product_id(product_id: str) -> int:
    #id sprawdzane jako zaleznosc, czyli przed walidacja body
    return params.product_id(product_id)


@router.get("/products", response_model=List[ProductOut])
def list_products(
    min_price: str | None = Query(None),
    max_price: str | None = Query(None),
    count: str | None = Query(None),
    start: str | None = Query(None),
    svc: ProductService = Depends(get_service),
):
    """
    Lista produktow z filtrem ceny.
    Niepoprawne parametry = wartosci domyslne, zawsze 200.
    """
    low, high = params.price_bounds(min_price, max_price)
    limit, offset = params.page_window(count, start)
    return svc.list_products(low, high, limit, offset)


@router.get("/product/{product_id}", response_model=ProductOut)
def get_product(
    product_id: int = Depends(valid_product_id),
    svc: ProductService = Depends(get_service),
):
    product = svc.get_product(product_id)
    if not product:
        return respond_with_error(404, PRODUCT_NOT_FOUND)
    return product


@router.post("/product", response_model=ProductOut, status_code=201)
def create_product(payload: ProductIn, svc: ProductService = Depends(get_service)):
    return svc.create_product(payload)


@router.put("/product/{product_id}", response_model=ProductOut)
def update_product(
    payload: ProductIn,
    product_id: int = Depends(valid_product_id),
    svc: ProductService = Depends(get_service),
):
    product = svc.update_product(product_id, payload)
    if not product:
        return respond_with_error(404, PRODUCT_NOT_FOUND)
    return product


@router.delete("/product/{product_id}", response_model=ResultOut)
def delete_product(
    product_id: int = Depends(valid_product_id),
    svc: ProductService = Depends(get_service),
):
    #brak wiersza to tez sukces, delete jest idempotentny
    svc.delete_product(product_id)
    return ResultOut(result="success")


@router.put("/product/{product_id}/discount", response_model=ProductOut)
def discount_product(
    product_id: int = Depends(valid_product_id),
    discount: str | None = Query(None),
    svc: ProductService = Depends(get_service),
):
    """
    Rabat procentowy na cene produktu.

    Kolejnosc sprawdzen ma znaczenie:
    1. brak parametru discount -> 404 (jak brak trasy)
    2. discount nie jest liczba -> 400 "Invalid discount"
    3. discount poza [0, 100] -> 400 "Discount must be >= 0 and <= 100"
    4. produkt nie istnieje -> 404 "Product not found"
    """
    if discount is None:
        raise HTTPException(status_code=404, detail="Not Found")

    percent = params.discount_percent(discount)

    product = svc.apply_discount(product_id, percent)
    if not product:
        return respond_with_error(404, PRODUCT_NOT_FOUND)
    return product
