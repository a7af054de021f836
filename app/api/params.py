# app/api/params.py
"""
Parsowanie parametrow z URL.

Parametry listy (min_price, max_price, count, start) sa parsowane luzno:
wartosc, ktorej nie da sie sparsowac, zamienia sie na domyslna zamiast 400.
Klienci moga na tym polegac, wiec tego nie zaostrzamy.
"""
from decimal import Decimal, InvalidOperation

from app.utils.settings import MAX_PAGE_SIZE, MAX_PRICE

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class InvalidParam(ValueError):
    pass


def parse_decimal(raw: str | None) -> Decimal | None:
    #"1_0" to dla Pythona 10, dla klientow smieci
    if raw is None or "_" in raw:
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    #nan / inf traktujemy jak smieci
    if not value.is_finite():
        return None
    return value


def parse_int(raw: str | None) -> int | None:
    if raw is None or "_" in raw:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    #poza int64 baza i tak tego nie przyjmie
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def price_bounds(min_raw: str | None, max_raw: str | None) -> tuple[Decimal, Decimal]:
    min_price = parse_decimal(min_raw)
    max_price = parse_decimal(max_raw)
    return (
        Decimal("0") if min_price is None else min_price,
        MAX_PRICE if max_price is None else max_price,
    )


def page_window(count_raw: str | None, start_raw: str | None) -> tuple[int, int]:
    count = parse_int(count_raw)
    start = parse_int(start_raw)

    count = MAX_PAGE_SIZE if count is None else min(max(count, 1), MAX_PAGE_SIZE)
    start = 0 if start is None else max(start, 0)
    return count, start


def product_id(raw: str) -> int:
    value = parse_int(raw)
    if value is None or value <= 0:
        raise InvalidParam("Invalid product ID")
    return value


def discount_percent(raw: str) -> Decimal:
    #najpierw format, potem zakres
    value = parse_decimal(raw)
    if value is None:
        raise InvalidParam("Invalid discount")
    if value < 0 or value > 100:
        raise InvalidParam("Discount must be >= 0 and <= 100")
    return value
