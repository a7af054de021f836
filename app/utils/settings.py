# app/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

APP_DB_USERNAME = os.getenv("APP_DB_USERNAME", "postgres")
APP_DB_PASSWORD = os.getenv("APP_DB_PASSWORD", "postgres")
APP_DB_NAME = os.getenv("APP_DB_NAME", "productdb")
APP_DB_HOST = os.getenv("APP_DB_HOST", "postgres")

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"postgresql://{APP_DB_USERNAME}:{APP_DB_PASSWORD}@{APP_DB_HOST}:5432/{APP_DB_NAME}",
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", 8010))

#limity listowania produktow
MAX_PAGE_SIZE = 10
#najwieksza wartosc mieszczaca sie w NUMERIC(10, 2)
MAX_PRICE = Decimal("99999999.99")
