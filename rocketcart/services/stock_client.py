# rocketcart/services/stock_client.py
import requests

from rocketcart.domain.schemas import Product, Stock
from rocketcart.utils.retry import http_retry
from rocketcart.utils.settings import STOCK_SERVICE_URL, HTTP_TIMEOUT_SECONDS
from rocketcart.utils.logging import get_logger

logger = get_logger(__name__)


class StockClient:
    def __init__(self, base_url: str | None = None, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.base_url = (base_url or STOCK_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    def _get(self, path: str) -> dict:
        url = f"{self.base_url}/{path}"
        logger.info(f"StockClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def get_stock(self, product_id: int) -> Stock:
        return Stock.model_validate(self._get(f"stock/{product_id}"))

    @http_retry()
    def get_product(self, product_id: int) -> Product:
        return Product.model_validate(self._get(f"products/{product_id}"))
