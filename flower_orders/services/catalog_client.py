"""
HTTP Client for the catalog (product) service with retry logic
"""
import logging

import httpx
from pydantic import ValidationError as PydanticValidationError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from flower_orders.config import settings
from flower_orders.schemas.catalog import CatalogProduct

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base exception for catalog service errors"""
    pass


class ProductNotFoundError(CatalogError):
    """Product not found"""
    pass


class CatalogUnavailableError(CatalogError):
    """Catalog service is unavailable"""
    pass


class CatalogClient:
    """Client for reading products from the catalog service"""

    def __init__(self, base_url: str = None, timeout: float = 5.0):
        self.base_url = (base_url or settings.CATALOG_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    @retry(
        stop=stop_after_attempt(settings.MAX_RETRIES),
        wait=wait_exponential(multiplier=settings.RETRY_DELAY, min=1, max=10),
        retry=retry_if_exception_type(CatalogUnavailableError),
        reraise=True
    )
    async def get_product(self, product_id: str) -> CatalogProduct:
        """
        Get product by ID from the catalog service

        Args:
            product_id: Product ID

        Returns:
            Product data

        Raises:
            ProductNotFoundError: If product not found
            CatalogUnavailableError: If service is unavailable after retries
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(f"{self.base_url}/products/{product_id}")
        except (httpx.TimeoutException, httpx.ConnectError) as e:
            logger.warning("Error calling catalog service: %s", e)
            raise CatalogUnavailableError(f"Catalog service unavailable: {e}") from e

        if response.status_code == 404:
            raise ProductNotFoundError(f"Product {product_id} not found")
        if response.status_code >= 500:
            logger.warning("Catalog service returned %s", response.status_code)
            raise CatalogUnavailableError(f"Catalog service error: status {response.status_code}")
        if response.status_code != 200:
            raise CatalogError(f"Unexpected status code: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise CatalogError(f"Catalog returned a non-JSON body for product {product_id}") from e
        if not isinstance(payload, dict):
            raise CatalogError(f"Catalog returned {type(payload).__name__} for product {product_id}")

        payload["id"] = str(payload.get("id", product_id))
        try:
            return CatalogProduct.model_validate(payload)
        except PydanticValidationError as e:
            raise CatalogError(f"Malformed product {product_id} from catalog: {e}") from e

    async def ping(self) -> bool:
        """True if the catalog service answers its health endpoint"""
        try:
            async with httpx.AsyncClient(timeout=2.0) as client:
                response = await client.get(f"{self.base_url}/health")
        except httpx.HTTPError as e:
            logger.warning("Catalog health check failed: %s", e)
            return False
        return response.status_code == 200
