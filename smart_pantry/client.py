"""HTTP client for the Smart Pantry API and a category cache for UI layers."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class PantryClient:
    """Thin synchronous client for the REST API.

    Pass any ``httpx.Client`` whose ``base_url`` points at the server
    (FastAPI's ``TestClient`` works too), or use ``connect``.
    """

    def __init__(self, http: httpx.Client):
        self.http = http

    @classmethod
    def connect(cls, base_url: str, timeout: float = 30.0) -> "PantryClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self.http.close()

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise
        if response.status_code == httpx.codes.NO_CONTENT:
            return None
        return response.json()

    def list_categories(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/v1/categories")

    def create_category(self, name: str) -> dict[str, Any]:
        return self._request("POST", "/api/v1/categories", json={"name": name})

    def list_items(
        self,
        search: str | None = None,
        category_id: str | None = None,
    ) -> list[dict[str, Any]]:
        params = {}
        if search:
            params["search"] = search
        if category_id:
            params["category_id"] = category_id
        return self._request("GET", "/api/v1/items", params=params)

    def list_expiring_items(self, days: int | None = None) -> list[dict[str, Any]]:
        params = {"days": days} if days is not None else {}
        return self._request("GET", "/api/v1/items/expiring", params=params)

    def create_item(self, item: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/api/v1/items", json=item)

    def update_item(self, item_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/api/v1/items/{item_id}", json=changes)

    def delete_item(self, item_id: str) -> None:
        self._request("DELETE", f"/api/v1/items/{item_id}")

    def bulk_import(self, records: list[dict[str, Any]]) -> dict[str, Any]:
        """Send raw records to the bulk import endpoint and return the outcome."""
        return self._request("POST", "/api/v1/items/bulk", json={"items": records})


class CategoryCache:
    """Read-through cache of categories, owned by the calling UI layer.

    The list is fetched on first access and served from memory until
    ``invalidate`` or ``refresh`` is called. Categories created through
    ``create`` are merged in without refetching.
    """

    def __init__(self, client: PantryClient):
        self.client = client
        self._categories: list[dict[str, Any]] | None = None

    @property
    def is_loaded(self) -> bool:
        return self._categories is not None

    def get_all(self) -> list[dict[str, Any]]:
        if self._categories is None:
            self._categories = self.client.list_categories()
        return list(self._categories)

    def get_by_name(self, name: str) -> dict[str, Any] | None:
        """Find a cached category by case-insensitive name."""
        wanted = name.strip().lower()
        return next((c for c in self.get_all() if c["name"].lower() == wanted), None)

    def invalidate(self) -> None:
        self._categories = None

    def refresh(self) -> list[dict[str, Any]]:
        self.invalidate()
        return self.get_all()

    def create(self, name: str) -> str:
        """Create (or fetch) a category on the server and return its id."""
        category = self.client.create_category(name)
        if self._categories is not None and not any(
            c["id"] == category["id"] for c in self._categories
        ):
            self._categories.append(category)
        return category["id"]
