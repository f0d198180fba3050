"""
Hosted backend client (PostgREST over HTTP) with retry logic and validation.
"""
import json
import logging
from typing import Any, Iterable, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from ..config import BackendConfig, get_config
from ..models.details import Review
from ..models.listing import Category, Listing, Profile, Provider, ServiceImage


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BackendError(RuntimeError):
    """A query against the hosted backend failed."""


class BackendNotFoundError(BackendError):
    """The requested table or resource does not exist."""


class BackendClient:
    """
    Thin wrapper around the backend's REST interface.
    Returns validated models instead of raw rows.
    """

    LISTINGS_TABLE = "services"
    PROVIDERS_TABLE = "service_providers"
    PROFILES_TABLE = "profiles"
    IMAGES_TABLE = "service_images"
    CATEGORIES_TABLE = "job_categories"
    REVIEWS_TABLE = "reviews"

    def __init__(
        self,
        config: Optional[BackendConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or get_config().backend
        self.base_url = self.config.url.rstrip("/") + "/rest/v1"
        self.session = session or requests.Session()
        self.session.headers.update({
            "apikey": self.config.anon_key,
            "Authorization": f"Bearer {self.config.anon_key}",
            "Accept": "application/json",
        })
        logger.info(f"BackendClient initialized for {self.config.url}")

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
        before_sleep=lambda retry_state: logger.warning(
            f"Retry attempt {retry_state.attempt_number}"
        ),
        reraise=True,
    )
    def _get(self, table: str, params: dict[str, str]) -> requests.Response:
        """Issue a single GET against a table endpoint."""
        return self.session.get(
            f"{self.base_url}/{table}",
            params=params,
            timeout=self.config.timeout,
        )

    def select(self, table: str, **params: str) -> list[dict[str, Any]]:
        """
        Run a select query and return the raw rows.

        Args:
            table: Table name
            **params: PostgREST query parameters (select, filters, order, limit)

        Returns:
            List of row dicts

        Raises:
            BackendNotFoundError: the table does not exist
            BackendError: any other transport or HTTP failure
        """
        params.setdefault("select", "*")
        try:
            response = self._get(table, params)
        except requests.RequestException as e:
            raise BackendError(f"Query on {table} failed: {e}") from e

        if response.status_code == 404:
            raise BackendNotFoundError(f"Table {table} not found")
        if response.status_code >= 400:
            raise BackendError(
                f"Query on {table} failed with HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            rows = response.json()
        except ValueError as e:
            raise BackendError(f"Invalid JSON from {table}") from e

        if not isinstance(rows, list):
            raise BackendError(f"Unexpected payload from {table}: {type(rows).__name__}")
        return rows

    def _parse_rows(self, model: Type[T], rows: Iterable[dict[str, Any]]) -> list[T]:
        """Validate rows, skipping (and logging) the malformed ones."""
        parsed = []
        for row in rows:
            try:
                parsed.append(model.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping malformed {model.__name__} row {row.get('id')}: {e}")
        return parsed

    def _first(self, model: Type[T], rows: list[dict[str, Any]]) -> Optional[T]:
        parsed = self._parse_rows(model, rows[:1])
        return parsed[0] if parsed else None

    # Listing view queries

    def fetch_categories(self) -> list[Category]:
        return self._parse_rows(Category, self.select(self.CATEGORIES_TABLE))

    def fetch_active_listings(self) -> list[Listing]:
        """Active listings, newest first."""
        rows = self.select(
            self.LISTINGS_TABLE,
            is_active="eq.true",
            order="created_at.desc",
        )
        return self._parse_rows(Listing, rows)

    def fetch_profile(self, user_id: str) -> Optional[Profile]:
        rows = self.select(
            self.PROFILES_TABLE,
            select="id,first_name,last_name,profile_photo_url",
            id=f"eq.{user_id}",
            limit="1",
        )
        return self._first(Profile, rows)

    def fetch_primary_image(self, listing_id: str) -> Optional[str]:
        rows = self.select(
            self.IMAGES_TABLE,
            select="service_id,image_url,is_primary",
            service_id=f"eq.{listing_id}",
            is_primary="eq.true",
            limit="1",
        )
        image = self._first(ServiceImage, rows)
        return image.image_url if image else None

    def fetch_provider(self, provider_id: str) -> Optional[Provider]:
        rows = self.select(self.PROVIDERS_TABLE, id=f"eq.{provider_id}", limit="1")
        return self._first(Provider, rows)

    # Provider page queries

    def fetch_provider_listings(self, provider_id: str) -> list[Listing]:
        rows = self.select(
            self.LISTINGS_TABLE,
            service_provider_id=f"eq.{provider_id}",
            is_active="eq.true",
            order="created_at.desc",
        )
        return self._parse_rows(Listing, rows)

    def fetch_listing_images(self, listing_ids: list[str]) -> list[ServiceImage]:
        if not listing_ids:
            return []
        rows = self.select(
            self.IMAGES_TABLE,
            select="service_id,image_url,is_primary",
            service_id=f"in.({','.join(listing_ids)})",
        )
        return self._parse_rows(ServiceImage, rows)

    def fetch_reviews(self, provider_id: str) -> list[Review]:
        """Reviews for a provider, newest first, with the reviewer's name flattened in."""
        rows = self.select(
            self.REVIEWS_TABLE,
            select="*,profiles(first_name,last_name)",
            service_provider_id=f"eq.{provider_id}",
            order="created_at.desc",
        )
        flattened = []
        for row in rows:
            reviewer = row.pop("profiles", None) or {}
            row["reviewer_first_name"] = reviewer.get("first_name")
            row["reviewer_last_name"] = reviewer.get("last_name")
            flattened.append(row)
        return self._parse_rows(Review, flattened)

    # Change detection

    def fetch_listing_signatures(self) -> dict[str, str]:
        """
        Map every listing id (active or not) to a fingerprint of its row.
        Used by the change feed to detect inserts, updates and deletes.
        """
        rows = self.select(self.LISTINGS_TABLE)
        return {
            str(row.get("id")): json.dumps(row, sort_keys=True, default=str)
            for row in rows
            if row.get("id") is not None
        }
