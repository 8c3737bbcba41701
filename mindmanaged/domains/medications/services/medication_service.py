"""Medication search against the openFDA drugs@FDA endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100
PROBE_QUERY = "aspirin"
PROBE_TIMEOUT_SECONDS = 5.0


class MedicationSearchError(Exception):
    """Base exception for upstream medication search failures."""

    status_code = 502
    code = "medication_search_failed"
    message = "Failed to search medications. Please try again later."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail


class MedicationSearchTimeout(MedicationSearchError):
    status_code = 408
    code = "medication_search_timeout"
    message = "Search request timed out. Please try again."


class MedicationSearchAuthError(MedicationSearchError):
    """Upstream rejected our credentials (401) or denied access (403)."""

    status_code = 502
    code = "medication_search_unauthorized"
    message = "Medication search service authentication failed"


class MedicationSearchForbidden(MedicationSearchAuthError):
    code = "medication_search_forbidden"
    message = "Medication search service access denied"


class MedicationSearchRateLimited(MedicationSearchError):
    status_code = 429
    code = "medication_search_rate_limited"
    message = "Too many requests. Please wait a moment and try again."


class MedicationSearchBadRequest(MedicationSearchError):
    status_code = 400
    code = "medication_search_bad_request"
    message = "Invalid search request. Please check your search terms."


@dataclass(frozen=True)
class MedicationApiSettings:
    """Outbound request settings, built per request from app config."""

    url: str
    timeout: float = 10.0
    user_agent: str = "MindManaged2-App/1.0"
    api_key: Optional[str] = None

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "MedicationApiSettings":
        return cls(
            url=config["MEDICATION_API_URL"],
            timeout=float(config.get("MEDICATION_API_TIMEOUT_SECONDS", 10)),
            user_agent=config.get("MEDICATION_API_USER_AGENT", "MindManaged2-App/1.0"),
            api_key=config.get("MEDICATION_API_KEY") or None,
        )


def clamp_limit(raw: Any) -> int:
    """Parse a client-supplied limit, falling back to the default and clamping to range."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = DEFAULT_LIMIT
    # 0 behaves like a missing value.
    if value == 0:
        value = DEFAULT_LIMIT
    return min(max(value, MIN_LIMIT), MAX_LIMIT)


def search_medications(query: str, limit: int, settings: MedicationApiSettings) -> List[Dict[str, Any]]:
    """Search by brand name and return flattened product records (at most ``limit``).

    Raises:
        ValueError: if the query is blank.
        MedicationSearchError: (or a subclass) on any upstream failure.
    """
    term = (query or "").strip()
    if not term:
        raise ValueError("Search query is required")

    logger.info("Searching medications for %r (limit=%s)", term, limit)
    data = _fetch(term, limit, settings, settings.timeout)
    results = flatten_products(data.get("results") or [])[:limit]
    logger.info("Found %s medications for %r", len(results), term)
    return results


def check_connection(settings: MedicationApiSettings) -> int:
    """Run a one-result probe lookup; returns the number of upstream records."""
    data = _fetch(PROBE_QUERY, 1, settings, min(settings.timeout, PROBE_TIMEOUT_SECONDS))
    return len(data.get("results") or [])


def flatten_products(drugs: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Turn drugs@FDA application records into one flat row per product."""
    flattened = []
    for drug in drugs:
        products = drug.get("products")
        if not isinstance(products, list):
            continue
        for product in products:
            ingredients = product.get("active_ingredients") or []
            flattened.append(
                {
                    "name": product.get("brand_name") or product.get("generic_name") or "Unknown",
                    "genericName": product.get("generic_name"),
                    "manufacturerName": drug.get("sponsor_name"),
                    "route": _as_list(product.get("route")),
                    "dosageForm": product.get("dosage_form"),
                    "strength": ingredients[0].get("strength") if ingredients else None,
                    "ndcProductCodes": _as_list(product.get("product_ndc")),
                    "applicationNumber": drug.get("application_number"),
                }
            )
    return flattened


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    return [value] if value else []


def _fetch(term: str, limit: int, settings: MedicationApiSettings, timeout: float) -> Dict[str, Any]:
    params: Dict[str, Any] = {"search": f"products.brand_name:{term}", "limit": limit}
    if settings.api_key:
        params["api_key"] = settings.api_key
    headers = {"Accept": "application/json", "User-Agent": settings.user_agent}

    try:
        resp = requests.get(settings.url, params=params, headers=headers, timeout=timeout)
    except requests.Timeout as e:
        logger.warning("Medication search timed out after %ss: %s", timeout, e)
        raise MedicationSearchTimeout(str(e)) from e
    except requests.RequestException as e:
        logger.error("Medication search request failed: %s", e)
        raise MedicationSearchError(str(e)) from e

    status = resp.status_code
    if status == 404:
        # openFDA answers "no matches" with 404 NOT_FOUND.
        return {"results": []}
    if status >= 400:
        logger.error("Medication search upstream returned %s: %s", status, resp.text[:500])
        raise _error_for_status(status)

    try:
        return resp.json() or {}
    except ValueError as e:
        logger.error("Medication search returned invalid JSON: %s", e)
        raise MedicationSearchError("invalid upstream response") from e


def _error_for_status(status: int) -> MedicationSearchError:
    if status == 401:
        return MedicationSearchAuthError(f"upstream status {status}")
    if status == 403:
        return MedicationSearchForbidden(f"upstream status {status}")
    if status == 429:
        return MedicationSearchRateLimited(f"upstream status {status}")
    if 400 <= status < 500:
        return MedicationSearchBadRequest(f"upstream status {status}")
    return MedicationSearchError(f"upstream status {status}")
