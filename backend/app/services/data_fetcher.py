import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from app.core.config import settings

logger = logging.getLogger(__name__)


def get_session_with_retries(total=3, backoff=1.0):
    s = requests.Session()
    retries = Retry(
        total=total,
        backoff_factor=backoff,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"]
    )
    s.mount("https://", HTTPAdapter(max_retries=retries))
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.headers.update({"User-Agent": "mgnrega-district-api/1.0", "Accept": "application/json"})
    return s


def fetch_dataset(state=None, district=None, limit=5000):
    """Fetch MGNREGA district rows from data.gov.in.

    ``state``/``district`` filter on the name columns, case-insensitively.
    Returns an empty list when the API is not configured or the call fails.
    """
    if not settings.API_KEY or not settings.DATASET_URL:
        logger.warning("Missing API_KEY or DATASET_URL in .env")
        return []

    params = {
        "api-key": settings.API_KEY,
        "format": "json",
        "limit": limit,
    }
    if state:
        params["filters[state_name]"] = state.upper()

    try:
        response = get_session_with_retries().get(settings.DATASET_URL, params=params, timeout=30)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        logger.error("API request failed: %s", e)
        return []
    except ValueError:
        logger.error("API returned a non-JSON body")
        return []

    records = data.get("records", [])

    if state:
        records = [r for r in records if (r.get("state_name") or "").strip().upper() == state.upper()]
    if district:
        records = [r for r in records if (r.get("district_name") or "").strip().upper() == district.upper()]

    logger.info("Successfully fetched %d records from API", len(records))
    return records
