import logging
from typing import Any, Dict

import requests

from app.config import settings
from app.errors import UpstreamError

logger = logging.getLogger(__name__)


def fetch_json(url: str, params: Dict[str, Any], source: str, error_message: str) -> Any:
    """
    GET požiadavka na externú službu, vráti dekódovaný JSON

    Žiadne opakovanie - každé volanie sa skúša práve raz.

    Raises:
        UpstreamError: sieťová chyba, non-2xx status alebo nevalidný JSON
    """
    logger.debug(f"[HTTP] GET {url} params={params}")
    try:
        response = requests.get(url, params=params, timeout=settings.UPSTREAM_TIMEOUT)
    except requests.RequestException as e:
        raise UpstreamError(source, error_message, detail=str(e)) from e

    if not response.ok:
        raise UpstreamError(
            source,
            error_message,
            detail=f"HTTP {response.status_code}: {response.text[:500]}",
        )

    try:
        return response.json()
    except ValueError as e:
        raise UpstreamError(source, error_message, detail=f"Invalid JSON: {e}") from e
