"""
National Library of Medicine (PubMed) integrácia cez E-utilities

Najprv esearch vráti ID článkov, potom esummary ich zhrnutie.
"""
import asyncio
import logging
from typing import Any, Dict, List

from app.config import settings
from app.errors import UpstreamError
from app.integrations.http_client import fetch_json

logger = logging.getLogger(__name__)

NO_RESULTS_MESSAGE = "No medical literature found"


class PubMedConnector:
    """Konektor pre PubMed E-utilities"""

    error_message = "Error fetching from National Library of Medicine"

    def __init__(self, base_url: str = None, max_results: int = None):
        self.base_url = (base_url or settings.PUBMED_EUTILS_URL).rstrip("/")
        self.max_results = max_results or settings.PUBMED_MAX_RESULTS

    async def search(self, query: str) -> Dict[str, Any]:
        """
        Vyhľadá články k dotazu

        Ak sa nič nenájde, vráti {"message": "No medical literature found"},
        inak esummary odpoveď bez úprav.
        """
        logger.info(f"[NLM] Searching PubMed for '{query}'")
        id_list = await asyncio.to_thread(self._search_ids, query)

        if not id_list:
            return {"message": NO_RESULTS_MESSAGE}

        return await asyncio.to_thread(self._fetch_summaries, id_list)

    def _search_ids(self, query: str) -> List[str]:
        data = fetch_json(
            f"{self.base_url}/esearch.fcgi",
            {"db": "pubmed", "term": query, "retmode": "json", "retmax": self.max_results},
            "nlm",
            self.error_message,
        )
        try:
            id_list = data["esearchresult"]["idlist"]
        except (KeyError, TypeError) as e:
            raise UpstreamError("nlm", self.error_message, detail=f"Unexpected esearch payload: {e}") from e

        return [str(pmid) for pmid in id_list or []]

    def _fetch_summaries(self, id_list: List[str]) -> Dict[str, Any]:
        return fetch_json(
            f"{self.base_url}/esummary.fcgi",
            {"db": "pubmed", "id": ",".join(id_list), "retmode": "json"},
            "nlm",
            self.error_message,
        )
