"""
MedlinePlus Connect integrácia
Vyhľadanie zdravotných tém podľa voľného textu, odpoveď sa vracia bez úprav
"""
import asyncio
import logging
from typing import Any, Dict

from app.config import settings
from app.integrations.http_client import fetch_json

logger = logging.getLogger(__name__)

# ICD-9-CM code system
CODE_SYSTEM = "2.16.840.1.113883.6.103"


class MedlinePlusConnector:
    """Konektor pre MedlinePlus Connect Web Service"""

    error_message = "Error fetching from MedlinePlus"

    def __init__(self, base_url: str = None):
        self.base_url = base_url or settings.MEDLINEPLUS_URL

    async def search(self, query: str) -> Dict[str, Any]:
        params = {
            "mainSearchCriteria.v.cs": CODE_SYSTEM,
            "mainSearchCriteria.v.c": query,
            "knowledgeResponseType": "application/json",
        }
        logger.info(f"[MEDLINEPLUS] Searching for '{query}'")
        return await asyncio.to_thread(
            fetch_json, self.base_url, params, "medlineplus", self.error_message
        )
