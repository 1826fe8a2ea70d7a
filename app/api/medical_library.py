import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.errors import UpstreamError
from app.integrations import MedlinePlusConnector, PubMedConnector

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["medical-library"])
medlineplus_connector = MedlinePlusConnector()
pubmed_connector = PubMedConnector()


@router.get("/medlineplus")
async def search_medlineplus(query: str):
    """
    Vyhľadanie v MedlinePlus Connect

    Parameters:
    - query: voľný text (napr. názov ochorenia)
    """
    try:
        return await medlineplus_connector.search(query)

    except UpstreamError as e:
        logger.error(f"[MEDLINEPLUS ERROR] {e.detail or e.message}")
        return JSONResponse(status_code=500, content={"error": e.message})


@router.get("/nlm")
async def search_nlm(query: str):
    """
    Vyhľadanie odbornej literatúry v PubMed (National Library of Medicine)

    Parameters:
    - query: voľný text
    """
    try:
        return await pubmed_connector.search(query)

    except UpstreamError as e:
        logger.error(f"[NLM ERROR] {e.detail or e.message}")
        return JSONResponse(status_code=500, content={"error": e.message})
