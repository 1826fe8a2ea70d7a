import logging
from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.errors import UpstreamError
from app.llm.medical_companion import MedicalCompanion

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["mistral"])
medical_companion = MedicalCompanion()


class MistralRequest(BaseModel):
    prompt: str
    medicalContext: Optional[str] = ""


class MistralResponse(BaseModel):
    answer: str


@router.post("/mistral", response_model=MistralResponse)
async def ask_mistral(request: MistralRequest):
    """
    Spracuje otázku používateľa a vráti odpoveď Baymaxa

    medicalContext sa vloží do promptu, odpoveď modelu sa vracia bez úprav.
    """
    try:
        answer = await medical_companion.answer(request.prompt, request.medicalContext or "")
        return MistralResponse(answer=answer)

    except UpstreamError as e:
        logger.error(f"[{e.source.upper()} ERROR] {e.detail or e.message}")
        return JSONResponse(status_code=500, content={"error": e.message})
