import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.analysis.symptom_classifier import SymptomAssessment, analyze_symptoms
from app.errors import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["symptoms"])


class SymptomsRequest(BaseModel):
    # typ kontroluje klasifikátor, aby chybný vstup skončil ako InvalidInputError
    symptoms: Any = None


@router.post("/api/symptoms-analysis", response_model=SymptomAssessment)
@router.post("/symptoms-analysis", response_model=SymptomAssessment, include_in_schema=False)
@router.post("/api/symptoms", response_model=SymptomAssessment, include_in_schema=False)
async def analyze(request: SymptomsRequest):
    """
    Analýza symptómov podľa kľúčových slov

    Vráti možné ochorenia, závažnosť (mild/moderate/severe)
    a či treba vyhľadať lekára.
    """
    try:
        logger.info(f"Received symptoms analysis request: {request.symptoms!r}")

        analysis = analyze_symptoms(request.symptoms)

        logger.info(f"Sending analysis response: {analysis.model_dump(by_alias=True)}")
        return analysis

    except InvalidInputError as e:
        logger.warning(f"[SYMPTOMS] Invalid input: {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except Exception:
        logger.exception("Symptom analysis error")
        return JSONResponse(status_code=500, content={"error": "Error analyzing symptoms"})
