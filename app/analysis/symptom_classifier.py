"""
Jednoduchý klasifikátor symptómov

Hľadá kľúčové slová v texte od používateľa a vráti možné ochorenia,
stupeň závažnosti a príznak, či treba navštíviť lekára.

Porovnáva sa podreťazcom, nie po celých slovách ("feverish" nájde "fever",
"pain" nájde takmer každé zranenie). Je to známe obmedzenie.
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, FrozenSet, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field

from app.errors import InvalidInputError

logger = logging.getLogger(__name__)


SYMPTOM_LEXICON: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "headache": ("Tension headache", "Migraine", "Dehydration", "Stress"),
    "fever": ("Common cold", "Flu", "Infection", "COVID-19"),
    "cough": ("Common cold", "Bronchitis", "Asthma", "COVID-19"),
    "sore throat": ("Pharyngitis", "Common cold", "Strep throat", "Tonsillitis"),
    "fatigue": ("Lack of sleep", "Anemia", "Depression", "Chronic fatigue syndrome"),
    "nausea": ("Food poisoning", "Motion sickness", "Migraine", "Pregnancy"),
    "dizziness": ("Inner ear issues", "Low blood pressure", "Anemia", "Anxiety"),
    "rash": ("Allergic reaction", "Eczema", "Contact dermatitis", "Psoriasis"),
    "pain": ("Injury", "Inflammation", "Muscle strain", "Nerve issues"),
})

SEVERE_SYMPTOMS: FrozenSet[str] = frozenset({
    "can't breathe", "difficulty breathing", "chest pain", "severe pain",
    "unconscious", "unresponsive", "seizure", "stroke", "heart attack",
    "blood loss", "bleeding heavily", "can't move", "paralysis",
})

# Stredná závažnosť až od 3 nájdených kľúčových slov
MODERATE_INDICATOR_THRESHOLD = 2


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class SymptomAssessment(BaseModel):
    """Výsledok klasifikácie, v JSON s camelCase názvami"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    possible_conditions: List[str] = Field(default_factory=list, alias="possibleConditions")
    severity: Severity = Severity.MILD
    needs_medical_attention: bool = Field(default=False, alias="needsMedicalAttention")


class SymptomClassifier:
    """Klasifikátor nad statickou tabuľkou kľúčových slov"""

    def __init__(
        self,
        lexicon: Mapping[str, Tuple[str, ...]] = SYMPTOM_LEXICON,
        severe_symptoms: FrozenSet[str] = SEVERE_SYMPTOMS,
        moderate_threshold: int = MODERATE_INDICATOR_THRESHOLD,
    ):
        self.lexicon = lexicon
        self.severe_symptoms = severe_symptoms
        self.moderate_threshold = moderate_threshold

    def classify(self, symptoms: Any) -> SymptomAssessment:
        """
        Ohodnotí text so symptómami

        Args:
            symptoms: voľný text od používateľa

        Raises:
            InvalidInputError: ak vstup chýba alebo nie je reťazec
        """
        if not isinstance(symptoms, str):
            raise InvalidInputError("Symptoms must be provided as text")

        text = symptoms.lower()

        conditions: List[str] = []
        indicators = 0
        for keyword, keyword_conditions in self.lexicon.items():
            if keyword in text:
                conditions.extend(keyword_conditions)
                indicators += 1

        severity = Severity.MILD
        needs_attention = False

        if any(phrase in text for phrase in self.severe_symptoms):
            severity = Severity.SEVERE
            needs_attention = True
        elif indicators > self.moderate_threshold:
            severity = Severity.MODERATE

        logger.debug(f"[CLASSIFIER] {indicators} indicators, severity={severity.value}")

        return SymptomAssessment(
            possible_conditions=list(dict.fromkeys(conditions)),
            severity=severity,
            needs_medical_attention=needs_attention,
        )


_default_classifier = SymptomClassifier()


def analyze_symptoms(symptoms: Any) -> SymptomAssessment:
    """Klasifikácia s predvolenými tabuľkami"""
    return _default_classifier.classify(symptoms)
