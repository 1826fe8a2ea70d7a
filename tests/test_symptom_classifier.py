"""
Tests for the keyword-based symptom classifier.
"""

import pytest

from app.analysis.symptom_classifier import (
    SEVERE_SYMPTOMS,
    SYMPTOM_LEXICON,
    Severity,
    SymptomClassifier,
    analyze_symptoms,
)
from app.errors import InvalidInputError


class TestNoMatch:
    """Text without any known keyword."""

    def test_fine_today(self):
        result = analyze_symptoms("I feel totally fine today")
        assert result.possible_conditions == []
        assert result.severity == Severity.MILD
        assert result.needs_medical_attention is False

    def test_empty_string(self):
        result = analyze_symptoms("")
        assert result.possible_conditions == []
        assert result.severity == Severity.MILD
        assert result.needs_medical_attention is False


class TestSeverity:
    """Severity tiers and the attention flag."""

    def test_one_keyword_is_mild(self):
        result = analyze_symptoms("I have a cough")
        assert result.severity == Severity.MILD
        assert result.needs_medical_attention is False
        assert result.possible_conditions == ["Common cold", "Bronchitis", "Asthma", "COVID-19"]

    def test_two_keywords_stay_mild(self):
        """Test the worked example: headache and fever."""
        result = analyze_symptoms("I have a headache and fever")
        assert result.severity == Severity.MILD
        assert result.needs_medical_attention is False
        assert set(result.possible_conditions) == {
            "Tension headache", "Migraine", "Dehydration", "Stress",
            "Common cold", "Flu", "Infection", "COVID-19",
        }

    def test_three_keywords_are_moderate(self):
        result = analyze_symptoms("headache, fever and a bad cough")
        assert result.severity == Severity.MODERATE
        assert result.needs_medical_attention is False

    def test_severe_phrase(self):
        result = analyze_symptoms("chest pain and can't breathe")
        assert result.severity == Severity.SEVERE
        assert result.needs_medical_attention is True

    @pytest.mark.parametrize("phrase", sorted(SEVERE_SYMPTOMS))
    def test_every_severe_phrase_alone(self, phrase):
        result = analyze_symptoms(f"my friend had a {phrase} yesterday")
        assert result.severity == Severity.SEVERE
        assert result.needs_medical_attention is True

    def test_severe_overrides_many_indicators(self):
        """A severe phrase wins even when the moderate threshold is passed."""
        result = analyze_symptoms("headache, fever, cough, rash and a seizure")
        assert result.severity == Severity.SEVERE
        assert result.needs_medical_attention is True

    def test_severe_without_lexicon_match(self):
        result = analyze_symptoms("he is unresponsive")
        assert result.severity == Severity.SEVERE
        assert result.possible_conditions == []


class TestMatching:
    """Substring matching, case handling and deduplication."""

    def test_case_insensitive(self):
        assert analyze_symptoms("FEVER") == analyze_symptoms("fever")

    def test_substring_not_word_boundary(self):
        result = analyze_symptoms("I am feverish")
        assert "Flu" in result.possible_conditions

    def test_chest_pain_also_counts_pain_keyword(self):
        result = analyze_symptoms("chest pain")
        assert "Injury" in result.possible_conditions

    def test_shared_condition_appears_once(self):
        result = analyze_symptoms("fever and cough")
        assert result.possible_conditions.count("Common cold") == 1
        assert result.possible_conditions.count("COVID-19") == 1

    def test_anemia_deduplicated_across_keywords(self):
        result = analyze_symptoms("fatigue and dizziness")
        assert result.possible_conditions.count("Anemia") == 1

    def test_multiword_keyword(self):
        result = analyze_symptoms("I have a sore throat")
        assert "Strep throat" in result.possible_conditions

    def test_idempotent(self):
        text = "nausea with a rash and dizziness"
        assert analyze_symptoms(text) == analyze_symptoms(text)


class TestInvalidInput:
    """Input that is not text."""

    @pytest.mark.parametrize("value", [None, 42, ["fever"], {"symptoms": "fever"}])
    def test_non_string_raises(self, value):
        with pytest.raises(InvalidInputError):
            analyze_symptoms(value)


class TestCustomTables:
    """Classifier with its own lexicon and threshold."""

    def test_custom_lexicon(self):
        classifier = SymptomClassifier(
            lexicon={"itch": ("Allergy",)},
            severe_symptoms=frozenset({"anaphylaxis"}),
        )
        result = classifier.classify("constant ITCH")
        assert result.possible_conditions == ["Allergy"]
        assert result.severity == Severity.MILD

    def test_lower_threshold(self):
        classifier = SymptomClassifier(moderate_threshold=0)
        result = classifier.classify("rash")
        assert result.severity == Severity.MODERATE

    def test_default_tables_are_read_only(self):
        with pytest.raises(TypeError):
            SYMPTOM_LEXICON["sneezing"] = ("Allergy",)


class TestSerialization:
    """JSON shape returned to the browser client."""

    def test_camel_case_fields(self):
        data = analyze_symptoms("chest pain").model_dump(by_alias=True, mode="json")
        assert set(data) == {"possibleConditions", "severity", "needsMedicalAttention"}
        assert data["severity"] == "severe"
        assert data["needsMedicalAttention"] is True
