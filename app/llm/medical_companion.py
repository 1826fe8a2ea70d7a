import asyncio
import logging
from typing import Optional

import anthropic
from mistralai import Mistral

from app.config import settings
from app.errors import UpstreamError

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Error processing your request"


class MedicalCompanion:
    """Baymax - AI odpovede na zdravotné otázky (Mistral, záloha Claude)"""

    def __init__(self, mistral_api_key: Optional[str] = None, anthropic_api_key: Optional[str] = None):
        self.mistral_api_key = settings.MISTRAL_API_KEY if mistral_api_key is None else mistral_api_key
        self.anthropic_api_key = settings.ANTHROPIC_API_KEY if anthropic_api_key is None else anthropic_api_key

    @property
    def available(self) -> bool:
        return bool(self.mistral_api_key or self.anthropic_api_key)

    async def answer(self, prompt: str, medical_context: str = "") -> str:
        """
        Pošle otázku používateľa spolu s medicínskym kontextom do LLM

        Prefer Mistral, fallback na Claude. Volanie sa skúša práve raz.

        Raises:
            UpstreamError: chýba kľúč, zlyhalo volanie alebo odpoveď nemá text
        """
        full_prompt = self._build_prompt(prompt, medical_context)

        if self.mistral_api_key:
            return await asyncio.to_thread(self._ask_mistral, full_prompt)
        if self.anthropic_api_key:
            return await asyncio.to_thread(self._ask_claude, full_prompt)

        raise UpstreamError(
            "completion",
            GENERIC_ERROR,
            detail="Missing MISTRAL_API_KEY or ANTHROPIC_API_KEY",
        )

    def _build_prompt(self, prompt: str, medical_context: str) -> str:
        """Vytvorí Baymax prompt"""
        return f"""
You are Baymax, a compassionate healthcare companion robot designed to provide medical information and assistance.
Your responses should be helpful, informative, and caring, but clearly indicate that you are not a substitute for professional medical care.

USE THIS MEDICAL CONTEXT IN YOUR RESPONSE (but don't reference it directly):
{medical_context or ''}

USER QUERY:
{prompt}

Instructions for your response:
1. Analyze the symptoms carefully
2. Provide possible causes based on the medical information available
3. Suggest basic home care remedies when appropriate
4. Use bullet points for any lists of recommendations
5. Include a clear disclaimer about consulting healthcare professionals
6. Be compassionate and reassuring, like Baymax from Big Hero 6
7. Keep your response concise and easy to understand
"""

    def _ask_mistral(self, full_prompt: str) -> str:
        try:
            client = Mistral(api_key=self.mistral_api_key)
            response = client.chat.complete(
                model=settings.MISTRAL_MODEL,
                messages=[{"role": "user", "content": full_prompt}],
                temperature=settings.MISTRAL_TEMPERATURE,
                max_tokens=settings.MISTRAL_MAX_TOKENS,
            )
        except Exception as e:
            raise UpstreamError("mistral", GENERIC_ERROR, detail=str(e)) from e

        try:
            answer = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise UpstreamError("mistral", GENERIC_ERROR, detail=f"Malformed response: {e}") from e

        if not isinstance(answer, str):
            raise UpstreamError("mistral", GENERIC_ERROR, detail="Response has no text content")
        return answer

    def _ask_claude(self, full_prompt: str) -> str:
        try:
            client = anthropic.Anthropic(api_key=self.anthropic_api_key)
            message = client.messages.create(
                model=settings.CLAUDE_MODEL,
                max_tokens=settings.MISTRAL_MAX_TOKENS,
                temperature=settings.MISTRAL_TEMPERATURE,
                messages=[{"role": "user", "content": full_prompt}],
            )
        except Exception as e:
            raise UpstreamError("claude", GENERIC_ERROR, detail=str(e)) from e

        try:
            return message.content[0].text
        except (AttributeError, IndexError, TypeError) as e:
            raise UpstreamError("claude", GENERIC_ERROR, detail=f"Malformed response: {e}") from e
