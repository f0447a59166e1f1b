"""
Freaky Fit API - Gemini AI Service.

Centralized Gemini API client for workout and meal plan generation.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional, Dict, Any

from google import genai
from google.genai import types

from settings import settings


logger = logging.getLogger(__name__)


@dataclass
class GeminiResponse:
    """Outcome of a Gemini call: parsed JSON payload or a failure message."""
    success: bool
    data: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
    error: Optional[str] = None


class GeminiService:
    """
    Gemini API service for AI-powered features.

    ``generate_json`` never raises; every failure is reported through the
    returned ``GeminiResponse``.
    """

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None):
        """
        Initialize Gemini client.
        """
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.model_name = model_name or settings.GEMINI_MODEL
        self.client = genai.Client(api_key=self.api_key) if self.api_key else None
        self.logger = logging.getLogger(__name__)

    async def generate_json(self, prompt: str) -> GeminiResponse:
        """
        Send a prompt and parse the JSON object in the reply.

        Args:
            prompt: Fully rendered prompt.

        Returns:
            GeminiResponse with ``data`` set on success.
        """
        if not self.client:
            self.logger.error("Gemini API key not configured")
            return GeminiResponse(
                success=False,
                message="AI service is not configured",
                error="GEMINI_API_KEY missing"
            )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(response_mime_type="application/json"),
            )
        except Exception as e:
            self.logger.error(f"Gemini request error: {str(e)}")
            return GeminiResponse(
                success=False,
                message="Failed to get a response from the AI service",
                error=str(e)
            )

        data = self._extract_json(response.text or "")
        if data is None:
            return GeminiResponse(
                success=False,
                message="Failed to parse AI response",
                error="Response did not contain a JSON object"
            )
        return GeminiResponse(success=True, data=data)

    def _extract_json(self, text: str) -> Optional[Dict[str, Any]]:
        """
        Extract and parse JSON from Gemini response.
        """
        try:
            if "```json" in text:
                start = text.find("```json") + 7
                end = text.find("```", start)
                text = text[start:end].strip()
            elif "```" in text:
                start = text.find("```") + 3
                end = text.find("```", start)
                text = text[start:end].strip()

            json_start = text.find("{")
            json_end = text.rfind("}") + 1

            if json_start != -1 and json_end > json_start:
                return json.loads(text[json_start:json_end])

            return None

        except json.JSONDecodeError as e:
            self.logger.error(f"JSON parsing error: {str(e)}")
            return None


# Global Gemini service instance
gemini_service = GeminiService()
