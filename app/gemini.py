import logging
from typing import Any, Dict, Optional

import requests

from app import config
from app.errors import ANALYSIS_FAILED_MESSAGE, AnalysisError
from app.schemas import ImagePayload

logger = logging.getLogger(__name__)


class GeminiClient:
    """Minimal client for the Gemini Vision generateContent endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = config.GEMINI_API_KEY,
        api_url: str = config.GEMINI_API_URL,
        timeout: float = config.GEMINI_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_payload(self, image: ImagePayload, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                        {
                            "inline_data": {
                                "mime_type": image.media_type,
                                "data": image.base64,
                            }
                        },
                    ]
                }
            ]
        }

    def analyze(self, image: ImagePayload, prompt: str) -> str:
        """Send the image and prompt, return the model's text answer."""
        if not self.api_key:
            raise AnalysisError("Gemini API key is not configured")

        params = {"key": self.api_key}
        headers = {"Content-Type": "application/json"}
        try:
            response = self.session.post(
                self.api_url,
                params=params,
                json=self.build_payload(image, prompt),
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            result = response.json()
        except requests.HTTPError as e:
            logger.error(
                "Gemini API returned %s: %s", e.response.status_code, e.response.text[:500]
            )
            raise AnalysisError(ANALYSIS_FAILED_MESSAGE) from e
        except (requests.RequestException, ValueError) as e:
            # str(e) carries the keyed URL
            logger.error("Gemini API request failed: %s", type(e).__name__)
            raise AnalysisError(ANALYSIS_FAILED_MESSAGE) from e

        return extract_text(result)


def extract_text(result: Dict[str, Any]) -> str:
    block_reason = (result.get("promptFeedback") or {}).get("blockReason")
    if block_reason:
        raise AnalysisError(f"The image could not be analyzed (blocked: {block_reason})")

    candidates = result.get("candidates") or []
    parts = []
    if candidates:
        parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
    if not text.strip():
        raise AnalysisError("No analysis was returned. Please try a different photo.")
    return text
