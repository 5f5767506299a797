"""
LLM Client - Handles communication with the Gemini text generation API
"""
import httpx
import structlog
from typing import Dict, Any, Optional

from analytics_relay.core.errors import AiRequestError, AiEmptyResponseError

logger = structlog.get_logger()


class GeminiClient:
    """
    Client for the Gemini generateContent endpoint.
    The generated text is returned as-is; no post-processing is applied.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    @staticmethod
    def build_request_body(prompt: str) -> Dict[str, Any]:
        return {
            "contents": [
                {"role": "user", "parts": [{"text": prompt}]}
            ]
        }

    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: The prompt to send to the model

        Returns:
            Text of the first candidate

        Raises:
            AiRequestError: Gemini answered with a non-success status
            AiEmptyResponseError: No candidate text in the response
        """
        logger.info("Calling Gemini", model=self.model, prompt_chars=len(prompt))

        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                self.endpoint,
                params={"key": self.api_key},
                json=self.build_request_body(prompt),
                timeout=self.timeout
            )

            if not response.is_success:
                logger.error(
                    "Gemini request failed",
                    status=response.status_code,
                    body=response.text[:500]
                )
                raise AiRequestError(response.status_code)

            try:
                data = response.json()
            except ValueError:
                logger.error("Gemini returned a non-JSON body", body=response.text[:500])
                raise AiEmptyResponseError()

        text = self.extract_text(data)
        if text is None:
            logger.error("Gemini returned no candidate text", response=data)
            raise AiEmptyResponseError()

        return text

    @staticmethod
    def extract_text(data: Any) -> Optional[str]:
        """Text of candidates[0].content.parts[0], or None when absent"""
        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None
