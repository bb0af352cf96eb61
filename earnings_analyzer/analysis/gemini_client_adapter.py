import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from earnings_analyzer.analysis.client_base import BaseAnalysisClient
from earnings_analyzer.analysis.exceptions import AnalysisTransportError, EmptyResponseError


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis AI client adapter built on the Google Generative AI SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        genai.configure(api_key=api_key)
        self._timeout_seconds = timeout_seconds

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        generative_model = genai.GenerativeModel(
            model_name=model,
            system_instruction=system_prompt,
            generation_config={
                "temperature": temperature,
                "response_mime_type": "application/json",
            },
        )
        try:
            response = generative_model.generate_content(
                user_prompt,
                request_options={"timeout": self._timeout_seconds},
            )
        except google_exceptions.DeadlineExceeded as exc:
            raise AnalysisTransportError(f"Gemini request failed with a timeout: {exc}") from exc
        except google_exceptions.GoogleAPIError as exc:
            raise AnalysisTransportError(
                f"Gemini request failed with an API error: {exc}"
            ) from exc

        try:
            content = response.text
        except ValueError as exc:
            # Raised by the SDK when the candidate has no text parts (e.g. blocked).
            raise EmptyResponseError(f"Gemini returned an empty response: {exc}") from exc
        if not content:
            raise EmptyResponseError("Gemini returned an empty response")
        return content
