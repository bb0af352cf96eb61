import httpx
import openai

from earnings_analyzer.analysis.client_base import BaseAnalysisClient
from earnings_analyzer.analysis.exceptions import AnalysisTransportError, EmptyResponseError


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisTransportError(
                f"OpenAI request failed with a network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise AnalysisTransportError(
                f"OpenAI request failed with an API error: {exc}"
            ) from exc

        if not response.choices:
            raise EmptyResponseError("OpenAI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise EmptyResponseError("OpenAI returned an empty response")
        return content
