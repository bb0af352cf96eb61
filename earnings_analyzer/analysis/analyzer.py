"""AI-powered earnings transcript analyzer."""

import json
import re
from collections.abc import Callable
from pathlib import Path

from earnings_analyzer.analysis.base import BaseAnalysisProvider
from earnings_analyzer.analysis.client_base import BaseAnalysisClient
from earnings_analyzer.analysis.exceptions import (
    AnalysisError,
    AnalysisTransportError,
    EmptyResponseError,
    MalformedResponseError,
    MissingCredentialError,
)
from earnings_analyzer.analysis.models import AnalysisResult, ProviderName
from earnings_analyzer.analysis.prompt_loader import load_json_schema, load_prompt_template
from earnings_analyzer.analysis.validator import validate_and_build
from earnings_analyzer.logging.logger import Log

ClientFactory = Callable[[str], BaseAnalysisClient]

DEFAULT_SYSTEM_PROMPT = (
    "You are a financial analyst reviewing earnings call transcripts. "
    "Respond with a single valid JSON object only."
)

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


class Analyzer(BaseAnalysisProvider):
    """Analyzes transcript text with one AI provider.

    The vendor client is built per call from the API key, so a missing key
    fails before any SDK client or network request exists.
    """

    def __init__(
        self,
        *,
        provider: ProviderName,
        client_factory: ClientFactory,
        api_key: str,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._provider = provider
        self._client_factory = client_factory
        self._api_key = api_key
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    @property
    def provider(self) -> ProviderName:
        return self._provider

    def analyze(self, text: str) -> AnalysisResult:
        """Send transcript text to the provider and build a validated result."""
        label = self._provider.label
        api_key = self._api_key.strip()
        if not api_key:
            raise MissingCredentialError(f"{label} API key is not configured")

        prompt = self._build_prompt(text)
        Log.debug(f"{label} analysis prompt:\n{prompt}")

        raw_response = self._call_ai(api_key, prompt)
        Log.debug(f"{label} raw response:\n{raw_response}")

        if not raw_response.strip():
            raise EmptyResponseError(f"{label} returned an empty response")
        parsed = self._parse_json(raw_response)
        result = validate_and_build(parsed)

        Log.info(f"{label} analysis complete: {len(result.key_themes)} key themes extracted")
        return result

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(
            transcript_text=text,
            json_schema=self._json_schema,
        )

    def _call_ai(self, api_key: str, prompt: str) -> str:
        try:
            client = self._client_factory(api_key)
            return client.create_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except AnalysisError:
            raise
        except Exception as exc:
            raise AnalysisTransportError(f"{self._provider.label} request failed: {exc}") from exc

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        fenced = _FENCE_RE.match(cleaned)
        if fenced:
            cleaned = fenced.group(1)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise MalformedResponseError("JSON response must be an object")
        return parsed
