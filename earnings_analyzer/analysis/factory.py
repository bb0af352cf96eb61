from functools import partial

from earnings_analyzer.analysis.analyzer import Analyzer
from earnings_analyzer.analysis.base import BaseAnalysisProvider
from earnings_analyzer.analysis.gemini_client_adapter import GeminiClientAdapter
from earnings_analyzer.analysis.models import ProviderName
from earnings_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter
from earnings_analyzer.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analysis providers."""

    @classmethod
    def create_all(cls, settings: Settings) -> dict[ProviderName, BaseAnalysisProvider]:
        """Create one analyzer per supported provider."""
        return {provider: cls.create(provider, settings) for provider in ProviderName}

    @classmethod
    def create(cls, provider: ProviderName, settings: Settings) -> BaseAnalysisProvider:
        """Create an analyzer for a single provider from application settings."""
        if provider is ProviderName.GEMINI:
            return Analyzer(
                provider=provider,
                client_factory=partial(
                    cls._gemini_client,
                    timeout_seconds=settings.gemini_timeout_seconds,
                ),
                api_key=settings.gemini_api_key,
                model=settings.gemini_model_name,
                temperature=settings.analysis_temperature,
            )
        return Analyzer(
            provider=provider,
            client_factory=partial(
                cls._openai_client,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=settings.openai_base_url.strip() or None,
            ),
            api_key=settings.openai_api_key,
            model=settings.openai_model_name,
            temperature=settings.analysis_temperature,
        )

    @staticmethod
    def _gemini_client(api_key: str, *, timeout_seconds: int) -> GeminiClientAdapter:
        return GeminiClientAdapter(api_key=api_key, timeout_seconds=timeout_seconds)

    @staticmethod
    def _openai_client(
        api_key: str,
        *,
        timeout_seconds: int,
        base_url: str | None,
    ) -> OpenAIClientAdapter:
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=timeout_seconds,
            base_url=base_url,
        )
