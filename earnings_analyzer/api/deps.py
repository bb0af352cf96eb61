from fastapi import Request

from earnings_analyzer.config.settings import Settings
from earnings_analyzer.processor.processor import Processor
from earnings_analyzer.storage.repositories.transcript_repository import TranscriptRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> TranscriptRepository:
    return request.app.state.repository


def get_processor(request: Request) -> Processor:
    return request.app.state.processor
