"""Shared dependencies for API routes."""

from services.external_analysis import ExternalAnalysisClient, get_analysis_client


def get_external_client() -> ExternalAnalysisClient:
    return get_analysis_client()
