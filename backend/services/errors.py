"""Error taxonomy for the analysis services."""


class AnalysisError(Exception):
    """Base class for analysis failures surfaced to callers."""


class NotFoundError(AnalysisError):
    """Requested job title is not in the role catalog."""

    def __init__(self, job_title: str) -> None:
        self.job_title = job_title
        super().__init__(f'Job title "{job_title}" not found in database')


class ExtractionError(AnalysisError):
    """Upstream text extraction failed or produced no usable text."""


class ExternalServiceError(AnalysisError):
    """The external text-generation service failed to answer."""
