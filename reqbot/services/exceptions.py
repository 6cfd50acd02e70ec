"""Domain errors raised by the interview and summary services."""

from __future__ import annotations


class ProjectNotFoundError(ValueError):
    """Raised when a project ID does not match any stored project."""

    def __init__(self, project_id: int) -> None:
        super().__init__(f"Project {project_id} not found")
        self.project_id = project_id


class InterviewClosedError(RuntimeError):
    """Raised when a turn is appended to a project whose interview was summarized."""

    def __init__(self, project_id: int) -> None:
        super().__init__(
            f"Interview for project {project_id} is summarized; reopen it to continue"
        )
        self.project_id = project_id


class EmptyTranscriptError(ValueError):
    """Raised when a summary is requested for a project without conversation."""

    def __init__(self) -> None:
        super().__init__("No conversation history found for this project")


class SummaryExtractionError(RuntimeError):
    """Raised when extraction fails and the configured policy does not absorb it."""


class SummaryPersistenceError(RuntimeError):
    """Raised when the summary commit was rolled back."""
