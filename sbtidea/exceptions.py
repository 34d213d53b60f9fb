"""Custom exceptions for sbtidea."""


class SbtIdeaError(Exception):
    """Base exception for all sbtidea errors."""


class TaskEvaluationError(SbtIdeaError):
    """Raised when a mandatory build task cannot be evaluated."""

    def __init__(self, task: str, reason: str = "task failed or not found"):
        self.task = task
        self.reason = reason
        super().__init__(f"Failed to evaluate task '{task}': {reason}")


class DependencyClasspathError(TaskEvaluationError):
    """Raised when the dependency classpath listing is unavailable."""


class ReportFormatError(SbtIdeaError):
    """Raised when an exported task-result file is malformed."""
