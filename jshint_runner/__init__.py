"""Batch driver that runs JSHint over files and directories."""

from .models import Diagnostic, RunConfig, RunSummary, Severity
from .runner import Runner

__version__ = "0.1.0"

__all__ = ["Diagnostic", "RunConfig", "RunSummary", "Runner", "Severity", "__version__"]
