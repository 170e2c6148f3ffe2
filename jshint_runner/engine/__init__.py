"""Lint engine adapters."""

from .base import DiagnosticHandler, Engine
from .jshint import JSHintEngine

__all__ = ["DiagnosticHandler", "Engine", "JSHintEngine"]
