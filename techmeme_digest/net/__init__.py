"""Networking utilities for single-attempt HTTP access."""

from .http import single_attempt_session

__all__ = ["single_attempt_session"]
