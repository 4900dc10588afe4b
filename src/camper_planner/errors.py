"""Planner exceptions."""

from __future__ import annotations


class PlanningValidationError(ValueError):
    """Raised when the planning input cannot produce a plan at all."""
