"""
Global Constants and Enums

This module contains system-wide constants and enumerations.
"""

from enum import Enum


class NodeConsts(str, Enum):
    """
    All node names of the onboarding graph.

    Inherits from str so the members can be used directly as node names in
    graph.py / main.py while keeping IDE completion and type safety.
    """

    # Phase 1: Intake & Correction
    INTAKE = "intake"
    CORRECTION_REQUEST = "correction_request"
    ABANDON = "abandon"

    # Phase 2: Enrichment
    ENRICH = "enrich"

    # Phase 3: Review & Registration
    REVIEWER = "reviewer"
    REGISTER = "register"

    def __str__(self) -> str:
        return self.value


class ReviewDecision(str, Enum):
    """
    Decisions a human reviewer can give at the review checkpoint.
    """

    APPROVE = "approve"
    REVISE = "revise"  # Back to correction_request
    REJECT = "reject"


class OutcomeConsts(str, Enum):
    """Terminal outcomes of an onboarding run."""

    REGISTERED = "registered"
    REJECTED = "rejected"
    ABANDONED = "abandoned"


class SeniorityBand(str, Enum):
    """
    Seniority derived from salary during enrichment.
    """

    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"


# Salary thresholds (lower bound inclusive) used by the enrich node
MID_SALARY_THRESHOLD = 50_000
SENIOR_SALARY_THRESHOLD = 100_000

# Stage reported once a thread has no pending node
STAGE_COMPLETED = "completed"
