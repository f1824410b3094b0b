"""
Global State Definition for the Onboarding Workflow

This module defines the TypedDict structure that represents the shared state
across all nodes in the LangGraph workflow.

Only plain dicts / lists / scalars live here so the checkpointer can store
every snapshot without custom serializers.
"""

from typing import TypedDict, Annotated, List, Dict, Optional, Any
import operator


class OnboardingState(TypedDict):
    """
    Global State object for the employee onboarding graph.
    """
    # --- 1. Input ---
    raw_payload: Dict[str, Any]   # Unvalidated employee payload (as submitted / corrected)

    # --- 2. Phase 1: Intake & Correction ---
    employee: Dict[str, Any]      # EmployeeCreate dump once the payload validates
    validation_errors: List[Dict[str, Any]]  # ErrorDetail dumps from the last intake
    correction_history: Annotated[List[str], operator.add]  # Notes left with each correction
    correction_attempts: int
    error: Optional[str]

    # --- 3. Phase 2: Enrichment ---
    profile: Dict[str, Any]       # e.g., {"seniority": "mid", "work_email": "...", "skill_count": 2}

    # --- 4. Phase 3: Review & Registration ---
    review_decision: str          # "approve", "revise", "reject"
    review_comment: Optional[str]
    employee_id: Optional[int]
    outcome: Optional[str]        # "registered", "rejected", "abandoned"

    # --- 5. Audit ---
    audit_log: Annotated[List[str], operator.add]
