"""
Node: Correction Request (HIL)

Pauses the graph with interrupt() and waits for a corrected payload.
The driver (main.py / runner.py) resumes with Command(resume=...).
"""

from typing import Any, Dict, Optional, Tuple

from langgraph.types import interrupt

from validation_playbook.state import OnboardingState


def _parse_resume(value: Any, current: Dict[str, Any]) -> Tuple[Dict[str, Any], Optional[str]]:
    """
    Accepts {"raw_payload": {...}, "note": "..."} or a bare payload dict.
    Anything else keeps the current payload.
    """
    if isinstance(value, dict) and "raw_payload" in value:
        payload = value.get("raw_payload")
        note = value.get("note")
        return (payload if isinstance(payload, dict) else current), note
    if isinstance(value, dict):
        return value, None
    return current, None


def correction_request_node(state: OnboardingState) -> dict:
    """
    Correction Request node function.

    This node:
    1. Surfaces the validation errors and the current payload to the human
    2. Replaces raw_payload with the corrected one on resume
    3. Counts the attempt and routes back to Intake

    Returns:
        dict: Updated raw_payload, correction counters and history
    """
    print("--- CORRECTION REQUEST (HIL) ---")

    current = state.get("raw_payload") or {}
    attempts = state.get("correction_attempts", 0) or 0

    value = interrupt(
        {
            "stage": "correction_request",
            "message": "The employee payload needs corrections.",
            "errors": state.get("validation_errors", []),
            "raw_payload": current,
            "review_comment": state.get("review_comment"),
            "attempt": attempts + 1,
        }
    )

    payload, note = _parse_resume(value, current)
    note = note or f"correction #{attempts + 1}"
    print(f"✅ Corrected payload received ({note}). Returning to Intake...")

    return {
        "raw_payload": payload,
        "correction_attempts": attempts + 1,
        "correction_history": [note],
        "audit_log": [f"correction_request: {note}"],
    }
