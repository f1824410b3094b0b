"""
Node: Register

Persists the approved employee in the store and records the new id.
The derived work email is re-validated first; a bad one is reported like
an intake error so the run returns to correction instead of failing.
"""

from validation_playbook.consts import OutcomeConsts
from validation_playbook.models import EmployeeCreate
from validation_playbook.state import OnboardingState
from validation_playbook.store import get_store
from validation_playbook.validation import PayloadValidationError, parse_or_raise


def register_node(state: OnboardingState) -> dict:
    employee = dict(state["employee"])
    profile = state.get("profile") or {}
    if employee.get("email") is None and profile.get("work_email"):
        employee["email"] = profile["work_email"]

    try:
        payload = parse_or_raise(EmployeeCreate, employee)
    except PayloadValidationError as e:
        print(f"⚠️ [Node: Register] Rejected by validation: {e}")
        return {
            "validation_errors": [err.model_dump(mode="json") for err in e.errors],
            "error": str(e),
            "audit_log": [f"register: {len(e.errors)} validation error(s)"],
        }

    record = get_store().employees.add(payload)
    print(f"🎉 [Node: Register] Employee #{record.id} registered: {record.name}")

    return {
        "employee_id": record.id,
        "outcome": OutcomeConsts.REGISTERED.value,
        "validation_errors": [],
        "error": None,
        "audit_log": [f"register: employee #{record.id}"],
    }
