"""
Node: Intake - Payload Validation

This node validates the raw employee payload. It never raises on bad data;
failures are written to the state and the router sends the flow to a
correction request.
"""

from validation_playbook.models import EmployeeCreate
from validation_playbook.state import OnboardingState
from validation_playbook.validation import validate_payload


def intake_node(state: OnboardingState) -> dict:
    """
    Intake node function.

    Returns:
        dict: `employee` on success, `validation_errors` + `error` on failure
    """
    print("\n🧾 [Node: Intake] Validating employee payload...")

    report = validate_payload(EmployeeCreate, state.get("raw_payload"))

    if not report.valid:
        print(f"   {report.summary()}")
        for err in report.errors:
            print(f"   - {err.loc}: {err.message}")
        return {
            "validation_errors": [e.model_dump(mode="json") for e in report.errors],
            "error": report.summary(),
            "audit_log": [f"intake: {len(report.errors)} validation error(s)"],
        }

    print(f"   ✓ Payload accepted for {report.data['name']}")
    return {
        "employee": report.data,
        "validation_errors": [],
        "error": None,
        "audit_log": ["intake: payload valid"],
    }
