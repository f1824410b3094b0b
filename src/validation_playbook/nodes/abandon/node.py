"""
Node: Abandon

Terminal node reached when the payload is still invalid after the
configured number of correction attempts.
"""

from validation_playbook.consts import OutcomeConsts
from validation_playbook.state import OnboardingState


def abandon_node(state: OnboardingState) -> dict:
    attempts = state.get("correction_attempts", 0)
    print(f"🛑 [Node: Abandon] Giving up after {attempts} correction attempt(s).")
    return {
        "outcome": OutcomeConsts.ABANDONED.value,
        "audit_log": [f"abandon: still invalid after {attempts} correction(s)"],
    }
