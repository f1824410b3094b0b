"""
Node: Reviewer (HIL)

Pauses with interrupt() and waits for a human decision on the enriched
employee. The resume value is validated as ReviewInput; anything that does
not validate is treated as a revision request.
"""

from typing import Any, Optional

from langgraph.types import interrupt
from pydantic import BaseModel, Field, ValidationError

from validation_playbook.consts import OutcomeConsts, ReviewDecision
from validation_playbook.state import OnboardingState
from validation_playbook.validation import errors_from_exception


class ReviewInput(BaseModel):
    """Human review decision (resume value of the reviewer interrupt)."""
    decision: ReviewDecision
    comment: Optional[str] = Field(default=None, description="Reason or revision instructions")


def _coerce_review(value: Any) -> ReviewInput:
    if isinstance(value, str):
        value = {"decision": value.strip().lower()}
    try:
        return ReviewInput.model_validate(value)
    except ValidationError as e:
        reason = "; ".join(f"{d.loc}: {d.message}" for d in errors_from_exception(e))
        print(f"   ⚠️ Unreadable review input ({reason}); treating as revise.")
        return ReviewInput(decision=ReviewDecision.REVISE, comment=f"Invalid review input: {reason}")


def reviewer_node(state: OnboardingState) -> dict:
    """
    Reviewer node function.

    Returns:
        dict: review_decision / review_comment (routing happens in graph.py);
        outcome is set here for rejections since the graph ends right after.
    """
    print("--- REVIEWER (HIL) ---")

    value = interrupt(
        {
            "stage": "reviewer",
            "message": "Approve, revise or reject this employee.",
            "employee": state.get("employee"),
            "profile": state.get("profile"),
            "options": [d.value for d in ReviewDecision],
        }
    )

    review = _coerce_review(value)
    print(f"Received decision: {review.decision.value}")
    if review.comment:
        print(f"Comment: {review.comment}")

    update = {
        "review_decision": review.decision.value,
        "review_comment": review.comment,
        "audit_log": [f"reviewer: {review.decision.value}"],
    }
    if review.decision == ReviewDecision.REJECT:
        update["outcome"] = OutcomeConsts.REJECTED.value
    return update
