"""
Node: Enrich - Profile Derivation

This node works on the validated employee only:
1. Normalizes the address (title-case city, upper-case country)
2. Derives seniority from salary
3. Suggests a work email when none was supplied
"""

from validation_playbook.nodes.enrich.logic import normalize_address, seniority_for_salary, suggest_work_email
from validation_playbook.settings import get_settings
from validation_playbook.state import OnboardingState


def enrich_node(state: OnboardingState) -> dict:
    """
    Enrich node function.

    Returns:
        dict: Normalized `employee` and the derived `profile`
    """
    employee = dict(state["employee"])
    print(f"\n🧩 [Node: Enrich] Building profile for {employee['name']}...")

    employee["address"] = normalize_address(employee["address"])

    seniority = seniority_for_salary(employee["salary"])
    profile = {
        "seniority": seniority.value,
        "skill_count": len(employee.get("skills") or []),
        "work_email": None,
    }
    if not employee.get("email"):
        profile["work_email"] = suggest_work_email(employee["name"], get_settings().company_domain)

    print(f"📊 [Profile] Seniority: {profile['seniority']} | Work email: {profile['work_email'] or employee['email']}")

    return {
        "employee": employee,
        "profile": profile,
        "audit_log": [f"enrich: seniority={profile['seniority']}"],
    }
