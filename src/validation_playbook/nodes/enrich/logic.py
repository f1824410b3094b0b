"""
Enrichment - Pure Helpers
"""

from typing import Any, Dict

from validation_playbook.consts import MID_SALARY_THRESHOLD, SENIOR_SALARY_THRESHOLD, SeniorityBand


def seniority_for_salary(salary: float) -> SeniorityBand:
    """junior < 50k <= mid < 100k <= senior"""
    if salary >= SENIOR_SALARY_THRESHOLD:
        return SeniorityBand.SENIOR
    if salary >= MID_SALARY_THRESHOLD:
        return SeniorityBand.MID
    return SeniorityBand.JUNIOR


def suggest_work_email(name: str, domain: str) -> str:
    """'Grace Hopper' -> 'grace.hopper@<domain>'"""
    parts = ["".join(c for c in word if c.isalnum()) for word in name.lower().split()]
    local = ".".join(p for p in parts if p) or "employee"
    return f"{local}@{domain}"


def normalize_address(address: Dict[str, Any]) -> Dict[str, Any]:
    normalized = dict(address)
    normalized["city"] = " ".join(w.capitalize() for w in str(address.get("city", "")).split())
    normalized["country"] = str(address.get("country", "")).upper()
    return normalized
