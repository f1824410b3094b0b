"""
Enrichment Module

Pure Python normalization and profile derivation (no external calls).
"""

from .node import enrich_node
from .logic import seniority_for_salary, suggest_work_email

__all__ = ["enrich_node", "seniority_for_salary", "suggest_work_email"]
