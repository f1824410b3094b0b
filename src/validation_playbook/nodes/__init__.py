"""
Node Modules for the Onboarding Workflow

This package contains all node implementations for the LangGraph workflow:
- intake: validates the raw employee payload
- correction_request: human-in-the-loop payload correction
- enrich: normalizes the address and derives the hire profile
- reviewer: human-in-the-loop approval
- register: persists the approved employee
- abandon: terminal node once corrections are exhausted
"""
