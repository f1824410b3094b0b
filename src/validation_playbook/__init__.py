"""
Validation Playbook

Executable companion to the Pydantic / Annotated tutorials: the example
models, a FastAPI service around them and a LangGraph onboarding workflow.
"""

__version__ = "0.1.0"
