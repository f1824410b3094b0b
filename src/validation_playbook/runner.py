"""
Onboarding Runner

Thread-oriented driver around the compiled graph, used by the HTTP layer.
Every run is a LangGraph thread; the runner starts it, reads snapshots and
resumes the pending interrupt with Command(resume=...).
"""

import threading
import uuid
from typing import Any, Dict, List, Optional

from langgraph.types import Command
from pydantic import BaseModel, Field

from validation_playbook.consts import NodeConsts, STAGE_COMPLETED
from validation_playbook.graph import build_graph


class UnknownThreadError(KeyError):
    """No onboarding run exists for this thread id."""

    def __init__(self, thread_id: str):
        super().__init__(thread_id)
        self.thread_id = thread_id

    def __str__(self) -> str:
        return f"Unknown onboarding thread '{self.thread_id}'"


class StageMismatchError(RuntimeError):
    """The run is not waiting at the stage the caller tried to resume."""

    def __init__(self, thread_id: str, expected: str, actual: str):
        self.thread_id = thread_id
        self.expected = expected
        self.actual = actual
        super().__init__(f"Thread '{thread_id}' is at stage '{actual}', not '{expected}'")


class OnboardingStatus(BaseModel):
    """Snapshot of an onboarding run as exposed by the API."""
    thread_id: str
    stage: str
    outcome: Optional[str] = None
    employee: Optional[Dict[str, Any]] = None
    profile: Optional[Dict[str, Any]] = None
    validation_errors: List[Dict[str, Any]] = Field(default_factory=list)
    correction_attempts: int = 0
    employee_id: Optional[int] = None
    prompt: Optional[Any] = Field(default=None, description="Interrupt payload shown to the human")
    audit_log: List[str] = Field(default_factory=list)


def get_interrupt_value(snapshot: Any) -> Any:
    """First pending interrupt value of a snapshot, if any."""
    if hasattr(snapshot, "tasks") and snapshot.tasks:
        for task in snapshot.tasks:
            if hasattr(task, "interrupts") and task.interrupts:
                return task.interrupts[0].value
    return None


class OnboardingRunner:
    """Starts, inspects and resumes onboarding threads."""

    def __init__(self, graph=None):
        self.graph = graph if graph is not None else build_graph()
        self._threads: set = set()
        self._lock = threading.Lock()

    @staticmethod
    def _config(thread_id: str) -> dict:
        return {"configurable": {"thread_id": thread_id}}

    def _require(self, thread_id: str) -> None:
        with self._lock:
            known = thread_id in self._threads
        if not known:
            raise UnknownThreadError(thread_id)

    def start(self, payload: Dict[str, Any], thread_id: Optional[str] = None) -> OnboardingStatus:
        """Runs a new thread until its first interrupt (or the end)."""
        thread_id = thread_id or uuid.uuid4().hex
        with self._lock:
            self._threads.add(thread_id)
        print(f"🚀 [Runner] Starting onboarding thread {thread_id}")
        self.graph.invoke({"raw_payload": payload, "correction_attempts": 0}, config=self._config(thread_id))
        return self.status(thread_id)

    def status(self, thread_id: str) -> OnboardingStatus:
        self._require(thread_id)
        snapshot = self.graph.get_state(self._config(thread_id))
        values = snapshot.values or {}
        stage = str(snapshot.next[0]) if snapshot.next else STAGE_COMPLETED
        return OnboardingStatus(
            thread_id=thread_id,
            stage=stage,
            outcome=values.get("outcome"),
            employee=values.get("employee"),
            profile=values.get("profile"),
            validation_errors=values.get("validation_errors") or [],
            correction_attempts=values.get("correction_attempts") or 0,
            employee_id=values.get("employee_id"),
            prompt=get_interrupt_value(snapshot),
            audit_log=values.get("audit_log") or [],
        )

    def _resume(self, thread_id: str, expected: NodeConsts, value: Any) -> OnboardingStatus:
        current = self.status(thread_id)
        if current.stage != expected.value:
            raise StageMismatchError(thread_id, expected.value, current.stage)
        self.graph.invoke(Command(resume=value), config=self._config(thread_id))
        return self.status(thread_id)

    def submit_correction(
        self, thread_id: str, payload: Dict[str, Any], note: Optional[str] = None
    ) -> OnboardingStatus:
        """Resumes a correction_request interrupt with a new payload."""
        return self._resume(thread_id, NodeConsts.CORRECTION_REQUEST, {"raw_payload": payload, "note": note})

    def review(self, thread_id: str, decision: str, comment: Optional[str] = None) -> OnboardingStatus:
        """Resumes the reviewer interrupt with a decision."""
        return self._resume(thread_id, NodeConsts.REVIEWER, {"decision": decision, "comment": comment})
