"""
Validation Playbook - CLI Entry Point (LangGraph v1.0 Style)

Commands:
1. `onboard [payload.json]`: interactive driver for the onboarding graph. Nodes
   pause with `interrupt()`, the driver resumes with `Command(resume=...)`.
2. `docs [out.md]`: prints or writes the markdown model reference.
3. `serve`: runs the FastAPI app with uvicorn.
"""

import argparse
import json
import sys
from typing import Any, Optional

from dotenv import load_dotenv
from langgraph.types import Command

from validation_playbook.consts import NodeConsts, ReviewDecision
from validation_playbook.docs import render_reference, write_reference
from validation_playbook.graph import build_graph
from validation_playbook.models import EmployeeCreate
from validation_playbook.runner import get_interrupt_value

# Load environment variables
load_dotenv()


def _sample_payload() -> dict:
    return dict(EmployeeCreate.model_config["json_schema_extra"]["examples"][0])


def _load_payload(path: Optional[str]) -> dict:
    if not path:
        print("ℹ️ No payload file given, using the built-in example employee.")
        return _sample_payload()
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _prompt_correction(interrupt_val: Any) -> dict:
    """Asks for a field=value patch (or a full JSON object) on top of the current payload."""
    current = dict((interrupt_val or {}).get("raw_payload") or {})
    for err in (interrupt_val or {}).get("errors", []):
        print(f"   - {err['loc']}: {err['message']}")
    if (interrupt_val or {}).get("review_comment"):
        print(f"   💬 Reviewer: {interrupt_val['review_comment']}")

    raw = input(">> Enter a full JSON payload, or field=value (e.g. salary=85000): ").strip()
    if raw.startswith("{"):
        try:
            return {"raw_payload": json.loads(raw), "note": "full payload replaced"}
        except json.JSONDecodeError as e:
            print(f"❌ Invalid JSON ({e}); keeping the current payload.")
            return {"raw_payload": current, "note": "invalid JSON ignored"}

    if "=" in raw:
        key, value = raw.split("=", 1)
        target = current
        *parents, leaf = key.strip().split(".")
        for part in parents:
            target = target.setdefault(part, {})
        target[leaf] = value.strip()
        return {"raw_payload": current, "note": f"set {key.strip()}"}

    return {"raw_payload": current, "note": "no change"}


def _prompt_review(interrupt_val: Any) -> dict:
    employee = (interrupt_val or {}).get("employee") or {}
    profile = (interrupt_val or {}).get("profile") or {}
    print(f"   👤 {employee.get('name')} | {employee.get('position')} | {employee.get('department')}")
    print(f"   📊 Seniority: {profile.get('seniority')} | Work email: {profile.get('work_email')}")
    print("Options: [A] Approve  [R] Revise  [X] Reject")
    choice = input(">> Decision: ").strip().upper()

    if choice == "X":
        return {"decision": ReviewDecision.REJECT.value, "comment": input(">> Reason: ") or None}
    if choice == "R":
        return {"decision": ReviewDecision.REVISE.value, "comment": input(">> What should change: ") or None}
    return {"decision": ReviewDecision.APPROVE.value}


def run_onboarding(payload_path: Optional[str] = None) -> int:
    print("🚀 Starting employee onboarding (LangGraph v1.0 Driver)...")

    # 1. Initialize Graph
    app = build_graph()
    config = {"configurable": {"thread_id": "cli_onboarding"}}

    # 2. Initial Input
    current_input: Any = {"raw_payload": _load_payload(payload_path), "correction_attempts": 0}

    # 3. Interactive Loop (The Driver)
    while True:
        try:
            for event in app.stream(current_input, config=config):
                for node_name in event:
                    if node_name != "__interrupt__":
                        print(f"   ✓ {node_name} done")
        except Exception as e:
            print(f"❌ Runtime error: {e}")
            return 1

        # 4. Check State (Snapshot)
        snapshot = app.get_state(config)
        if not snapshot.next:
            values = snapshot.values
            print(f"\n🏁 Workflow finished: {values.get('outcome')}")
            if values.get("employee_id"):
                print(f"   Employee id: {values['employee_id']}")
            for line in values.get("audit_log", []):
                print(f"   · {line}")
            return 0

        # 5. Handle Interrupts
        next_node = snapshot.next[0]
        interrupt_val = get_interrupt_value(snapshot)
        print(f"\n🛑 Paused for human input at [{next_node}]")
        if interrupt_val:
            print(f"   📢 {interrupt_val.get('message')}")

        if next_node == NodeConsts.CORRECTION_REQUEST:
            current_input = Command(resume=_prompt_correction(interrupt_val))
        elif next_node == NodeConsts.REVIEWER:
            current_input = Command(resume=_prompt_review(interrupt_val))
        else:
            print(f"⚠️ Unexpected pause at node: {next_node}")
            user_in = input(">> Resume value (Enter to continue): ")
            current_input = Command(resume=user_in or None)


def run_docs(output: Optional[str] = None) -> int:
    if output:
        write_reference(output)
    else:
        print(render_reference())
    return 0


def run_server(host: str, port: int) -> int:
    import uvicorn

    uvicorn.run("validation_playbook.api:app", host=host, port=port)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validation Playbook")
    sub = parser.add_subparsers(dest="command")

    onboard = sub.add_parser("onboard", help="Run the interactive onboarding workflow")
    onboard.add_argument("payload", nargs="?", help="JSON file with the employee payload")

    docs = sub.add_parser("docs", help="Render the markdown model reference")
    docs.add_argument("output", nargs="?", help="Write to this file instead of stdout")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    if args.command == "docs":
        return run_docs(args.output)
    if args.command == "serve":
        return run_server(args.host, args.port)
    return run_onboarding(getattr(args, "payload", None))


if __name__ == "__main__":
    sys.exit(main())
