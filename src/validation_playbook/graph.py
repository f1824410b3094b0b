"""
LangGraph Workflow - Employee Onboarding

Architecture Highlights:

1. Intake validation with a human correction loop (bounded by Config.max_correction_attempts)

2. Pure enrichment step (address normalization, seniority, work email)

3. Human review with approve / revise / reject routing

4. Registration re-validates the final record; failures re-enter the correction loop

Both human checkpoints pause inside the node via interrupt(); drivers resume
with Command(resume=...).
"""

from langgraph.graph import StateGraph, START, END
from langgraph.checkpoint.memory import MemorySaver

from validation_playbook.consts import NodeConsts, OutcomeConsts, ReviewDecision
from validation_playbook.settings import get_settings
from validation_playbook.state import OnboardingState

# --- Node Imports ---

from validation_playbook.nodes.intake import intake_node
from validation_playbook.nodes.correction_request import correction_request_node
from validation_playbook.nodes.abandon import abandon_node
from validation_playbook.nodes.enrich import enrich_node
from validation_playbook.nodes.reviewer import reviewer_node
from validation_playbook.nodes.register import register_node


# --- Routing Logic ---

def route_intake(state: OnboardingState) -> str:
    """
    Phase 1 Router: Valid vs. Needs Correction vs. Give Up
    """
    if state.get("validation_errors"):
        attempts = state.get("correction_attempts", 0) or 0
        if attempts >= get_settings().max_correction_attempts:
            print(f"🛑 [Router] Intake: Still invalid after {attempts} attempt(s) -> Abandon")
            return NodeConsts.ABANDON
        print("❓ [Router] Intake: Invalid payload -> Correction Request")
        return NodeConsts.CORRECTION_REQUEST

    print("✅ [Router] Intake: Payload valid -> Enrich")
    return NodeConsts.ENRICH


def route_reviewer(state: OnboardingState) -> str:
    """
    Phase 3 Router: Review Decision
    """
    decision = state.get("review_decision", ReviewDecision.REVISE.value)

    if decision == ReviewDecision.APPROVE:
        print("🎉 [Router] Review: Approved -> Register")
        return NodeConsts.REGISTER

    elif decision == ReviewDecision.REJECT:
        print("⛔ [Router] Review: Rejected -> Workflow End")
        return END

    print("🔄 [Router] Review: Revision requested -> Correction Request")
    return NodeConsts.CORRECTION_REQUEST


def route_register(state: OnboardingState) -> str:
    """
    Phase 4 Router: Registered vs. Rejected at Registration
    """
    if state.get("outcome") == OutcomeConsts.REGISTERED:
        print("🏁 [Router] Register: Stored -> Workflow End")
        return END

    print("⚠️ [Router] Register: Final payload invalid")
    return route_intake(state)


# --- Graph Construction ---

def build_graph(checkpointer=None):
    """
    Constructs the onboarding graph.

    Args:
        checkpointer: LangGraph checkpointer; defaults to an in-process MemorySaver
            (interrupts need one to resume).
    """
    workflow = StateGraph(OnboardingState)

    # 1. Add All Nodes
    # ----------------
    workflow.add_node(NodeConsts.INTAKE, intake_node)
    workflow.add_node(NodeConsts.CORRECTION_REQUEST, correction_request_node)  # Human Editor
    workflow.add_node(NodeConsts.ABANDON, abandon_node)
    workflow.add_node(NodeConsts.ENRICH, enrich_node)
    workflow.add_node(NodeConsts.REVIEWER, reviewer_node)  # Human Reviewer
    workflow.add_node(NodeConsts.REGISTER, register_node)

    # 2. Define Edges (The Flow)
    # --------------------------
    workflow.add_edge(START, NodeConsts.INTAKE)

    # Phase 1: Correction Loop
    workflow.add_conditional_edges(
        NodeConsts.INTAKE,
        route_intake,
        {
            NodeConsts.CORRECTION_REQUEST: NodeConsts.CORRECTION_REQUEST,
            NodeConsts.ENRICH: NodeConsts.ENRICH,
            NodeConsts.ABANDON: NodeConsts.ABANDON,
        },
    )
    workflow.add_edge(NodeConsts.CORRECTION_REQUEST, NodeConsts.INTAKE)  # Re-validate
    workflow.add_edge(NodeConsts.ABANDON, END)

    # Phase 2: Enrichment
    workflow.add_edge(NodeConsts.ENRICH, NodeConsts.REVIEWER)

    # Phase 3: Review
    workflow.add_conditional_edges(
        NodeConsts.REVIEWER,
        route_reviewer,
        {
            NodeConsts.REGISTER: NodeConsts.REGISTER,
            NodeConsts.CORRECTION_REQUEST: NodeConsts.CORRECTION_REQUEST,
            END: END,
        },
    )
    workflow.add_conditional_edges(
        NodeConsts.REGISTER,
        route_register,
        {
            NodeConsts.CORRECTION_REQUEST: NodeConsts.CORRECTION_REQUEST,
            NodeConsts.ABANDON: NodeConsts.ABANDON,
            END: END,
        },
    )

    # 3. Compile
    return workflow.compile(checkpointer=checkpointer or MemorySaver())
