"""LangGraph workflow definition for the trip agent."""

from langgraph.graph import StateGraph, END
from typing import Any
from langchain_core.messages import AIMessage

from ..config.settings import logging
from .state import InteractivePlanState
from .nodes import planner_agent_node, tool_executor_node

def route_after_planner(state: InteractivePlanState) -> str:
    """Routes from the planner based on the AI's response."""
    messages = state['messages']
    last_message = messages[-1] if messages else None

    if isinstance(last_message, AIMessage):
        if last_message.tool_calls:
            logging.info("Conditional Edge: Routing to tool executor.")
            return "call_tools"
        else:
            logging.info("Conditional Edge: Planner answered, ending turn.")
            return "respond"
    else:
        logging.warning(f"Conditional Edge: Unexpected message type after planner ({type(last_message)}). Routing to END.")
        return "error_end"

def route_after_tools(state: InteractivePlanState) -> str:
    """Pauses the turn when any tool call is waiting for the user."""
    if state.get('pending_confirmations'):
        logging.info("Conditional Edge: Waiting for user confirmation.")
        return "await_confirmation"
    return "continue"

def create_graph() -> StateGraph:
    """Creates and returns the LangGraph workflow."""
    workflow = StateGraph(InteractivePlanState)

    # Add nodes
    workflow.add_node("planner_agent", planner_agent_node)
    workflow.add_node("tool_executor", tool_executor_node)

    # Define edges
    workflow.set_entry_point("planner_agent")

    workflow.add_conditional_edges(
        "planner_agent",
        route_after_planner,
        {
            "call_tools": "tool_executor",
            "respond": END,
            "error_end": END
        }
    )

    workflow.add_conditional_edges(
        "tool_executor",
        route_after_tools,
        {
            "await_confirmation": END,
            "continue": "planner_agent"
        }
    )

    return workflow

def compile_graph() -> Any:
    """Compiles and returns the LangGraph application."""
    workflow = create_graph()
    try:
        app = workflow.compile()
        logging.info("Trip agent graph compiled successfully.")
        return app
    except Exception as compile_error:
        logging.error(f"Failed to compile LangGraph: {compile_error}", exc_info=True)
        return None
