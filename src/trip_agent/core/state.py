"""State definitions for the trip agent workflow."""

from typing import TypedDict, Annotated, Sequence, Optional, Dict, Any, List
import operator
from langchain_core.messages import BaseMessage

class InteractivePlanState(TypedDict):
    """State definition for the interactive chat workflow."""
    # Primary driver: the conversation history
    messages: Annotated[Sequence[BaseMessage], operator.add]

    # Tool calls waiting for the user to approve or deny them
    pending_confirmations: List[Dict[str, Any]]

    # Error tracking for the current turn
    error_message: Optional[str]
