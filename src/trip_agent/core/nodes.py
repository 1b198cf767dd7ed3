"""Node definitions for the LangGraph workflow."""

import json
from typing import Dict, Any
from langchain_core.messages import SystemMessage, ToolMessage, AIMessage

from ..config.settings import (
    SYSTEM_PROMPT,
    GEMINI_API_KEY,
    GEMINI_MODEL_CONFIG,
    logging,
    google_exceptions
)
from .state import InteractivePlanState
from langchain_google_genai import ChatGoogleGenerativeAI

DENIED_MESSAGE = "Error: User denied access to tool execution"

def build_chat_model():
    """Creates the Gemini chat model, or None when no key is configured."""
    if not GEMINI_API_KEY:
        logging.error("GEMINI_API_KEY not set; the trip agent will answer with an unavailable notice.")
        return None
    try:
        model = ChatGoogleGenerativeAI(google_api_key=GEMINI_API_KEY, **GEMINI_MODEL_CONFIG)
    except Exception as e:
        logging.error(f"Could not create Gemini chat model for the trip agent: {e}", exc_info=True)
        return None
    logging.info(f"Trip agent chat model ready ({GEMINI_MODEL_CONFIG.get('model')}).")
    return model

llm = build_chat_model()

def planner_agent_node(state: InteractivePlanState) -> Dict[str, Any]:
    """
    Asks the model for the next turn of the trip conversation.

    The reply either answers the traveller or requests trip, map, email
    or scheduling tools; routing on that happens in the graph.
    """
    if llm is None:
        return {
            "messages": [AIMessage(content="Sorry, the trip agent is offline right now.")],
            "error_message": "LLM client failed to initialize."
        }

    history = state['messages']
    logging.info(f"Trip agent turn over {len(history)} messages; latest is {type(history[-1]).__name__}.")

    prompt = list(history)
    if not prompt or not isinstance(prompt[0], SystemMessage):
        prompt.insert(0, SystemMessage(content=SYSTEM_PROMPT))

    from ..utils.tools import tools
    model = llm.bind_tools(tools)

    try:
        reply = model.invoke(prompt)
    except google_exceptions.ResourceExhausted as e:
        logging.error(f"Gemini quota hit while planning: {e}")
        return {
            "messages": [AIMessage(content="Sorry, I've hit the model's usage limit. Please try again in a bit.")],
            "error_message": "Gemini API quota likely exceeded."
        }
    except Exception as e:
        logging.error(f"Trip agent model call failed: {e}", exc_info=True)
        return {
            "messages": [AIMessage(content=f"Sorry, something went wrong while planning: {e}")],
            "error_message": f"LLM Error: {e}"
        }

    if reply.tool_calls:
        logging.info(f"Trip agent requested tools: {[call['name'] for call in reply.tool_calls]}")
    else:
        logging.debug(f"Trip agent replied directly: {str(reply.content)[:120]}")
    return {"messages": [reply], "error_message": None}

def _serialize_output(tool_name: str, output: Any) -> str:
    if isinstance(output, str):
        return output
    try:
        return json.dumps(output)
    except TypeError as e:
        logging.error(f"Tool '{tool_name}' output is not JSON serializable: {e}. Output: {output}")
        return json.dumps({
            "error": f"Tool output serialization failed: {e}",
            "output_type": str(type(output))
        })

def tool_executor_node(state: InteractivePlanState) -> Dict[str, Any]:
    """Executes auto-executing tools and queues the rest for user confirmation."""
    logging.info("--- Running Node: tool_executor_node ---")
    messages = list(state['messages'])
    last_message = messages[-1]

    if not isinstance(last_message, AIMessage) or not last_message.tool_calls:
        logging.warning("Tool executor called, but last message has no tool calls.")
        return {}

    tool_calls = last_message.tool_calls
    logging.info(f"Dispatching {len(tool_calls)} tool calls: {[tc.get('name') for tc in tool_calls]}")

    from ..utils.tools import TOOL_DESCRIPTORS
    tool_messages = []
    pending = []

    for tool_call in tool_calls:
        tool_name = tool_call.get('name')
        tool_args = tool_call.get('args', {})
        tool_call_id = tool_call.get('id')

        if not tool_call_id:
             logging.error(f"Tool call missing 'id': {tool_call}")
             tool_messages.append(ToolMessage(
                 content=json.dumps({"error": "Tool call missing 'id'."}),
                 tool_call_id=f"error_missing_id_{tool_name}"
             ))
             continue

        descriptor = TOOL_DESCRIPTORS.get(tool_name)
        if descriptor is None:
            logging.warning(f"LLM called unknown tool: '{tool_name}'")
            tool_messages.append(ToolMessage(
                content=json.dumps({"error": f"Unknown tool '{tool_name}' called."}),
                tool_call_id=tool_call_id
            ))
            continue

        if descriptor.requires_confirmation:
            logging.info(f"Tool '{tool_name}' requires confirmation; waiting for the user.")
            pending.append({"name": tool_name, "args": tool_args, "id": tool_call_id})
            continue

        try:
            logging.info(f"Invoking tool: {tool_name} with args: {tool_args}")
            output = descriptor.execution.run(tool_args)
            output_content = _serialize_output(tool_name, output)
            logging.info(f"Tool '{tool_name}' executed successfully. Output snippet: {output_content[:200]}...")
            tool_messages.append(ToolMessage(content=output_content, tool_call_id=tool_call_id))
        except Exception as e:
            logging.error(f"Error executing tool '{tool_name}': {e}", exc_info=True)
            tool_messages.append(ToolMessage(
                content=json.dumps({"error": f"Execution failed: {e}"}),
                tool_call_id=tool_call_id
            ))

    return {"messages": tool_messages, "pending_confirmations": pending, "error_message": None}

def resolve_confirmation(tool_call: Dict[str, Any], approved: bool) -> ToolMessage:
    """Runs an approved tool call through ``executions``, or reports the denial."""
    tool_name = tool_call.get('name')
    tool_call_id = tool_call.get('id')

    if not approved:
        logging.info(f"User denied tool call '{tool_name}'.")
        return ToolMessage(content=DENIED_MESSAGE, tool_call_id=tool_call_id)

    from ..utils.tools import executions
    execute = executions.get(tool_name)
    if execute is None:
        logging.warning(f"No implementation registered for confirmed tool '{tool_name}'")
        return ToolMessage(
            content=json.dumps({"error": f"No implementation for tool '{tool_name}'."}),
            tool_call_id=tool_call_id
        )

    try:
        output = execute(**tool_call.get('args', {}))
        return ToolMessage(content=_serialize_output(tool_name, output), tool_call_id=tool_call_id)
    except Exception as e:
        logging.error(f"Error executing confirmed tool '{tool_name}': {e}", exc_info=True)
        return ToolMessage(
            content=json.dumps({"error": f"Execution failed: {e}"}),
            tool_call_id=tool_call_id
        )
