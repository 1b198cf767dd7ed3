"""
Tool descriptors telling the dispatcher how each tool may run.

A tool either executes as soon as the LLM calls it (``AutoExecuting``) or waits
for a human to approve the call (``ConfirmationRequired``). Approved calls run
the matching entry of ``executions`` in ``tools.py``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Union

from langchain_core.tools import BaseTool


@dataclass(frozen=True)
class AutoExecuting:
    handler: BaseTool

    def run(self, args: Dict[str, Any]) -> Any:
        return self.handler.invoke(args)


@dataclass(frozen=True)
class ConfirmationRequired:
    pass


ToolExecution = Union[AutoExecuting, ConfirmationRequired]


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    definition: Any  # a BaseTool or a pydantic schema, as accepted by bind_tools
    execution: ToolExecution

    @property
    def requires_confirmation(self) -> bool:
        return isinstance(self.execution, ConfirmationRequired)


def auto_executing(tool: BaseTool) -> ToolDescriptor:
    return ToolDescriptor(name=tool.name, definition=tool, execution=AutoExecuting(tool))


def confirmation_required(name: str, schema: Any) -> ToolDescriptor:
    return ToolDescriptor(name=name, definition=schema, execution=ConfirmationRequired())


def index_descriptors(descriptors: Iterable[ToolDescriptor]) -> Dict[str, ToolDescriptor]:
    index = {}
    for descriptor in descriptors:
        if descriptor.name in index:
            raise ValueError(f"Duplicate tool name: {descriptor.name}")
        index[descriptor.name] = descriptor
    return index
