"""
Tool-invocation contract shared by every agent function.

A function receives its typed arguments plus a ``FunctionOptions`` bundle
(provider lookup and a progress notifier) and always answers with a
``FunctionReturn``: failures are returned as tagged results, never raised.
"""
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Tuple

from pydantic import BaseModel

from amped_agent.chains import get_provider

Notifier = Callable[[str], Awaitable[None]]


class FunctionReturn(BaseModel):
    success: bool
    data: str


def to_result(data: str, error: bool = False) -> FunctionReturn:
    return FunctionReturn(success=not error, data=data)


async def print_notifier(message: str) -> None:
    print(f"⏳ {message}")


def collecting_notifier() -> Tuple[Notifier, List[str]]:
    """Returns a notifier that records every message, and the list it records into."""
    messages: List[str] = []

    async def notify(message: str) -> None:
        messages.append(message)

    return notify, messages


@dataclass
class FunctionOptions:
    get_provider: Callable[[int], Any] = field(default=get_provider)
    notify: Notifier = field(default=print_notifier)
