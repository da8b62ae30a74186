"""
Replay utilities for scripted editor sessions.
"""

from typing import Any, Iterable, Mapping

from interaction import InteractionState


def run_event_script(state: InteractionState, events: Iterable[Mapping[str, Any]]) -> None:
    """
    Feed events to the interaction state in order.

    Each event is a single-key mapping: {"click": [x, y]}, {"key": "l"} or
    {"text": "7"}.
    """
    for event in events:
        if len(event) != 1:
            raise ValueError(f"Event must have exactly one kind, got {dict(event)!r}")
        (kind, payload), = event.items()
        if kind == "click":
            x, y = payload
            state.click((float(x), float(y)))
        elif kind == "key":
            state.key(str(payload))
        elif kind == "text":
            state.text(str(payload))
        else:
            raise ValueError(f"Unknown event kind '{kind}'")
