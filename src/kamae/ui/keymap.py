"""Key press to session event mapping."""

from typing import Dict, List, Optional, Tuple

from ..modules.session import SessionEvent


# Textual key name -> (event, footer description)
KEY_BINDINGS: Dict[str, Tuple[SessionEvent, str]] = {
    "up": (SessionEvent.MOVE_UP, "Up"),
    "k": (SessionEvent.MOVE_UP, "Up"),
    "down": (SessionEvent.MOVE_DOWN, "Down"),
    "j": (SessionEvent.MOVE_DOWN, "Down"),
    "space": (SessionEvent.TOGGLE_CURRENT, "Toggle"),
    "enter": (SessionEvent.CONFIRM, "Install"),
    "q": (SessionEvent.QUIT, "Quit"),
    "ctrl+c": (SessionEvent.QUIT, "Quit"),
}


def key_to_event(key: str) -> Optional[SessionEvent]:
    """Translate a Textual key name into a session event, or None if unbound."""
    binding = KEY_BINDINGS.get(key)
    return binding[0] if binding else None


def keys_for(event: SessionEvent) -> List[str]:
    """All keys bound to ``event``, in declaration order."""
    return [key for key, (bound, _) in KEY_BINDINGS.items() if bound is event]
