"""Selection session - cursor, selected set and terminal outcome.

A Session is an immutable value. Every key press becomes a SessionEvent and
``transition`` returns the next Session; the event loop keeps only the
latest one.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Sequence

from .catalog import CatalogItem, default_selection
from .errors import SessionNotFinishedError


class SessionEvent(Enum):
    """Closed set of events a session understands."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE_CURRENT = "toggle_current"
    CONFIRM = "confirm"
    QUIT = "quit"


class SessionOutcome(Enum):
    """How a session ended, if it has."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    QUIT = "quit"


@dataclass(frozen=True)
class Session:
    """Cursor and selection state for one interactive run.

    Attributes:
        size: Number of items in the catalog the indices refer to
        cursor: Index of the highlighted item (0 for an empty catalog)
        selected: Indices of the checked items
        outcome: Pending until a confirm or quit event is processed
    """
    size: int
    cursor: int = 0
    selected: FrozenSet[int] = frozenset()
    outcome: SessionOutcome = SessionOutcome.PENDING

    @property
    def terminal(self) -> bool:
        """True once the session was confirmed or quit."""
        return self.outcome is not SessionOutcome.PENDING

    @property
    def confirmed(self) -> bool:
        return self.outcome is SessionOutcome.CONFIRMED

    @property
    def cancelled(self) -> bool:
        return self.outcome is SessionOutcome.QUIT

    def is_selected(self, index: int) -> bool:
        """Check whether the item at ``index`` is checked."""
        return index in self.selected

    def final_selection(self) -> FrozenSet[int]:
        """The indices to install.

        Quitting discards whatever is checked; only a confirmed session
        yields its selected set.

        Raises:
            SessionNotFinishedError: If the session is still pending
        """
        if self.outcome is SessionOutcome.PENDING:
            raise SessionNotFinishedError("Session has not been confirmed or quit yet")
        if self.outcome is SessionOutcome.QUIT:
            return frozenset()
        return self.selected


def new_session(catalog: Sequence[CatalogItem]) -> Session:
    """Create a fresh session with the recommended items pre-selected."""
    return Session(size=len(catalog), selected=default_selection(catalog))


def transition(session: Session, event: Optional[SessionEvent]) -> Session:
    """Apply one event and return the resulting session.

    Unrecognized events, and any event after the session has ended, leave the
    session unchanged.
    """
    if session.terminal or not isinstance(event, SessionEvent):
        return session

    if event is SessionEvent.MOVE_UP:
        return replace(session, cursor=max(0, session.cursor - 1))

    if event is SessionEvent.MOVE_DOWN:
        last_index = max(0, session.size - 1)
        return replace(session, cursor=min(last_index, session.cursor + 1))

    if event is SessionEvent.TOGGLE_CURRENT:
        if session.size == 0:
            return session
        return replace(session, selected=session.selected ^ {session.cursor})

    if event is SessionEvent.CONFIRM:
        return replace(session, outcome=SessionOutcome.CONFIRMED)

    if event is SessionEvent.QUIT:
        return replace(session, outcome=SessionOutcome.QUIT)

    return session


def run_events(session: Session, events: Iterable[Optional[SessionEvent]]) -> Session:
    """Fold a sequence of events into a session, stopping at the first terminal state."""
    for event in events:
        session = transition(session, event)
        if session.terminal:
            break
    return session


def confirm_defaults(catalog: Sequence[CatalogItem]) -> Session:
    """Non-interactive session: the default selection, confirmed immediately."""
    return transition(new_session(catalog), SessionEvent.CONFIRM)
