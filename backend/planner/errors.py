class PlannerError(Exception):
    """Base class for errors raised by the planner core."""


class SessionClosedError(PlannerError):
    """A planning session was mutated after it was committed or cancelled."""

    def __init__(self, session_id: str, state: str):
        self.session_id = session_id
        self.state = state
        super().__init__(f"Planning session {session_id} is already {state}")
