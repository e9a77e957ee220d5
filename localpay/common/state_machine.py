"""Outcome transitions for a single payment submission."""

VALIDATING = "VALIDATING"
SUCCEEDED = "SUCCEEDED"
FAILED = "FAILED"

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    VALIDATING: {SUCCEEDED, FAILED},
    SUCCEEDED: set(),
    FAILED: set(),
}


def validate_transition(current: str, new: str) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise ValueError(f"Invalid transition: {current} -> {new}")

