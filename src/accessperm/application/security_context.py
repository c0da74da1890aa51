"""Current caller, carried across the async call chain."""

from contextvars import ContextVar, Token

from accessperm.domain.value_objects import Subject

_current_subject: ContextVar[Subject | None] = ContextVar("current_subject", default=None)


def get_current_subject() -> Subject | None:
    return _current_subject.get()


def set_current_subject(subject: Subject | None) -> Token:
    """Set the caller for the current context. Returns token for reset_current_subject."""
    return _current_subject.set(subject)


def reset_current_subject(token: Token) -> None:
    _current_subject.reset(token)
