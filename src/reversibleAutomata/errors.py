"""Exception types raised by the analysis operations."""

from __future__ import annotations


class DomainError(ValueError):
    """An analysis was requested for an automaton it does not apply to.

    Raised for example when asking for the characteristic polynomial of a
    non-elementary or non-additive automaton. The automaton itself stays
    valid.
    """


__all__ = ["DomainError"]
