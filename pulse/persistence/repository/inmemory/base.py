"""Shared state handling for in-memory repositories."""

import copy
from typing import Any


class InMemoryRepository:
    """Base for in-memory repositories.

    All state lives in underscore-prefixed attributes so a transaction can
    snapshot and restore it. Domain models are immutable, so shallow copies
    of the containers are enough.
    """

    def snapshot(self) -> dict[str, Any]:
        """Copy the repository state."""
        return {
            name: copy.copy(value)
            for name, value in vars(self).items()
            if name.startswith("_")
        }

    def restore(self, state: dict[str, Any]) -> None:
        """Put back a state taken with ``snapshot``."""
        for name, value in state.items():
            setattr(self, name, value)
