"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import Any

import pytest


class ScriptedService:
    """Query service stub replaying scripted outcomes.

    Each outcome is either a response mapping (returned) or an exception
    instance (raised). Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        query_outcomes: list[Any],
        more_outcomes: dict[str, list[Any]] | None = None,
    ) -> None:
        self._query = list(query_outcomes)
        self._more = {token: list(outcomes) for token, outcomes in (more_outcomes or {}).items()}
        self.calls: list[tuple[str, str]] = []

    async def query(self, query_string: str) -> Any:
        self.calls.append(("query", query_string))
        return self._next(self._query)

    async def query_more(self, continuation_token: str) -> Any:
        self.calls.append(("query_more", continuation_token))
        return self._next(self._more[continuation_token])

    @staticmethod
    def _next(outcomes: list[Any]) -> Any:
        outcome = outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def scripted_service():
    """Factory for ScriptedService stubs."""
    return ScriptedService
