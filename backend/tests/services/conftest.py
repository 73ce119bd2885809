"""Service test fixtures — a scripted gateway that records every statement.

Invariants:
    - Results are consumed in call order; an exhausted script returns an empty result
    - A configured error is raised on every execute() call
"""

import pytest

from usuarios_api.infrastructure.database import StatementResult
from usuarios_api.services.usuario_service import UsuarioService


class ScriptedGateway:
    """Stands in for DatabaseGateway at the service boundary."""

    def __init__(self):
        self.statements = []
        self.results: list[StatementResult] = []
        self.error: Exception | None = None

    async def execute(self, statement, params=None):
        self.statements.append(statement)
        if self.error is not None:
            raise self.error
        return self.results.pop(0) if self.results else StatementResult()


@pytest.fixture
def scripted_gateway():
    return ScriptedGateway()


@pytest.fixture
def service(scripted_gateway):
    return UsuarioService(scripted_gateway)
