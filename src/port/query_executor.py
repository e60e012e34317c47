from typing import Any, Protocol, Sequence


class QueryExecutor(Protocol):
    """Protocol for running parameterized SQL against the backing store.

    Statements use positional placeholders ($1, $2, ...). Each call is its
    own transaction. Unique-constraint violations raise DuplicateError;
    every other store failure raises InfrastructureError.
    """
    def execute(self, statement: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run a statement. Return result rows as column -> value dicts ([] if none)."""
        ...
