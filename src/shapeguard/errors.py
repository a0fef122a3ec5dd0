"""Error types raised at predicate construction time and by boundary assertions."""

from __future__ import annotations


class PredicateConstructionError(TypeError):
    """Raised when a predicate factory receives arguments that violate its contract."""

    def __init__(self, factory: str, message: str) -> None:
        self.factory = factory
        self.detail = message
        super().__init__(f"{factory}: {message}")


class AssertError(ValueError):
    """Raised by ``assert_type``/``ensure`` when a value does not satisfy a predicate."""

    def __init__(self, message: str, *, rendered_value: str, predicate_name: str) -> None:
        self.rendered_value = rendered_value
        self.predicate_name = predicate_name
        super().__init__(message)


__all__ = ["AssertError", "PredicateConstructionError"]
