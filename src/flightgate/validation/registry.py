"""Thread-safe registry for field predicates"""

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any

from flightgate.core.errors import ValidatorNotFoundError

logger = logging.getLogger(__name__)

_validators: dict[str, Callable[[Any], bool]] = {}
_validators_lock = Lock()


class ValidatorRegistry:
    """
    Thread-safe registry of named field predicates.

    Rules in the chain look predicates up by name, so a deployment can replace
    a built-in check (e.g. a stricter name pattern) without touching the chain.
    """

    @classmethod
    def register(cls, name: str) -> Callable:
        """
        Register a predicate function.

        Usage:
            @ValidatorRegistry.register("iata_code")
            def validate_iata_code(value: str) -> bool:
                return bool(re.fullmatch(r"[A-Z]{3}", value))

        Args:
            name: Semantic name for the predicate

        Returns:
            Decorator function
        """

        def decorator(func: Callable[[Any], bool]) -> Callable[[Any], bool]:
            with _validators_lock:
                if name in _validators:
                    logger.warning(
                        f"Validator '{name}' already registered, overwriting",
                        extra={"validator_name": name},
                    )
                _validators[name] = func
                logger.debug(
                    f"Registered validator '{name}'",
                    extra={"validator_name": name},
                )
            return func

        return decorator

    @classmethod
    def get(cls, name: str) -> Callable[[Any], bool]:
        """
        Get predicate by name.

        Raises:
            ValidatorNotFoundError: If predicate is not registered
        """
        with _validators_lock:
            if name not in _validators:
                raise ValidatorNotFoundError(
                    f"Validator '{name}' not registered. Available: {list(_validators.keys())}"
                )
            return _validators[name]

    @classmethod
    def validate(cls, name: str, value: Any) -> bool:
        """
        Check value using named predicate.

        Args:
            name: Predicate name
            value: Value to check

        Returns:
            True if valid, False otherwise
        """
        validator = cls.get(name)
        return bool(validator(value))

    @classmethod
    def list_validators(cls) -> list[str]:
        with _validators_lock:
            return list(_validators.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        with _validators_lock:
            return name in _validators

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a predicate if present (primarily for tests)."""
        with _validators_lock:
            _validators.pop(name, None)
