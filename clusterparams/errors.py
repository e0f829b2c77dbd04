"""
clusterparams/errors.py

Errors raised while deriving deployment parameters. Every one of them is
fatal for the derivation call; a retry with the same input fails the same way.
"""

from __future__ import annotations


class ParameterDerivationError(Exception):
    """Base class for failures while deriving deployment parameters."""


class DuplicateKeyError(ParameterDerivationError):
    """Two derivation steps produced the same parameter name.

    Attributes:
        name (str): The colliding parameter name.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Parameter '{name}' is already defined")
        self.name = name


class UnknownImageKeyError(ParameterDerivationError):
    """The image table has no entry for the requested distro or cloud.

    Attributes:
        key (str): The distro (or cloud environment) that was looked up.
    """

    def __init__(self, key: str, table: str = "") -> None:
        where = f" in image table '{table}'" if table else ""
        super().__init__(f"No OS image entry for '{key}'{where}")
        self.key = key
        self.table = table


class MissingRequiredFieldError(ParameterDerivationError):
    """A field the derivation cannot do without is empty or absent.

    Attributes:
        field (str): Dotted path of the missing field, e.g. 'master_profile.vm_size'.
    """

    def __init__(self, field: str) -> None:
        super().__init__(f"Required field '{field}' is missing or empty")
        self.field = field


class SinkFinalizedError(ParameterDerivationError):
    """A parameter sink was written to after `finalize()`."""


__all__ = [
    "ParameterDerivationError",
    "DuplicateKeyError",
    "UnknownImageKeyError",
    "MissingRequiredFieldError",
    "SinkFinalizedError",
]
