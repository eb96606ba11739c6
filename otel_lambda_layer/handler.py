"""Dispatch an invocation to the user's original handler."""

import logging
from importlib import import_module
from typing import Any

from .config import WRAPPER_HANDLER

logger = logging.getLogger(__name__)


class HandlerError(Exception):
    pass


def _module_name(module_path: str) -> str:
    return ".".join(module_path.split("/"))


class InstrumentationHandler:
    """Calls the original handler for one invocation.

    The function is looked up at call time so the version wrapped by the
    AWS Lambda instrumentor is the one that runs.
    """

    def __init__(self, identifier: str | None):
        if not identifier:
            raise HandlerError("ORIG_HANDLER is not defined.")
        if identifier == WRAPPER_HANDLER:
            raise HandlerError("ORIG_HANDLER must not point at the wrapper itself.")
        parts = identifier.rsplit(".", 1)
        if len(parts) != 2 or not all(parts):
            raise HandlerError(f"Value {identifier} for ORIG_HANDLER has invalid format.")
        self.identifier = identifier
        self.module_name = _module_name(parts[0])
        self.function_name = parts[1]

    def resolve(self):
        module = import_module(self.module_name)
        try:
            return getattr(module, self.function_name)
        except AttributeError as e:
            raise HandlerError(
                f"Handler {self.function_name} not found in module {self.module_name}."
            ) from e

    def call_wrapped(self, event: Any, context: Any) -> Any:
        function = self.resolve()
        logger.debug("Invoking %s", self.identifier)
        return function(event, context)
