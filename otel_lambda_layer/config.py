"""Layer configuration read from the Lambda environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_TASK_ROOT = "/var/task"
DEFAULT_LAYER_DIR = "/opt/python"
SOURCE_EXTENSION = ".py"
WRAPPER_HANDLER = "otel_wrapper.lambda_handler"

PACKAGE_PATH_VAR = "LAYER_PACKAGE_PATH"
PACKAGE_HOME_VAR = "LAYER_PACKAGE_HOME"
HANDLER_VARS = ("ORIG_HANDLER", "_HANDLER")


def _first_non_empty(environ: Mapping[str, str], names) -> str | None:
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return None


def _package_roots(environ: Mapping[str, str]) -> tuple[str, ...]:
    """Roots from LAYER_PACKAGE_PATH, falling back to LAYER_PACKAGE_HOME."""
    raw = _first_non_empty(environ, (PACKAGE_PATH_VAR, PACKAGE_HOME_VAR))
    if not raw:
        return ()
    roots = []
    for root in raw.split(os.pathsep):
        root = root.strip()
        if root and root not in roots:
            roots.append(root)
    return tuple(roots)


@dataclass(frozen=True)
class LayerConfig:
    """Snapshot of the environment the bootstrap runs against."""
    package_roots: tuple[str, ...] = ()
    handler_identifier: str | None = None
    task_root: str = DEFAULT_TASK_ROOT
    source_extension: str = SOURCE_EXTENSION
    log_level: str = "info"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LayerConfig":
        if environ is None:
            environ = os.environ
        return cls(
            package_roots=_package_roots(environ),
            handler_identifier=_first_non_empty(environ, HANDLER_VARS),
            task_root=environ.get("LAMBDA_TASK_ROOT") or DEFAULT_TASK_ROOT,
            log_level=environ.get("OTEL_LOG_LEVEL", "info"),
        )
