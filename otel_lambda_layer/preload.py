"""Preload the libraries imported by the user's handler module.

Instrumentors can only patch a library that is imported after they are
installed, but some libraries do their interesting work at import time.
Importing the handler's dependencies first, then configuring the SDK,
means that work happens with the instrumentation already in place when the
handler module itself is imported.

Only literal import statements are found. Modules imported through a
computed name, or by other modules the handler imports, are not preloaded
here.
"""

import importlib
import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass

from .config import LayerConfig
from .result import Outcome

logger = logging.getLogger(__name__)

BOM = "\ufeff"

_IMPORT_PATTERN = re.compile(
    r"^[ \t]*(?:"
    r"from[ \t]+(?P<module>[A-Za-z_][\w.]*)[ \t]+import\b"
    r"|import[ \t]+(?P<names>[^\n#;\\(]+)"
    r")",
    re.MULTILINE,
)
_MODULE_NAME = re.compile(r"[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*\Z")


@dataclass(frozen=True)
class PreloadReport:
    handler_file: str
    libraries: tuple[str, ...] = ()
    loaded: tuple[str, ...] = ()
    failed: tuple[tuple[str, str], ...] = ()


def handler_module_path(identifier: str | None) -> str | None:
    """Module path of a handler identifier.

    `app.handler` gives `app`; both `pkg/app.handler` and `pkg.app.handler`
    give `pkg/app`.
    """
    if not identifier or "." not in identifier:
        return None
    module, _, function = identifier.rpartition(".")
    if not module or not function:
        return None
    return module.replace(".", "/")


def handler_source_path(identifier: str | None, task_root: str, extension: str = ".py") -> str | None:
    module_path = handler_module_path(identifier)
    if module_path is None:
        return None
    return os.path.join(task_root, module_path + extension)


def read_source(path: str) -> str:
    """Read a source file as UTF-8, tolerating a BOM and invalid bytes."""
    with open(path, "rb") as f:
        raw = f.read()
    source = raw.decode("utf-8", errors="replace")
    if source.startswith(BOM):
        source = source[len(BOM):]
    return source


def scan_dependencies(source: str) -> list[str]:
    """Module names from the import statements in source, in order."""
    libraries = []
    for match in _IMPORT_PATTERN.finditer(source):
        if match.group("module"):
            libraries.append(match.group("module"))
            continue
        for part in match.group("names").split(","):
            words = part.split()
            if words and _MODULE_NAME.match(words[0]):
                libraries.append(words[0])
    return libraries


def preload_dependencies(
    config: LayerConfig,
    loader: Callable[[str], object] = importlib.import_module,
) -> Outcome:
    """Import every library the handler module imports.

    A missing handler file is reported as a failed Outcome. A library that
    fails to import is logged and skipped; the rest are still attempted.
    """
    path = handler_source_path(config.handler_identifier, config.task_root, config.source_extension)
    if path is None or not os.path.isfile(path):
        logger.warning("Could not find the original handler file to preload libraries.")
        return Outcome.failure("handler file not found")

    handler_file = handler_module_path(config.handler_identifier)
    try:
        source = read_source(path)
    except OSError as e:
        logger.warning("Could not read handler file %s: %s", path, e)
        return Outcome.failure(str(e))

    libraries = scan_dependencies(source)
    loaded = []
    failed = []
    for lib in libraries:
        try:
            loader(lib)
        except Exception as e:
            logger.warning("Could not load library %s: %s", lib, e)
            failed.append((lib, str(e)))
        else:
            loaded.append(lib)

    return Outcome.success(PreloadReport(
        handler_file=handler_file,
        libraries=tuple(libraries),
        loaded=tuple(loaded),
        failed=tuple(failed),
    ))
