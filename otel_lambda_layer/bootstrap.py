"""One-time bootstrap of the layer.

`bootstrap()` runs at import of `otel_wrapper`: reconcile the search path,
preload the handler's dependencies, configure the SDK. The returned
`BootstrapContext` is what the invocation wrapper is built from.
"""

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .config import LayerConfig
from .handler import InstrumentationHandler
from .logs import configure_logging
from .paths import reconcile_search_path
from .preload import preload_dependencies
from .result import Outcome
from .sdk import configure_sdk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapContext:
    config: LayerConfig
    search_paths: Outcome
    preload: Outcome

    @property
    def handler_file(self) -> str | None:
        if self.preload.ok:
            return self.preload.value.handler_file
        return None


def bootstrap(
    config: LayerConfig | None = None,
    *,
    loader: Callable[[str], object] = importlib.import_module,
    configure: Callable[[], None] | None = None,
) -> BootstrapContext:
    """Prepare the process for instrumented invocations.

    Search path and preload problems degrade; an SDK configuration error
    is raised.
    """
    if config is None:
        config = LayerConfig.from_env()
    configure_logging(config.log_level)

    search_paths = reconcile_search_path(config.package_roots)
    if search_paths.ok and search_paths.value:
        logger.debug("Added to sys.path: %s", search_paths.value)

    preload = preload_dependencies(config, loader=loader)
    if preload.ok:
        logger.info("Libraries in %s have been preloaded.", preload.value.handler_file)

    if configure is None:
        configure = configure_sdk
    configure()

    return BootstrapContext(config=config, search_paths=search_paths, preload=preload)


def make_invocation_wrapper(
    context: BootstrapContext,
    handler_factory: Callable[[str | None], Any] = InstrumentationHandler,
) -> Callable[[Any, Any], Any]:
    """Build the function the Lambda runtime calls for each invocation."""
    identifier = context.config.handler_identifier

    def lambda_handler(event, lambda_context):
        handler = handler_factory(identifier)
        return handler.call_wrapped(event, lambda_context)

    return lambda_handler
