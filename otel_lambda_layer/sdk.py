"""OpenTelemetry SDK configuration.

Runs the same steps as `opentelemetry-instrument`: load the distro, let it
set its defaults, run the configurators (providers and exporters) and then
install instrumentors. The AWS Lambda instrumentor is one of them; it wraps
the function named by ORIG_HANDLER.
"""

import logging

# Private loaders: initialize() logs and swallows configuration errors.
from opentelemetry.instrumentation.auto_instrumentation._load import (
    _load_configurators,
    _load_distro,
    _load_instrumentors,
)

logger = logging.getLogger(__name__)


def configure_sdk(use_all: bool = True) -> None:
    """Configure the SDK. Errors propagate to the caller."""
    distro = _load_distro()
    distro.configure()
    _load_configurators()
    if use_all:
        _load_instrumentors(distro)
    logger.debug("OpenTelemetry configured with distro %s", type(distro).__name__)
