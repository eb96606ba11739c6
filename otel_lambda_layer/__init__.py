"""OpenTelemetry bootstrap layer for AWS Lambda Python functions."""

from .bootstrap import BootstrapContext, bootstrap, make_invocation_wrapper
from .config import LayerConfig
from .handler import HandlerError, InstrumentationHandler
from .result import Outcome

__all__ = [
    "BootstrapContext",
    "HandlerError",
    "InstrumentationHandler",
    "LayerConfig",
    "Outcome",
    "bootstrap",
    "make_invocation_wrapper",
]
__version__ = "0.1.0"
