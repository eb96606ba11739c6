"""Exec wrapper that routes a Lambda function through the layer.

The `otel-instrument` launcher at the root of this repository goes in the
root of the layer zip, next to `python/`, so it is unpacked as
`/opt/otel-instrument`. Set `AWS_LAMBDA_EXEC_WRAPPER=/opt/otel-instrument`;
the runtime then starts `otel-instrument <runtime command...>`, which runs
`main()` here to rewrite the handler environment and exec the runtime
command in place.
"""

import argparse
import logging
import os
import sys
from collections.abc import Mapping

from .config import DEFAULT_LAYER_DIR, PACKAGE_HOME_VAR, WRAPPER_HANDLER

logger = logging.getLogger(__name__)


def _prepend_path(value: str | None, entry: str) -> str:
    parts = [p for p in (value or "").split(os.pathsep) if p]
    if entry in parts:
        return os.pathsep.join(parts)
    return os.pathsep.join([entry, *parts])


def build_environment(environ: Mapping[str, str], layer_dir: str = DEFAULT_LAYER_DIR) -> dict[str, str]:
    """Environment for the runtime process.

    An existing ORIG_HANDLER is kept so a second pass through the wrapper
    does not record the wrapper as the original handler.
    """
    env = dict(environ)
    original = env.get("ORIG_HANDLER") or env.get("_HANDLER")
    if original and original != WRAPPER_HANDLER:
        env["ORIG_HANDLER"] = original
    env["_HANDLER"] = WRAPPER_HANDLER

    function_name = env.get("AWS_LAMBDA_FUNCTION_NAME")
    if function_name and not env.get("OTEL_SERVICE_NAME"):
        env["OTEL_SERVICE_NAME"] = function_name

    if not env.get(PACKAGE_HOME_VAR):
        env[PACKAGE_HOME_VAR] = layer_dir
    env["PYTHONPATH"] = _prepend_path(env.get("PYTHONPATH"), layer_dir)
    return env


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="otel-instrument",
        description="Run a Lambda runtime with the OpenTelemetry wrapper as its handler",
    )
    parser.add_argument("--layer-dir", default=DEFAULT_LAYER_DIR, help="Directory holding otel_wrapper.py")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="Runtime command to exec")
    args = parser.parse_args(argv)

    if not args.command:
        parser.error("a runtime command is required")

    env = build_environment(os.environ, args.layer_dir)
    logger.debug("Exec %s with _HANDLER=%s", args.command[0], env["_HANDLER"])
    sys.stdout.flush()
    os.execvpe(args.command[0], args.command, env)


if __name__ == "__main__":
    main()
