"""
Entry point registered as the Lambda handler.

Point `_HANDLER` at `otel_wrapper.lambda_handler` and keep the function's
own handler in `ORIG_HANDLER` (the `otel-instrument` exec wrapper does
both). Importing this module bootstraps OpenTelemetry once per execution
environment; every invocation then goes through `lambda_handler`.
"""

from otel_lambda_layer import bootstrap, make_invocation_wrapper

context = bootstrap()

lambda_handler = make_invocation_wrapper(context)
