"""Run command once using the 4-stage pattern."""

from collections.abc import Callable
from typing import Any

from favicon_injector.api.StageResult import StageResult

from .display.CLIDisplay import CLIDisplay


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict[str, Any],
    display: CLIDisplay,
    verbose: bool = False,
) -> StageResult:
    """Run command once and return its completed StageResult.

    Announce and progress are only shown in verbose mode. Commands must handle
    their own errors and report them through the output schema.
    """
    # Stage 1: Announce
    result = func(*args, **kwargs)
    if verbose:
        display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if verbose:
            display.progress(progress_percent, message)

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if verbose:
        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)
    for warning in result.output.get("warnings", []):
        display.warning(warning)

    return result
