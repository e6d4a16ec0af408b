"""Inject API command.

CLI: inject-favicon <dir> [--favicon PATH] [--rel REL] [--type TYPE] [--sizes SIZES]
"""

from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from .._output_schemas.inject import InjectOutput
from ..StageResult import StageResult
from .FaviconOptions import FaviconOptions
from .inject_dir import inject_dir


def cmd_inject(dir_path: str | Path, options: str | Mapping[str, Any] | FaviconOptions | None = None) -> StageResult:
    """Inject favicon links into all HTML files under a directory.

    Args:
        dir_path: Directory to scan (resolved to an absolute path)
        options: Favicon options, a mapping of their fields, or a bare favicon href
    """
    target_dir = Path(dir_path).resolve()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Resolving favicon options...")
        favicon = FaviconOptions.coerce(options)

        yield (0.2, f"Checking directory {target_dir}...")
        if not target_dir.is_dir():
            message = f"Directory '{target_dir}' does not exist"
            result_obj.output = InjectOutput(
                errors=[message],
                warnings=[],
                directory=str(target_dir),
                favicon=favicon.model_dump(),
                total=0,
                injected=0,
                skipped=0,
                failed=0,
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False
            return

        yield (0.3, "Scanning for HTML files...")
        stats = inject_dir(target_dir, favicon)

        yield (1.0, "Complete")
        warnings = [f"{stats.failed} file(s) failed to inject"] if stats.failed else []
        result_obj.output = InjectOutput(
            errors=[],
            warnings=warnings,
            directory=str(target_dir),
            favicon=favicon.model_dump(),
            **stats.as_dict(),
        ).model_dump(mode="python")
        result_obj.result = f"Injected {stats.injected} of {stats.total} HTML files"
        result_obj.success = True

    return StageResult(
        announce=f"Injecting favicon links under {target_dir}...",
        progress_callback=do_work,
    )
