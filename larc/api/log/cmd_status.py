"""Log status command."""

from collections import Counter
from collections.abc import Iterator

from .._output_schemas.log import LogStatusOutput
from ..config.LarcConfig import LarcConfig
from ..StageResult import StageResult
from .read_log_entries import read_log_entries

_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


def cmd_status() -> StageResult:
    """Summarize the logfile after dropping entries past their retention."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        log_path = LarcConfig.get_logfile_path()
        yield (0.1, "Loading configuration...")
        try:
            log_cfg = LarcConfig.load().log
        except ValueError as e:
            failed = LogStatusOutput(
                errors=[str(e)], log_path=str(log_path), size_bytes=0, levels={}, domains={}, last_error=None
            )
            result_obj.finish(f"Failed to load configuration: {e}", failed, False)
            return

        yield (0.4, "Reading log entries...")
        entries = read_log_entries(log_path, log_cfg)
        levels = Counter(entry.level for entry in entries)
        domains = Counter(entry.domain for entry in entries)
        errors = [entry for entry in entries if entry.level == "ERROR"]

        output = LogStatusOutput(
            log_path=str(log_path),
            size_bytes=log_path.stat().st_size if log_path.exists() else 0,
            levels={level.lower(): levels[level] for level in _LEVELS},
            domains=dict(sorted(domains.items())),
            last_error=errors[-1].format() if errors else None,
        )
        result_obj.finish(f"{len(entries)} log entries, {len(errors)} error(s)", output)
        yield (1.0, "Complete")

    return StageResult(announce="Checking log status...", progress_callback=do_work)
