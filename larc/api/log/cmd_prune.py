"""Log prune command."""

from collections import Counter
from collections.abc import Iterator

from .._output_schemas.log import LogPruneOutput
from ..config.LarcConfig import LarcConfig
from ..StageResult import StageResult
from .LogEntry import LogEntry
from .write_log_entries import write_log_entries


def cmd_prune(levels: list[str], domain: str | None = None) -> StageResult:
    """Remove entries of the given levels, optionally only those of one domain.

    Lines that do not parse as log entries are removed as well.
    """
    selected = {level.upper() for level in levels}
    scope = f" of domain '{domain}'" if domain else ""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        log_path = LarcConfig.get_logfile_path()
        if not log_path.exists():
            result_obj.finish("No log file found", LogPruneOutput(pruned={}, kept=0))
            return

        yield (0.3, "Reading log entries...")
        lines = log_path.read_text(encoding="utf-8", errors="replace").splitlines()
        entries = [entry for entry in map(LogEntry.parse, lines) if entry is not None]
        pruned: Counter[str] = Counter()
        kept: list[LogEntry] = []
        for entry in entries:
            if entry.level in selected and (domain is None or entry.domain == domain):
                pruned[entry.level.lower()] += 1
            else:
                kept.append(entry)

        yield (0.7, "Writing log...")
        try:
            write_log_entries(log_path, kept)
        except OSError as e:
            failed = LogPruneOutput(errors=[str(e)], pruned={}, kept=len(entries))
            result_obj.finish(f"Failed to write log: {e}", failed, False)
            return

        output = LogPruneOutput(pruned=dict(pruned), kept=len(kept))
        result_obj.finish(f"Pruned {sum(pruned.values())} entries{scope}, kept {len(kept)}", output)
        yield (1.0, "Complete")

    return StageResult(announce=f"Pruning {', '.join(sorted(selected)) or 'no'} log entries{scope}...", progress_callback=do_work)
