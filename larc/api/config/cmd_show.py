"""Config show command."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .LarcConfig import LarcConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or list the sections when ``section`` is empty."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(LarcConfig.get_config_path())
        yield (0.3, f"Loading {config_path}...")
        try:
            sections = LarcConfig.load().to_dict()
        except ValueError as e:
            result_obj.finish(str(e), ConfigShowOutput(errors=[str(e)], section=section, content={}, config_path=config_path), False)
            return

        if not section:
            result_obj.finish(
                f"{len(sections)} sections: {', '.join(sections)}",
                ConfigShowOutput(section="", content={"sections": list(sections)}, config_path=config_path),
            )
        elif section in sections:
            result_obj.finish(
                f"Configuration section '{section}'",
                ConfigShowOutput(section=section, content=sections[section], config_path=config_path),
            )
        else:
            message = f"Unknown section '{section}'; expected one of {', '.join(sections)}"
            result_obj.finish(message, ConfigShowOutput(errors=[message], section=section, content={}, config_path=config_path), False)
        yield (1.0, "Complete")

    return StageResult(announce=f"Showing configuration {section or 'sections'}...", progress_callback=do_work)
