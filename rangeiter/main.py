"""
rangeiter Main module - command line front end
"""

import logging
import time
from typing import Any, Dict, List, Optional, Union

import typer
from pydantic import BaseModel, ConfigDict

from rangeiter.config import resolve_default_limit, resolve_log_level
from rangeiter.features import Feature, FeatureRegistry, OperationResult

# Module-level logger
logger = logging.getLogger("rangeiter.main")


class RangeReport(BaseModel):
    """JSON payload describing a range and the values produced from it"""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    start: Union[int, float]
    end: Union[int, float]
    increment: Union[int, float]
    total_size: Optional[int] = None
    values: List[Union[int, float]]


# Create CLI app with Typer
app = typer.Typer(
    name="rangeiter",
    help="rangeiter - print lazy numeric ranges",
    add_completion=False,
)


# ----------------- Helper Functions -----------------


class ElapsedMsFormatter(logging.Formatter):
    """Prefix records with milliseconds since logging was set up."""

    def __init__(self, fmt=None, datefmt=None):
        super().__init__(fmt, datefmt)
        self.start_time = time.monotonic()

    def format(self, record):
        record.elapsed = f"[{int((time.monotonic() - self.start_time) * 1000)}ms]"
        return super().format(record)


def setup_logging(debug: bool = False) -> None:
    """Set up logging configuration"""
    log_level = logging.DEBUG if debug else resolve_log_level()
    formatter = ElapsedMsFormatter('%(elapsed)s %(levelname)s %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(log_level)


def _parse_number(text: str) -> Any:
    """Parse an integer or float; anything else is passed through for validation"""
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        return text


def _feature_or_exit(feature_name: str) -> Feature:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Dict[str, Any]:
    if not result.success:
        logger.error("%s failed: %s", feature_name, result.error or "Unknown error")
        raise typer.Exit(code=1)
    return result.data or {}


def _option_help(feature_name: str, option: str) -> str:
    feature = FeatureRegistry.get_feature(feature_name)
    if feature is None or not feature.cli_options:
        return ""
    return feature.cli_options.get(option, {}).get("help", "")


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the rangeiter version"""
    setup_logging(False)
    data = _handle_cli_result("version", _feature_or_exit("version").handler())
    typer.echo(data.get("version", "unknown"))


@app.command(context_settings={"ignore_unknown_options": True})
def seq(
    start: str = typer.Argument(..., help=_option_help("range", "start")),
    end: Optional[str] = typer.Argument(None, help=_option_help("range", "end")),
    increment: str = typer.Option("1", "--increment", help=_option_help("range", "increment")),
    limit: Optional[int] = typer.Option(None, "--limit", help=_option_help("range", "limit")),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report instead of one value per line"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Print the values of the range [START, END)"""
    setup_logging(debug)

    if limit is None:
        limit = resolve_default_limit()

    result = _feature_or_exit("range").handler(
        start=_parse_number(start),
        end=None if end is None else _parse_number(end),
        increment=_parse_number(increment),
        limit=limit,
    )
    data = _handle_cli_result("range", result)
    sequence = data["sequence"]
    values = data["values"]

    if as_json:
        if sequence.is_infinite and limit is None:
            logger.error("An unbounded range needs --limit to be printed as JSON")
            raise typer.Exit(code=1)
        report = RangeReport(
            start=sequence.start,
            end=sequence.end,
            increment=sequence.increment,
            total_size=sequence.total_size,
            values=list(values),
        )
        typer.echo(report.model_dump_json(indent=2))
        return

    for value in values:
        typer.echo(value)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
