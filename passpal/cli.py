"""
passpal command line.

Usage:
  passpal [--top N] [--include 1,3,5 | --exclude 6] [--profile] [--outfile report.txt] wordlist.txt
  passpal --list-agents
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from passpal import __version__
from passpal.core.config import get_settings
from passpal.core.exceptions import CorpusError, SelectionError
from passpal.services.agents.registry import AgentRegistry
from passpal.services.pipeline.corpus import CorpusReader
from passpal.services.pipeline.orchestrator import AnalysisOrchestrator
from passpal.services.rendering.text import TextRenderer

log = logging.getLogger(__name__)


def parse_indices(value: str) -> list[int]:
    """Parse a comma separated list of 1-based agent indices."""
    indices = []
    for part in value.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            indices.append(int(part))
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid agent index: {part!r}") from None
    if not indices:
        raise argparse.ArgumentTypeError("expected at least one agent index")
    return indices


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def agent_listing() -> str:
    return "\n".join(
        f"{info.index} = {info.name}  ({info.description})"
        for info in AgentRegistry.describe()
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passpal",
        description="passpal - statistical analysis of password corpora",
        epilog="Available modules:\n" + agent_listing(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", nargs="?", type=Path, help="The word list to analyze, UTF-8 encoded, one candidate per line")
    parser.add_argument("-t", "--top", type=non_negative_int, default=None,
                        help="Show top N results (default from PASSPAL_TOP_K, 10). Some reports are always shown in full")
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("-i", "--include", type=parse_indices, default=None,
                           help="Run only these modules, comma separated. Example: --include 1,3,5")
    selection.add_argument("-e", "--exclude", type=parse_indices, default=None,
                           help="Run all modules except these, comma separated. Example: --exclude 6")
    parser.add_argument("-p", "--profile", action="store_true", help="Report time spent in each module")
    parser.add_argument("-o", "--outfile", type=Path, default=None, help="Write the report to this file instead of stdout")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument("--log-level", type=str.upper, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (default from PASSPAL_LOG_LEVEL, INFO)")
    parser.add_argument("--list-agents", action="store_true", help="List available modules and exit")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="[%(asctime)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if args.list_agents:
        print(agent_listing())
        return 0

    if args.file is None:
        parser.error("missing file argument (try --help)")

    top_k = args.top if args.top is not None else settings.top_k
    try:
        orchestrator = AnalysisOrchestrator(
            top_k=top_k,
            include=args.include,
            exclude=args.exclude,
            profile=args.profile,
        )
    except SelectionError as e:
        parser.error(e.message)

    reader = CorpusReader(args.file, encoding=settings.corpus_encoding)
    try:
        reader.check()
        with tqdm(
            total=reader.size,
            desc="Analyzing",
            unit="B",
            unit_scale=True,
            disable=args.no_progress or not sys.stderr.isatty(),
        ) as bar:
            result = orchestrator.run(reader.lines(progress=bar.update))
    except CorpusError as e:
        log.error(e.message)
        return 1

    for name, error in orchestrator.failures.items():
        log.warning("%s produced no statistics: %s", name, error.message)

    output = TextRenderer().render(
        result.reports,
        header=f"passpal {__version__} report",
        timings=result.timings or None,
    )

    if args.outfile is None:
        sys.stdout.write(output)
        return 0

    try:
        args.outfile.write_text(output, encoding="utf-8")
    except OSError as e:
        log.error("Cannot write report to %s: %s", args.outfile, e)
        return 1
    log.info("Report written to %s", args.outfile)
    return 0
