"""
Line-oriented runner.

The first non-blank line on stdin is an edge list ("A BC B CADE ...");
every following non-blank line is a sequence of (vertex, expiration)
query pairs ("A 1 B 2"). Prints the graph once it is built, then one
report line per query.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from decaygraph.core.exceptions import DecayGraphError, MalformedInput  # noqa: E402
from decaygraph.graph.decay_graph import DecayGraph  # noqa: E402

from backend.app.config import AppConfig  # noqa: E402
from backend.app.services.decay_service import DecayService  # noqa: E402


def run(lines: Iterable[str], out: TextIO, config: AppConfig) -> None:
    lines = [line.strip() for line in lines if line.strip()]
    if not lines:
        raise MalformedInput("No edge list on input")

    service = DecayService(graph=DecayGraph(config.decay), config=config.decay)
    snapshot = service.build(lines[0])
    print(snapshot["graph"], file=out)

    for line in lines[1:]:
        for result in service.run_query_line(line):
            print(result["message"], file=out)


def main(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> int:
    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format=config.log_format,
    )
    logger = logging.getLogger("decaygraph.run")

    try:
        run(stream or sys.stdin, out or sys.stdout, config)
    except DecayGraphError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
