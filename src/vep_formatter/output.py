"""Read attribute bags from JSON Lines and write VEP-format output."""

import io
import json
import logging
from typing import Dict, Iterable, List, Optional, TextIO

from vep_formatter.formatter import HeaderInfo, LineFormatter
from vep_formatter.models import AttributeBag, FieldValue, make_bag

logger = logging.getLogger(__name__)


def read_bags(filepath: str) -> List[Dict[str, FieldValue]]:
    """Read one JSON object per line; blank and ``#`` lines are skipped."""
    bags = []
    with open(filepath, encoding="utf-8") as fh:
        for lineno, line in enumerate(fh, start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            try:
                raw = json.loads(stripped)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{filepath}:{lineno}: invalid JSON ({exc.msg})") from exc
            if not isinstance(raw, dict):
                raise ValueError(
                    f"{filepath}:{lineno}: expected a JSON object, got {type(raw).__name__}"
                )
            bags.append(make_bag(raw))
    logger.debug("Read %d attribute bags from %s", len(bags), filepath)
    return bags


def write_vep(
    bags: Iterable[AttributeBag],
    filepath: str,
    formatter: LineFormatter,
    info: Optional[HeaderInfo] = None,
) -> int:
    """Write headers and one line per bag; returns the number of data lines."""
    with open(filepath, "w", encoding="utf-8") as fh:
        return _write(bags, fh, formatter, info)


def lines_to_bytes(
    bags: Iterable[AttributeBag],
    formatter: LineFormatter,
    info: Optional[HeaderInfo] = None,
) -> bytes:
    buf = io.StringIO()
    _write(bags, buf, formatter, info)
    return buf.getvalue().encode("utf-8")


def _write(
    bags: Iterable[AttributeBag],
    fh: TextIO,
    formatter: LineFormatter,
    info: Optional[HeaderInfo],
) -> int:
    if not formatter.config.no_headers:
        for header in formatter.headers(info):
            fh.write(header + "\n")

    count = 0
    for bag in bags:
        fh.write(formatter.render_line(bag) + "\n")
        count += 1
    return count
