"""Render attribute bags as VEP-format lines.

One line per variant allele / feature overlap: the fixed columns followed by
an "Extra" column of ``KEY=VALUE`` pairs, similar to the INFO field in VCF.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from vep_formatter.config import OutputConfig, flag_fields
from vep_formatter.models import PLACEHOLDER, AttributeBag, ColumnSet, render_value

logger = logging.getLogger(__name__)

EXTRA_COLUMN = "Extra"


@dataclass
class HeaderInfo:
    """Run details reported at the top of the header block."""

    tool_version: str
    time: datetime = field(default_factory=datetime.now)
    sources: List[str] = field(default_factory=list)


class LineFormatter:
    def __init__(
        self,
        config: Optional[OutputConfig] = None,
        columns: Optional[ColumnSet] = None,
        fields: Optional[Sequence[str]] = None,
        resolver: Callable[[OutputConfig], List[str]] = flag_fields,
    ):
        self.config = config or OutputConfig()
        self.columns = columns or ColumnSet.default()
        self._resolver = resolver
        self._fields: Optional[List[str]] = list(fields) if fields is not None else None
        self._field_order: Optional[Dict[str, int]] = None
        self._lock = threading.Lock()

    def extra_field_candidates(self) -> List[str]:
        """Extra fields enabled for this run, computed once."""
        if self._fields is None:
            with self._lock:
                if self._fields is None:
                    self._fields = list(self._resolver(self.config))
        return self._fields

    def field_order(self) -> Dict[str, int]:
        """Map each Extra field candidate to its rank, computed once."""
        if self._field_order is None:
            fields = self.extra_field_candidates()
            with self._lock:
                if self._field_order is None:
                    self._field_order = {name: i for i, name in enumerate(fields)}
        return self._field_order

    def render_line(self, bag: AttributeBag) -> str:
        """Return the tab-delimited line for one attribute bag."""
        line = [
            render_value(name, bag[name]) if bag.get(name) is not None else PLACEHOLDER
            for name in self.columns.names
        ]

        extra = {
            name: value
            for name, value in bag.items()
            if name not in self.columns and value is not None
        }

        order = self.field_order()
        unranked = len(order)
        keys = sorted(extra, key=lambda name: (order.get(name, unranked), name))

        line.append(
            ";".join(f"{name}={render_value(name, extra[name])}" for name in keys)
            or PLACEHOLDER
        )
        return "\t".join(line)

    def get_all_lines(self, bags: Iterable[AttributeBag]) -> List[str]:
        return [self.render_line(bag) for bag in bags]

    def column_header(self) -> str:
        return "#" + "\t".join(list(self.columns.names) + [EXTRA_COLUMN])

    def description_headers(self) -> List[str]:
        headers = ["## Column descriptions:"]
        headers.extend(
            f"## {name} : {self.columns.describe(name)}" for name in self.columns.names
        )

        provided = []
        for provider in list(self.config.plugins) + list(self.config.custom):
            provided.extend(provider.get_headers())

        headers.append("## Extra column keys:")
        headers.extend(
            f"## {name} : {self.columns.describe(name)}"
            for name in self.extra_field_candidates()
        )
        headers.extend(f"## {name} : {desc}" for name, desc in provided)

        return headers

    def run_info_headers(self, info: Optional[HeaderInfo] = None) -> List[str]:
        info = info or HeaderInfo(tool_version=self.config.tool_version)
        headers = [
            f"## ENSEMBL VARIANT EFFECT PREDICTOR v{info.tool_version}",
            f"## Output produced at {info.time:%Y-%m-%d %H:%M:%S}",
        ]
        headers.extend(f"## Using {source}" for source in info.sources)
        return headers

    def headers(self, info: Optional[HeaderInfo] = None) -> List[str]:
        """Full header block: run info, descriptions, then the column header."""
        return (
            self.run_info_headers(info)
            + self.description_headers()
            + [self.column_header()]
        )
