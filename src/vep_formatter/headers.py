"""Header providers for plugin and custom-annotation fields."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

HeaderPair = Tuple[str, str]

CUSTOM_FORMATS = {"bed", "gff", "gtf", "vcf", "bigwig"}
CUSTOM_TYPES = {"exact", "overlap"}


class HeaderProvider(ABC):
    @abstractmethod
    def get_headers(self) -> List[HeaderPair]:
        """Return (name, description) pairs for the description header block."""
        ...

    def field_names(self) -> List[str]:
        """Names this provider may add to the Extra column."""
        return [name for name, _ in self.get_headers()]


@dataclass
class PluginHeaders(HeaderProvider):
    """Header info declared by an annotation plugin, in declaration order."""

    name: str
    header_info: Dict[str, str] = field(default_factory=dict)

    def get_headers(self) -> List[HeaderPair]:
        return list(self.header_info.items())


@dataclass
class CustomTrack(HeaderProvider):
    """A user-supplied annotation file reported under ``short_name``.

    Headers follow the layout used for custom annotations: one entry for the
    track itself, then one entry per extracted field, prefixed with the short
    name.
    """

    file: str
    short_name: str
    fmt: str = "bed"
    annotation_type: str = "overlap"
    fields: List[str] = field(default_factory=list)
    force_report_coordinates: bool = False

    @classmethod
    def from_spec(cls, spec: str) -> "CustomTrack":
        """Parse ``file,short_name,format,type[,force_report_coordinates[,field...]]``."""
        parts = [p.strip() for p in spec.split(",")]
        if len(parts) < 2 or not parts[0]:
            raise ValueError(f"Invalid custom annotation spec: {spec!r}")

        file = parts[0]
        short_name = parts[1] or file
        fmt = parts[2].lower() if len(parts) > 2 and parts[2] else "bed"
        annotation_type = parts[3].lower() if len(parts) > 3 and parts[3] else "overlap"

        if fmt not in CUSTOM_FORMATS:
            raise ValueError(f"Unknown custom annotation format {fmt!r} in {spec!r}")
        if annotation_type not in CUSTOM_TYPES:
            raise ValueError(f"Unknown custom annotation type {annotation_type!r} in {spec!r}")

        force = parts[4] if len(parts) > 4 else ""
        if force not in ("", "0", "1"):
            raise ValueError(
                f"Invalid force_report_coordinates value {force!r} (expected 0 or 1) in {spec!r}"
            )

        fields = [p for p in parts[5:] if p]
        return cls(file, short_name, fmt, annotation_type, fields, force == "1")

    def get_headers(self) -> List[HeaderPair]:
        headers = [(self.short_name, f"{self.file} ({self.annotation_type})")]
        for name in self.fields:
            headers.append(
                (f"{self.short_name}_{name}", f"{name} field from {self.file}")
            )
        return headers
