"""Run configuration and the flag-derived list of Extra fields."""

import logging
from dataclasses import dataclass, field
from typing import List, Set, Tuple

from vep_formatter.headers import CustomTrack, HeaderProvider

logger = logging.getLogger(__name__)

# Reported for every run, ahead of any flag-enabled field.
ALWAYS_FIELDS = ["IMPACT", "DISTANCE", "STRAND", "FLAGS"]

# (flag, fields enabled by it), in Extra column order.
FLAG_FIELDS: List[Tuple[str, List[str]]] = [
    ("allele_number", ["ALLELE_NUM"]),
    ("individual", ["IND", "ZYG"]),
    ("variant_class", ["VARIANT_CLASS"]),
    ("minimal", ["MINIMISED"]),
    ("symbol", ["SYMBOL", "SYMBOL_SOURCE", "HGNC_ID"]),
    ("biotype", ["BIOTYPE"]),
    ("canonical", ["CANONICAL"]),
    ("tsl", ["TSL"]),
    ("appris", ["APPRIS"]),
    ("ccds", ["CCDS"]),
    ("protein", ["ENSP"]),
    ("uniprot", ["SWISSPROT", "TREMBL", "UNIPARC"]),
    ("gene_phenotype", ["GENE_PHENO"]),
    ("sift", ["SIFT"]),
    ("polyphen", ["PolyPhen"]),
    ("numbers", ["EXON", "INTRON"]),
    ("domains", ["DOMAINS"]),
    ("hgvs", ["HGVSc", "HGVSp", "HGVS_OFFSET"]),
    ("af", ["AF"]),
    ("af_1kg", ["AFR_AF", "AMR_AF", "EAS_AF", "EUR_AF", "SAS_AF"]),
    ("af_esp", ["AA_AF", "EA_AF"]),
    (
        "af_gnomad",
        [
            "gnomAD_AF",
            "gnomAD_AFR_AF",
            "gnomAD_AMR_AF",
            "gnomAD_ASJ_AF",
            "gnomAD_EAS_AF",
            "gnomAD_FIN_AF",
            "gnomAD_NFE_AF",
            "gnomAD_OTH_AF",
            "gnomAD_SAS_AF",
        ],
    ),
    ("max_af", ["MAX_AF", "MAX_AF_POPS"]),
    ("check_existing", ["CLIN_SIG", "SOMATIC", "PHENO"]),
    ("pubmed", ["PUBMED"]),
    ("regulatory", ["MOTIF_NAME", "MOTIF_POS", "HIGH_INF_POS", "MOTIF_SCORE_CHANGE"]),
    ("cell_type", ["CELL_TYPE"]),
    ("flag_pick", ["PICK"]),
]

KNOWN_FLAGS = [flag for flag, _ in FLAG_FIELDS]
EVERYTHING = "everything"


@dataclass
class OutputConfig:
    """Options that decide which Extra fields a run reports.

    Attributes:
        flags: Enabled option names (see FLAG_FIELDS); "everything" enables all
        plugins: Header providers for active plugins
        custom: Custom annotation tracks
        no_headers: Suppress the header block
        tool_version: Version reported in the first header line
    """

    flags: Set[str] = field(default_factory=set)
    plugins: List[HeaderProvider] = field(default_factory=list)
    custom: List[CustomTrack] = field(default_factory=list)
    no_headers: bool = False
    tool_version: str = "0.1.0"

    def __post_init__(self) -> None:
        self.flags = set(self.flags)
        if EVERYTHING in self.flags:
            self.flags |= set(KNOWN_FLAGS)

    def is_enabled(self, flag: str) -> bool:
        return flag in self.flags

    def validate(self) -> List[str]:
        """Return a list of error messages (empty if valid)."""
        errors: List[str] = []

        unknown = sorted(self.flags - set(KNOWN_FLAGS) - {EVERYTHING})
        if unknown:
            errors.append(f"Unknown output flag(s): {', '.join(unknown)}")

        short_names = [track.short_name for track in self.custom]
        duplicates = sorted({n for n in short_names if short_names.count(n) > 1})
        if duplicates:
            errors.append(
                f"Custom annotation short names must be unique: {', '.join(duplicates)}"
            )

        return errors


def flag_fields(config: OutputConfig) -> List[str]:
    """Resolve the ordered, de-duplicated Extra field candidates for a run."""
    fields = list(ALWAYS_FIELDS)
    for flag, names in FLAG_FIELDS:
        if config.is_enabled(flag):
            fields.extend(names)
    for provider in config.plugins:
        fields.extend(provider.field_names())
    for track in config.custom:
        fields.extend(track.field_names())

    resolved = list(dict.fromkeys(fields))  # deduplicate, preserve order
    logger.debug("Resolved %d Extra field candidates", len(resolved))
    return resolved
