"""Column tables and value handling: the contract between annotation and output."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple, Union

PLACEHOLDER = "-"
UNKNOWN_DESCRIPTION = "?"

DEFAULT_OUTPUT_COLS = [
    "Uploaded_variation",
    "Location",
    "Allele",
    "Gene",
    "Feature",
    "Feature_type",
    "Consequence",
    "cDNA_position",
    "CDS_position",
    "Protein_position",
    "Amino_acids",
    "Codons",
    "Existing_variation",
]

FIELD_DESCRIPTIONS = {
    # fixed columns
    "Uploaded_variation": "Identifier of uploaded variant",
    "Location": "Location of variant in standard coordinate format (chr:start or chr:start-end)",
    "Allele": "The variant allele used to calculate the consequence",
    "Gene": "Stable ID of affected gene",
    "Feature": "Stable ID of feature",
    "Feature_type": "Type of feature - Transcript, RegulatoryFeature or MotifFeature",
    "Consequence": "Consequence type",
    "cDNA_position": "Relative position of base pair in cDNA sequence",
    "CDS_position": "Relative position of base pair in coding sequence",
    "Protein_position": "Relative position of amino acid in protein",
    "Amino_acids": "Reference and variant amino acids",
    "Codons": "Reference and variant codon sequence",
    "Existing_variation": "Identifier(s) of co-located known variants",
    # extra fields
    "IMPACT": "Subjective impact classification of consequence type",
    "DISTANCE": "Shortest distance from variant to transcript",
    "STRAND": "Strand of the feature (1/-1)",
    "FLAGS": "Transcript quality flags",
    "ALLELE_NUM": "Allele number from input; 0 is reference, 1 is first alternate etc",
    "IND": "Individual name",
    "ZYG": "Zygosity of individual genotype at this locus",
    "VARIANT_CLASS": "SO variant class",
    "MINIMISED": "Alleles in this variant have been converted to minimal representation before consequence calculation",
    "SYMBOL": "Gene symbol (e.g. HGNC)",
    "SYMBOL_SOURCE": "Source of gene symbol",
    "HGNC_ID": "Stable identifer of HGNC gene symbol",
    "BIOTYPE": "Biotype of transcript or regulatory feature",
    "CANONICAL": "Indicates if transcript is canonical for this gene",
    "TSL": "Transcript support level",
    "APPRIS": "Annotates alternatively spliced transcripts as primary or alternate based on a range of computational methods",
    "CCDS": "Indicates if transcript is a CCDS transcript",
    "ENSP": "Protein identifer",
    "SWISSPROT": "UniProtKB/Swiss-Prot accession",
    "TREMBL": "UniProtKB/TrEMBL accession",
    "UNIPARC": "UniParc accession",
    "GENE_PHENO": "Indicates if gene is associated with a phenotype, disease or trait",
    "SIFT": "SIFT prediction and/or score",
    "PolyPhen": "PolyPhen prediction and/or score",
    "EXON": "Exon number(s) / total",
    "INTRON": "Intron number(s) / total",
    "DOMAINS": "The source and identifer of any overlapping protein domains",
    "HGVSc": "HGVS coding sequence name",
    "HGVSp": "HGVS protein sequence name",
    "HGVS_OFFSET": "Indicates by how many bases the HGVS notations for this variant have been shifted",
    "AF": "Frequency of existing variant in 1000 Genomes combined population",
    "AFR_AF": "Frequency of existing variant in 1000 Genomes combined African population",
    "AMR_AF": "Frequency of existing variant in 1000 Genomes combined American population",
    "EAS_AF": "Frequency of existing variant in 1000 Genomes combined East Asian population",
    "EUR_AF": "Frequency of existing variant in 1000 Genomes combined European population",
    "SAS_AF": "Frequency of existing variant in 1000 Genomes combined South Asian population",
    "AA_AF": "Frequency of existing variant in NHLBI-ESP African American population",
    "EA_AF": "Frequency of existing variant in NHLBI-ESP European American population",
    "gnomAD_AF": "Frequency of existing variant in gnomAD exomes combined population",
    "gnomAD_AFR_AF": "Frequency of existing variant in gnomAD exomes African/American population",
    "gnomAD_AMR_AF": "Frequency of existing variant in gnomAD exomes American population",
    "gnomAD_ASJ_AF": "Frequency of existing variant in gnomAD exomes Ashkenazi Jewish population",
    "gnomAD_EAS_AF": "Frequency of existing variant in gnomAD exomes East Asian population",
    "gnomAD_FIN_AF": "Frequency of existing variant in gnomAD exomes Finnish population",
    "gnomAD_NFE_AF": "Frequency of existing variant in gnomAD exomes Non-Finnish European population",
    "gnomAD_OTH_AF": "Frequency of existing variant in gnomAD exomes combined other combined populations",
    "gnomAD_SAS_AF": "Frequency of existing variant in gnomAD exomes South Asian population",
    "MAX_AF": "Maximum observed allele frequency in 1000 Genomes, ESP and gnomAD",
    "MAX_AF_POPS": "Populations in which maximum allele frequency was observed",
    "CLIN_SIG": "ClinVar clinical significance of the dbSNP variant",
    "SOMATIC": "Somatic status of existing variant",
    "PHENO": "Indicates if existing variant(s) is associated with a phenotype, disease or trait; multiple values correspond to multiple variants",
    "PUBMED": "Pubmed ID(s) of publications that cite existing variant",
    "MOTIF_NAME": "The source and identifier of a transcription factor binding profile (TFBP) aligned at this position",
    "MOTIF_POS": "The relative position of the variation in the aligned TFBP",
    "HIGH_INF_POS": "A flag indicating if the variant falls in a high information position of the TFBP",
    "MOTIF_SCORE_CHANGE": "The difference in motif score of the reference and variant sequences for the TFBP",
    "CELL_TYPE": "List of cell types and classifications for regulatory feature",
    "PICK": "Indicates if this consequence has been picked as the most severe",
}

# A rendered field value: a scalar string or an ordered tuple of strings.
FieldValue = Union[str, Tuple[str, ...]]
AttributeBag = Mapping[str, Any]

_SCALAR_TYPES = (str, int, float)
_SEQUENCE_TYPES = (list, tuple)


def _scalar_to_str(value: Any) -> str:
    # booleans print as flags, 1/0
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class InvalidFieldValueError(ValueError):
    """A bag value is neither a scalar nor an ordered sequence of scalars."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f"Field {name!r} has unsupported value of type {type(value).__name__}: {value!r}"
        )


def normalize_value(name: str, value: Any) -> FieldValue:
    """Resolve a raw value to a string or a tuple of strings."""
    if isinstance(value, str):
        return value
    if isinstance(value, _SCALAR_TYPES):
        return _scalar_to_str(value)
    if isinstance(value, _SEQUENCE_TYPES):
        items = []
        for item in value:
            if not isinstance(item, _SCALAR_TYPES):
                raise InvalidFieldValueError(name, value)
            items.append(_scalar_to_str(item))
        return tuple(items)
    raise InvalidFieldValueError(name, value)


def render_value(name: str, value: Any) -> str:
    normalized = normalize_value(name, value)
    if isinstance(normalized, tuple):
        return ",".join(normalized)
    return normalized


def make_bag(raw: Mapping[str, Any]) -> Dict[str, FieldValue]:
    """Normalize every value of an upstream mapping once; None means undefined."""
    return {
        name: normalize_value(name, value)
        for name, value in raw.items()
        if value is not None
    }


@dataclass(frozen=True)
class ColumnSet:
    """Ordered fixed columns plus the description table used for headers."""

    names: Tuple[str, ...]
    descriptions: Mapping[str, str] = field(default_factory=dict)
    name_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "name_set", frozenset(self.names))

    @classmethod
    def default(cls) -> "ColumnSet":
        return cls(tuple(DEFAULT_OUTPUT_COLS), dict(FIELD_DESCRIPTIONS))

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.name_set

    def describe(self, name: str) -> str:
        return self.descriptions.get(name) or UNKNOWN_DESCRIPTION
