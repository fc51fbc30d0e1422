"""Shared fixtures for vep-formatter tests."""

import pytest

from vep_formatter.config import OutputConfig
from vep_formatter.formatter import LineFormatter
from vep_formatter.headers import CustomTrack, PluginHeaders
from vep_formatter.models import ColumnSet


@pytest.fixture
def small_columns():
    """Three fixed columns, as in the worked example of the output format."""
    return ColumnSet(
        ("Uploaded_variation", "Location", "Allele"),
        {"Uploaded_variation": "Identifier of uploaded variant", "Location": "Location of variant"},
    )


@pytest.fixture
def small_formatter(small_columns):
    """Formatter whose Extra candidates are exactly IMPACT and SIFT."""
    return LineFormatter(OutputConfig(), small_columns, fields=["IMPACT", "SIFT"])


@pytest.fixture
def plugin_headers():
    return PluginHeaders(
        "LoF",
        {
            "LoF": "Loss-of-function annotation (HC = High Confidence; LC = Low Confidence)",
            "LoF_filter": "Reason for LoF not being HC",
        },
    )


@pytest.fixture
def custom_track():
    return CustomTrack("clinvar.vcf.gz", "ClinVar", "vcf", "exact", ["CLNSIG", "CLNREVSTAT"])


@pytest.fixture
def example_bag():
    return {
        "Uploaded_variation": "rs1",
        "Location": "1:100",
        "Allele": "A",
        "IMPACT": "HIGH",
        "SIFT": ["tolerated", "0.5"],
    }


@pytest.fixture
def transcript_bag():
    """A realistic attribute bag for a missense consequence."""
    return {
        "Uploaded_variation": "rs699",
        "Location": "1:230710048",
        "Allele": "G",
        "Gene": "ENSG00000135744",
        "Feature": "ENST00000366667",
        "Feature_type": "Transcript",
        "Consequence": ["missense_variant"],
        "cDNA_position": 843,
        "CDS_position": 776,
        "Protein_position": 259,
        "Amino_acids": "M/T",
        "Codons": "aTg/aCg",
        "Existing_variation": ["rs699", "CM920010"],
        "IMPACT": "MODERATE",
        "STRAND": -1,
        "SYMBOL": "AGT",
        "SYMBOL_SOURCE": "HGNC",
        "HGNC_ID": "HGNC:333",
        "SIFT": "tolerated(1)",
        "PolyPhen": "benign(0)",
    }
