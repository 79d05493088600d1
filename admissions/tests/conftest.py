"""
Shared fixtures for the admission engine tests.
"""

import os
import sys

import pytest

# Make the repo root importable so `main` resolves without an install
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from admissions.catalog import SAMPLE_CATALOG
from admissions.logic.contracts import ProgramCategory, ProgramRecord


@pytest.fixture()
def scenario_program() -> ProgramRecord:
    """Bins {95+:10, 90-94:30, 85-89:40, 80-84:15, below75:5}."""
    return ProgramRecord(
        university="Scenario University",
        program="Engineering",
        category=ProgramCategory.ENGINEERING,
        pct_95_plus=10,
        pct_90_94=30,
        pct_85_89=40,
        pct_80_84=15,
        pct_below_75=5,
        estimated_cutoff=88.0,
        year=2023,
    )


@pytest.fixture()
def empty_program() -> ProgramRecord:
    return ProgramRecord(
        university="No Data College",
        program="Arts",
        category=ProgramCategory.ARTS,
        pct_95_plus=0,
        pct_90_94=0,
        pct_85_89=0,
        pct_80_84=0,
        pct_below_75=0,
        year=2023,
    )


@pytest.fixture()
def sample_catalog():
    return SAMPLE_CATALOG
