"""
Program Catalog

Supplies the read-only table of programs the engine scores. The catalog is
either the built-in sample below or a JSON file named by
ADMISSIONS_CATALOG_PATH, holding an array of records shaped like:

    {"university": "...", "program": "...", "category": "Engineering",
     "pct95plus": 38.5, "pct90_94": 44.2, "pct85_89": 14.8,
     "pct80_84": 2.1, "pctBelow75": 0.4,
     "estimatedCutoff": 93.1, "year": 2023}
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Tuple, Union

from pydantic import ValidationError

from .config import get_settings
from .logic.contracts import ProgramCategory, ProgramRecord

logger = logging.getLogger(__name__)

# Allowed drift of the bin total away from 100 before a record is flagged
BIN_TOTAL_TOLERANCE = 1.0


class CatalogError(RuntimeError):
    """Raised when a catalog file cannot be read or parsed."""


# Illustrative Ontario entering-average distributions
_SAMPLE_ROWS = [
    ("University of Waterloo", "Engineering", ProgramCategory.ENGINEERING, 38.5, 44.2, 14.8, 2.1, 0.4, 93.1, 2023),
    ("University of Waterloo", "Computer & Information Science", ProgramCategory.COMPUTER_SCIENCE, 52.3, 38.9, 7.6, 1.0, 0.2, 94.6, 2023),
    ("University of Toronto", "Commerce/Mgmt/Business Admin", ProgramCategory.BUSINESS, 21.4, 48.7, 24.1, 5.2, 0.6, 91.0, 2023),
    ("University of Toronto", "Physical Science", ProgramCategory.SCIENCE, 18.9, 41.5, 29.3, 8.7, 1.6, 90.2, 2023),
    ("McMaster University", "Health Profess & Related Programs", ProgramCategory.HEALTH, 45.6, 40.1, 11.8, 2.0, 0.5, 93.5, 2023),
    ("McMaster University", "Engineering", ProgramCategory.ENGINEERING, 14.2, 43.8, 33.5, 7.9, 0.6, 90.1, 2023),
    ("Queen's University", "Commerce/Mgmt/Business Admin", ProgramCategory.BUSINESS, 27.8, 52.6, 17.4, 2.0, 0.2, 92.4, 2023),
    ("Western University", "Social Sciences", ProgramCategory.ARTS, 3.1, 19.8, 41.6, 29.4, 6.1, 86.7, 2023),
    ("York University", "Fine & Applied Arts", ProgramCategory.ARTS, 1.2, 8.9, 24.7, 36.5, 28.7, 81.9, 2023),
    ("York University", "Computer & Information Science", ProgramCategory.COMPUTER_SCIENCE, 2.4, 14.6, 35.2, 33.1, 14.7, 84.3, 2022),
    ("University of Ottawa", "Nursing", ProgramCategory.HEALTH, 6.3, 29.5, 42.7, 18.2, 3.3, 87.9, 2022),
    ("University of Guelph", "Biological & Biomedical Sciences", ProgramCategory.SCIENCE, 4.8, 26.1, 40.3, 22.6, 6.2, 86.8, 2023),
    ("Toronto Metropolitan University", "Business & Commerce", ProgramCategory.BUSINESS, 0.9, 9.4, 31.8, 39.7, 18.2, 83.6, 2023),
    ("Carleton University", "Engineering", ProgramCategory.ENGINEERING, 3.7, 21.9, 38.4, 27.5, 8.5, 86.1, 2023),
    ("Carleton University", "Journalism", ProgramCategory.ARTS, 2.0, 17.3, 39.8, 31.4, 9.5, 85.2, 2022),
    ("Wilfrid Laurier University", "Mathematics & Statistics", ProgramCategory.SCIENCE, 1.5, 12.2, 33.6, 35.9, 16.8, 83.9, 2023),
    ("Lakehead University", "Kinesiology/Recreation/Physical Education", ProgramCategory.HEALTH, 0.4, 4.1, 17.5, 34.2, 43.8, 79.6, 2022),
    ("Ontario Tech University", "Computer & Information Science", ProgramCategory.COMPUTER_SCIENCE, 1.1, 7.9, 26.4, 38.3, 26.3, 82.2, 2023),
]

SAMPLE_CATALOG: Tuple[ProgramRecord, ...] = tuple(
    ProgramRecord(
        university=uni,
        program=prog,
        category=category,
        pct_95_plus=p95,
        pct_90_94=p90,
        pct_85_89=p85,
        pct_80_84=p80,
        pct_below_75=below,
        estimated_cutoff=cutoff,
        year=year,
    )
    for uni, prog, category, p95, p90, p85, p80, below, cutoff, year in _SAMPLE_ROWS
)


def load_catalog(path: Union[str, Path]) -> Tuple[ProgramRecord, ...]:
    """
    Load and validate a catalog JSON file.

    Records whose bins do not sum to about 100 are kept but logged.

    Raises:
        CatalogError: file missing, not JSON, not a list, or a record is invalid
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e

    if not isinstance(raw, list):
        raise CatalogError(f"Catalog {path} must contain a JSON array of programs")

    programs = []
    for index, item in enumerate(raw):
        try:
            program = ProgramRecord.model_validate(item)
        except ValidationError as e:
            raise CatalogError(f"Invalid program at index {index} in {path}: {e}") from e

        if abs(program.bin_total - 100.0) > BIN_TOTAL_TOLERANCE:
            logger.warning(
                f"Bins for {program.university} / {program.program} sum to "
                f"{program.bin_total:.1f}, expected ~100"
            )
        programs.append(program)

    logger.info(f"Loaded {len(programs)} programs from {path}")
    return tuple(programs)


@lru_cache(maxsize=1)
def get_catalog() -> Tuple[ProgramRecord, ...]:
    """
    Process-wide catalog: the configured file if any, else the sample.
    """
    settings = get_settings()
    if settings.catalog_path:
        return load_catalog(settings.catalog_path)
    logger.info(f"Using built-in sample catalog ({len(SAMPLE_CATALOG)} programs)")
    return SAMPLE_CATALOG
