"""
Tests for the program catalog collaborator.
"""

import json
import logging

import pytest

from admissions import catalog as catalog_module
from admissions.catalog import SAMPLE_CATALOG, CatalogError, get_catalog, load_catalog
from admissions.config import get_settings
from admissions.logic.contracts import ProgramCategory


@pytest.fixture()
def fresh_settings(monkeypatch):
    """Clear cached settings/catalog around tests that change the environment."""
    get_settings.cache_clear()
    get_catalog.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
    get_catalog.cache_clear()


def _record(**overrides):
    record = {
        "university": "University of Waterloo",
        "program": "Engineering",
        "category": "Engineering",
        "pct95plus": 38.5,
        "pct90_94": 44.2,
        "pct85_89": 14.8,
        "pct80_84": 2.1,
        "pctBelow75": 0.4,
        "estimatedCutoff": 93.1,
        "year": 2023,
    }
    record.update(overrides)
    return record


def test_sample_catalog_is_well_formed():
    assert len(SAMPLE_CATALOG) > 0
    categories = {c.value for c in ProgramCategory}
    for program in SAMPLE_CATALOG:
        assert program.bin_total == pytest.approx(100.0, abs=0.01)
        assert program.category in categories
    assert {p.category for p in SAMPLE_CATALOG} == categories


def test_load_catalog_reads_camel_case_records(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([_record(), _record(program="Mechatronics")]))

    programs = load_catalog(path)

    assert len(programs) == 2
    first = programs[0]
    assert first.pct_95_plus == 38.5
    assert first.pct_below_75 == 0.4
    assert first.estimated_cutoff == 93.1
    assert first.category == "Engineering"
    assert programs[1].program == "Mechatronics"


def test_load_catalog_warns_on_bad_bin_total(tmp_path, caplog):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([_record(pct95plus=10.0)]))

    with caplog.at_level(logging.WARNING, logger=catalog_module.__name__):
        programs = load_catalog(path)

    assert len(programs) == 1
    assert "expected ~100" in caplog.text


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"programs": []}),
        json.dumps([_record(category="Astrology")]),
        json.dumps([_record(pct95plus=-5)]),
    ],
)
def test_load_catalog_rejects_bad_files(tmp_path, content):
    path = tmp_path / "catalog.json"
    path.write_text(content)
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_catalog_missing_file(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "missing.json")


def test_get_catalog_defaults_to_sample(fresh_settings):
    fresh_settings.delenv("ADMISSIONS_CATALOG_PATH", raising=False)
    assert get_catalog() is SAMPLE_CATALOG


def test_get_catalog_honours_env_path(fresh_settings, tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([_record()]))
    fresh_settings.setenv("ADMISSIONS_CATALOG_PATH", str(path))

    programs = get_catalog()

    assert len(programs) == 1
    assert get_catalog() is programs


def test_programs_are_immutable():
    with pytest.raises(Exception):
        SAMPLE_CATALOG[0].pct_95_plus = 0.0


@pytest.mark.parametrize("missing", ["pct95plus", "pct85_89", "pctBelow75"])
def test_load_catalog_rejects_missing_bin(tmp_path, missing):
    record = _record()
    del record[missing]
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([record]))
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_catalog_rejects_misspelled_bin(tmp_path):
    record = _record()
    record["pct_95plus"] = record.pop("pct95plus")
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([record]))
    with pytest.raises(CatalogError):
        load_catalog(path)
