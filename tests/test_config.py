"""Tests for the reading of ontology settings."""

from configparser import ConfigParser

import pytest

from fbcam.termcache.cache import OntologySpec
from fbcam.termcache.config import new_config_parser, read_properties, read_specs
from fbcam.termcache.errors import ConfigurationError


def test_properties_file(tmp_path):
    path = tmp_path / "ontologies.properties"
    path.write_text(
        "# Ontologies\n"
        "GO.uri=http://www.geneontology.org/doc/GO.terms_ids_obs\n"
        "GO.username=\n"
        "GO.password=\n"
        "GO.refresh-interval=600\n"
        "GO.class=tab\n"
        "! Another comment\n"
        "MI.uri=psi-mi.obo\n"
        "MI.format=obo\n"
        "MI.tolerate-refresh-exception=TRUE\n"
    )
    specs = read_specs(str(path), overrides={})
    assert specs == [
        OntologySpec(
            "GO",
            "http://www.geneontology.org/doc/GO.terms_ids_obs",
            refresh_interval=600,
            format="tab",
        ),
        OntologySpec("MI", "psi-mi.obo", format="obo", tolerate_refresh_exception=True),
    ]


def test_ini_file(tmp_path):
    path = tmp_path / "termcache.ini"
    path.write_text(
        "[ontologies]\n"
        "GO.uri = go.obo\n"
        "GO.format = obo\n"
        "GO.timeout = 2.5\n"
        "\n"
        "[other]\n"
        "ignored.uri = nothing\n"
    )
    specs = read_specs(path, overrides={})
    assert len(specs) == 1
    assert specs[0].prefix == "GO"
    assert specs[0].format == "obo"
    assert specs[0].timeout == 2.5


def test_defaults():
    (spec,) = read_specs({"GO.uri": "go.tab"}, overrides={})
    assert spec.username == ""
    assert spec.password == ""
    assert spec.refresh_interval == 60
    assert spec.tolerate_refresh_exception is False
    assert spec.format == "tab"
    assert spec.timeout == 30


def test_config_parser_source():
    parser = new_config_parser()
    parser.read_dict({"ontologies": {"GO.uri": "go.tab", "GO.password": "secret"}})
    (spec,) = read_specs(parser, overrides={})
    assert spec.prefix == "GO"
    assert spec.password == "secret"


def test_config_parser_without_section():
    assert read_properties(ConfigParser()) == {}


def test_prefixes_are_sorted():
    specs = read_specs({"ZFA.uri": "zfa.obo", "GO.uri": "go.tab", "FBbt.uri": "fbbt.obo"}, overrides={})
    assert [s.prefix for s in specs] == ["FBbt", "GO", "ZFA"]


def test_uri_override():
    properties = {"GO.uri": "go.tab", "MI.uri": "mi.tab"}
    specs = read_specs(
        properties, overrides={"GO.uri": "/data/go.tab", "TERMCACHE_MI_URI": "/data/mi.tab"}
    )
    assert [s.uri for s in specs] == ["/data/go.tab", "/data/mi.tab"]


def test_uri_override_from_environment(monkeypatch):
    monkeypatch.setenv("TERMCACHE_GO_URI", "/env/go.tab")
    (spec,) = read_specs({"GO.uri": "go.tab"})
    assert spec.uri == "/env/go.tab"


def test_override_provides_missing_uri():
    (spec,) = read_specs({"GO.format": "obo"}, overrides={"GO.uri": "go.obo"})
    assert spec.uri == "go.obo"


def test_missing_uri():
    with pytest.raises(ConfigurationError) as excinfo:
        read_specs({"GO.format": "obo"}, overrides={})
    assert "GO.uri" in str(excinfo.value)


def test_negative_refresh_interval():
    (spec,) = read_specs({"GO.uri": "go.tab", "GO.refresh-interval": "-1"}, overrides={})
    assert spec.refresh_interval == -1


@pytest.mark.parametrize(
    "key,value",
    [
        ("refresh-interval", "often"),
        ("refresh-interval", "1.5"),
        ("tolerate-refresh-exception", "yes"),
        ("timeout", "0"),
        ("timeout", "soon"),
    ],
)
def test_invalid_values(key, value):
    with pytest.raises(ConfigurationError) as excinfo:
        read_specs({"GO.uri": "go.tab", f"GO.{key}": value}, overrides={})
    assert f"GO.{key}" in str(excinfo.value)
    assert value in str(excinfo.value)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        read_specs(tmp_path / "missing.properties", overrides={})


def test_malformed_file(tmp_path):
    path = tmp_path / "bad.ini"
    path.write_text("[ontologies]\nGO.uri = go.tab\nGO.uri = duplicate.tab\n")
    with pytest.raises(ConfigurationError):
        read_specs(path, overrides={})
