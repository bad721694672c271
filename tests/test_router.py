"""Tests for the dispatching of lookups to the configured ontologies."""

import io

import pytest

from fbcam.termcache.cache import TermCache
from fbcam.termcache.errors import (
    ConfigurationError,
    InvalidIdentifierError,
    ParseError,
    ResourceError,
    TermNotFoundError,
    UnknownFormatError,
    UnknownPrefixError,
)
from fbcam.termcache.formats.tab import TabAdapter
from fbcam.termcache.registry import OntologyRegistry
from fbcam.termcache.router import PrefixRouter


@pytest.fixture
def router(tmp_path, data_dir):
    path = tmp_path / "two.tab"
    path.write_text(
        "GO:0000001\tmitochondrion inheritance\nGO:0000002\tmitochondrial genome maintenance\n"
    )
    config = {
        "GO.uri": str(path),
        "GO.refresh-interval": "0",
        "FUNC.uri": str(data_dir / "function.ontology"),
        "FUNC.format": "dag",
    }
    return PrefixRouter(config, overrides={})


def test_get_term(router):
    assert router.get_term("GO:0000001") == "mitochondrion inheritance"
    assert router.get_term("GO:0000002") == "mitochondrial genome maintenance"


def test_get_term_from_other_prefix(router):
    # Terms are looked up by their full ID, whatever their own prefix
    with pytest.raises(TermNotFoundError):
        router.get_term("FUNC:0003674")


def test_term_not_found(router):
    with pytest.raises(TermNotFoundError) as excinfo:
        router.get_term("GO:9999999")
    assert excinfo.value.identifier == "GO:9999999"


@pytest.mark.parametrize("identifier", ["BADID", "GO-0000001", "GO0000001", " "])
def test_invalid_identifier(router, identifier):
    assert not router.is_valid_id(identifier)
    with pytest.raises(InvalidIdentifierError):
        router.get_term(identifier)


def test_none_identifier(router):
    assert not router.is_valid_id(None)
    with pytest.raises(InvalidIdentifierError):
        router.get_term(None)


def test_unknown_prefix(router):
    with pytest.raises(UnknownPrefixError) as excinfo:
        router.get_term("ZZ:0001")
    assert excinfo.value.prefix == "ZZ"


def test_as_map(router):
    caches = router.as_map()
    assert sorted(caches) == ["FUNC", "GO"]
    assert router.prefixes == ["FUNC", "GO"]
    assert "GO" in router
    assert len(router) == 2
    for prefix, cache in caches.items():
        assert isinstance(cache, TermCache)
        assert cache.prefix == prefix
    assert caches["FUNC"].format == "dag"
    with pytest.raises(TypeError):
        caches["MI"] = caches["GO"]


def test_describe(router):
    summary = router.describe()
    assert "Prefix:\tGO" in summary
    assert "Prefix:\tFUNC" in summary
    assert str(router) == summary


def test_properties_file(tmp_path, data_dir):
    path = tmp_path / "ontologies.properties"
    path.write_text(f"GO.uri={data_dir / 'go.obo'}\nGO.format=obo\n")
    router = PrefixRouter(str(path), overrides={})
    assert router.get_term("GO:0048308") == "organelle inheritance"


def test_stream_provider():
    def provider(uri):
        if uri == "memory:go":
            return io.BytesIO(b"GO:0000001\tfrom memory\n")
        return None

    router = PrefixRouter({"GO.uri": "memory:go"}, stream_provider=provider, overrides={})
    assert router.get_term("GO:0000001") == "from memory"


def test_custom_registry(data_dir):
    registry = OntologyRegistry()
    registry.register("simple", lambda spec, accessor: TermCache(spec, TabAdapter(), accessor))
    config = {"GO.uri": str(data_dir / "go.tab"), "GO.format": "simple"}
    router = PrefixRouter(config, registry=registry, overrides={})
    assert router.get_term("GO:0000003") == "reproduction"


def test_unknown_format(data_dir):
    config = {"GO.uri": str(data_dir / "go.tab"), "GO.format": "owl"}
    with pytest.raises(UnknownFormatError):
        PrefixRouter(config, overrides={})


def test_one_failing_ontology_fails_all(tmp_path, data_dir):
    config = {
        "GO.uri": str(data_dir / "go.tab"),
        "MI.uri": str(tmp_path / "missing.tab"),
    }
    with pytest.raises(ResourceError):
        PrefixRouter(config, overrides={})


def test_malformed_ontology(tmp_path):
    path = tmp_path / "bad.tab"
    path.write_text("GO:0000001\n")
    with pytest.raises(ParseError):
        PrefixRouter({"GO.uri": str(path)}, overrides={})


def test_invalid_configuration(data_dir):
    config = {"GO.uri": str(data_dir / "go.tab"), "GO.refresh-interval": "never"}
    with pytest.raises(ConfigurationError):
        PrefixRouter(config, overrides={})


def test_refresh_through_router(router, tmp_path):
    (tmp_path / "two.tab").write_text("GO:0000001\trenamed\n")
    assert router.get_term("GO:0000001") == "renamed"
