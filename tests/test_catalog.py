import threading

import pytest

import licensekit.core.catalog as catalog_mod
from licensekit.core.catalog import build_catalog, get_catalog, rebuild_catalog, set_catalog
from licensekit.core.config import CatalogConfig
from licensekit.core.guess import lookup_by_key
from licensekit.core.registries import default_license_registry
from licensekit.licenses import License


def _builtin_catalog():
    return build_catalog(default_license_registry(CatalogConfig(load_plugins=False)))


class Alpha(License):
    id = "Alpha"
    title = "The Alpha License"
    meta1 = "shared"
    meta2 = "alpha_2"


class Beta(License):
    id = "Beta"
    title = "The Beta License"
    meta1 = "beta"
    meta2 = "shared"


def test_every_definition_is_findable_by_both_keys():
    catalog = _builtin_catalog()

    for ident in catalog.identifiers():
        definition = catalog.definition(ident)
        assert ident in lookup_by_key(definition.v1_key(), "1", catalog=catalog)
        assert ident in lookup_by_key(definition.v2_key(), "2", catalog=catalog)


def test_unversioned_lookup_is_union_of_v1_and_v2():
    catalog = _builtin_catalog()

    for key in set(catalog.keys_v1) | set(catalog.keys_v2):
        expected = set(catalog.lookup(key, "1")) | set(catalog.lookup(key, "2"))
        assert set(lookup_by_key(key, catalog=catalog)) == expected


def test_lookup_known_keys():
    catalog = _builtin_catalog()

    assert lookup_by_key("gpl", "1", catalog=catalog) == ("GPL_1", "GPL_2", "GPL_3")
    assert lookup_by_key("gpl_2", "2", catalog=catalog) == ("GPL_2",)
    assert lookup_by_key("gpl_2", "1", catalog=catalog) == ()
    assert lookup_by_key("perl", 1, catalog=catalog) == ("Perl_5",)
    assert lookup_by_key("perl_5", catalog=catalog) == ("Perl_5",)
    assert lookup_by_key("no_such_key", catalog=catalog) == ()


@pytest.mark.parametrize("version", ["3", 3, "0", "v1", ""])
def test_lookup_rejects_illegal_version(version):
    catalog = _builtin_catalog()

    with pytest.raises(ValueError, match="illegal metadata version"):
        lookup_by_key("gpl", version, catalog=catalog)


def test_colliding_keys_are_unioned():
    catalog = build_catalog([Alpha, Beta])

    assert catalog.lookup("shared", "1") == {"Alpha"}
    assert catalog.lookup("shared", "2") == {"Beta"}
    assert catalog.lookup("shared") == {"Alpha", "Beta"}


def test_broken_definition_is_skipped(caplog):
    class Broken(License):
        id = "Broken"

        @classmethod
        def v1_key(cls):
            raise RuntimeError("cannot read key")

    with caplog.at_level("WARNING", logger="licensekit.core.catalog"):
        catalog = build_catalog([Broken, Alpha])

    assert catalog.identifiers() == ["Alpha"]
    assert "Broken" not in catalog.lookup("unknown")
    assert any("cannot read key" in rec.getMessage() for rec in caplog.records)


def test_catalog_is_read_only():
    catalog = build_catalog([Alpha])

    with pytest.raises(TypeError):
        catalog.keys_all["new"] = frozenset({"x"})  # type: ignore[index]


def test_exact_names_precede_static_phrases():
    catalog = build_catalog([Alpha, Beta])

    assert [entry.resolver for entry in catalog.phrases[:2]] == ["Alpha", "Beta"]
    assert catalog.phrases[0].pattern.search("licensed under THE ALPHA LICENSE")


def test_get_catalog_builds_once_across_threads(monkeypatch):
    calls = []
    sentinel = build_catalog([Alpha])
    gate = threading.Event()

    def fake_build(config):
        calls.append(config)
        gate.wait(timeout=1)
        return sentinel

    monkeypatch.setattr(catalog_mod, "_build_default", fake_build)
    monkeypatch.setattr(catalog_mod, "_CATALOG", None)

    results = []
    threads = [threading.Thread(target=lambda: results.append(get_catalog())) for _ in range(8)]
    for t in threads:
        t.start()
    gate.set()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is sentinel for r in results)


def test_rebuild_and_set_catalog(monkeypatch):
    monkeypatch.setattr(catalog_mod, "_CATALOG", None)
    custom = build_catalog([Alpha])

    set_catalog(custom)
    assert get_catalog() is custom

    rebuilt = rebuild_catalog(CatalogConfig(load_plugins=False))
    assert rebuilt is not custom
    assert get_catalog() is rebuilt
    assert "GPL_2" in rebuilt.definitions
