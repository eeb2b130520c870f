import pytest

from licensekit.core.catalog import build_catalog
from licensekit.core.config import CatalogConfig
from licensekit.core.guess import classify_from_metadata
from licensekit.core.registries import default_license_registry

CATALOG = build_catalog(default_license_registry(CatalogConfig(load_plugins=False)))


def _guess(text: str):
    return classify_from_metadata(text, catalog=CATALOG)


def test_quoted_registered_key():
    assert _guess('license: "mit"') == ("MIT",)


def test_unknown_key_is_no_guess():
    assert _guess('license: "not_a_real_license"') == ()


def test_meta_yml_v1():
    text = "---\nabstract: 'Foo things'\nauthor:\n  - 'X. Ample'\nlicense: perl\nname: Foo\n"
    assert _guess(text) == ("Perl_5",)


def test_meta_json_v2_list():
    text = (
        '{\n   "abstract" : "Foo things",\n   "license" : [\n      "perl_5"\n   ],\n'
        '   "name" : "Foo",\n   "resources" : {\n      "license" : [ "http://dev.perl.org/licenses/" ]\n   }\n}\n'
    )
    assert _guess(text) == ("Perl_5",)


def test_yaml_sequence_value():
    assert _guess("license:\n  - bsd\n") == ("BSD", "FreeBSD")


def test_ambiguous_key_returns_every_candidate():
    assert _guess("license: gpl") == ("GPL_1", "GPL_2", "GPL_3")
    assert len(_guess("license: open_source")) > 1


@pytest.mark.parametrize(
    "text",
    [
        "name: Foo\nversion: 1.0\n",
        "license: Perl\n",
        "x_license: mit\n",
        "",
    ],
)
def test_no_license_field(text):
    assert _guess(text) == ()


def test_first_license_field_wins():
    assert _guess("license: mit\nlicense: gpl\n") == ("MIT",)
