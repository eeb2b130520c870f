import re

from licensekit.core.phrases import (
    STATIC_PHRASES,
    PhraseEntry,
    build_phrase_table,
    compile_phrase,
    exact_name_entry,
)


def _first_match(text):
    for entry in STATIC_PHRASES:
        match = entry.pattern.search(text)
        if match:
            return entry.resolve(match)
    return None


def test_compile_phrase_matches_any_whitespace_run():
    pattern = compile_phrase("BSD license")
    assert pattern.search("a bsd\n\t  LICENSE here")
    assert not pattern.search("BSDlicense")


def test_exact_name_entry_is_literal():
    entry = exact_name_entry("The (three-clause) BSD License", "BSD")
    assert entry.pattern.search("under THE (THREE-CLAUSE) BSD LICENSE.")
    assert not entry.pattern.search("The three-clause BSD License")


def test_resolver_kinds():
    single = PhraseEntry(re.compile("x"), "MIT")
    many = PhraseEntry(re.compile("x"), ("A", "B"))
    mapped = PhraseEntry(re.compile(r"v(\d)"), lambda v: (f"L_{v}",))

    assert single.resolve(single.pattern.search("x")) == ("MIT",)
    assert many.resolve(many.pattern.search("x")) == ("A", "B")
    assert mapped.resolve(mapped.pattern.search("v7")) == ("L_7",)


def test_static_table_versions():
    assert _first_match("GNU General Public License, version 1") == ("GPL_1",)
    assert _first_match("GNU Public License ver. 3") == ("GPL_3",)
    assert _first_match("GNU Library General Public License version 2, June 1991") == ("LGPL_2_1",)
    assert _first_match("GPL, version 2") == ("GPL_2",)
    assert _first_match("GPL 9") == ()
    assert _first_match("Artistic license 3") == ()


def test_static_table_has_no_match_for_unrelated_text():
    assert _first_match("Proprietary. All rights reserved.") is None


def test_build_phrase_table_puts_longest_names_first():
    table = build_phrase_table(
        [
            ("The Foo License", "Foo"),
            ("The Foo License 2.0", "Foo_2"),
            ("", "Nameless"),
        ]
    )

    assert [entry.resolver for entry in table[:2]] == ["Foo_2", "Foo"]
    assert table[2:] == STATIC_PHRASES
    assert all(entry.resolver != "Nameless" for entry in table)


def test_build_phrase_table_ignores_enumeration_order():
    named = [("The A License", "A"), ("The B License", "B"), ("The Long C License", "C")]

    forward = build_phrase_table(named)
    backward = build_phrase_table(list(reversed(named)))

    assert [e.resolver for e in forward] == [e.resolver for e in backward]
