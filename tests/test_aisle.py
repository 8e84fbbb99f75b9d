import io

import pytest

from cooklang.aisle import (
    AisleConf,
    AisleParseError,
    Category,
    DuplicateCategoryError,
    DuplicateIngredientError,
    Ingredient,
    IngredientInfo,
    Severity,
    Span,
    dumps,
    parse,
    parse_lenient,
    write,
)

CONF = """
[produce]
potatoes

[dairy]
milk
butter
[deli]
chicken

[canned goods]
tuna|chicken of the sea

[empty category]
[another]
"""


def test_basic_aisle():
    text = "\n[produce]\npotatoes\n\n[dairy]\nmilk\nbutter\n"
    assert parse(text).categories == [
        Category("produce", [Ingredient(["potatoes"])]),
        Category("dairy", [Ingredient(["milk"]), Ingredient(["butter"])]),
    ]


def test_empty_file():
    assert parse("").categories == []


def test_empty_category():
    assert parse("\n[empty]\n").categories == [Category("empty", [])]


def test_no_space():
    text = "\n[produce]\npotatoes\n[dairy]\nmilk\n"
    assert parse(text).categories == [
        Category("produce", [Ingredient(["potatoes"])]),
        Category("dairy", [Ingredient(["milk"])]),
    ]


def test_synonyms():
    text = "[canned goods]\ntuna|chicken of the sea\n"
    assert parse(text).categories == [
        Category("canned goods", [Ingredient(["tuna", "chicken of the sea"])])
    ]


def test_synonym_lookup():
    info = parse("[canned goods]\ntuna|chicken of the sea\n").ingredients_info()
    assert [info[n].common_name for n in ["tuna", "chicken of the sea"]] == [
        "tuna",
        "tuna",
    ]
    assert info["chicken of the sea"] == IngredientInfo(
        "chicken of the sea", "tuna", "canned goods"
    )


def test_duplicate_ingredient():
    with pytest.raises(DuplicateIngredientError) as exc:
        parse("[first]\nme\n[seconds]\nme")
    assert exc.value == DuplicateIngredientError("me", Span(8, 10), Span(21, 23))
    assert str(exc.value) == "Duplicate ingredient: 'me'"


def test_duplicate_category():
    with pytest.raises(DuplicateCategoryError) as exc:
        parse("[cat]\n[cat]\n")
    err = exc.value
    assert err.name == "cat"
    assert err.first_span == Span(1, 4)
    assert err.second_span == Span(7, 10)
    assert err.labels() == [
        (Span(7, 10), "this category"),
        (Span(1, 4), "was first defined here"),
    ]
    assert err.hints() == ["Remove the duplicate category"]
    assert err.severity is Severity.ERROR


def test_full_shopping_list():
    expected = [
        Category("produce", [Ingredient(["potatoes"])]),
        Category("dairy", [Ingredient(["milk"]), Ingredient(["butter"])]),
        Category("deli", [Ingredient(["chicken"])]),
        Category("canned goods", [Ingredient(["tuna", "chicken of the sea"])]),
        Category("empty category", []),
        Category("another", []),
    ]
    assert parse(CONF).categories == expected


def test_conf_write_round_trip():
    got = parse(CONF)
    buffer = io.StringIO()
    write(got, buffer)
    assert parse(buffer.getvalue()) == got


def test_dumps_format():
    conf = AisleConf([Category("a", [Ingredient(["x", "y"]), Ingredient([])])])
    assert dumps(conf) == "[a]\nx|y\n\n"


def test_comments_and_whitespace_stripped():
    conf = parse("  [dairy]  // aisle 3\n  milk | whole milk // fresh\n")
    assert conf.categories == [Category("dairy", [Ingredient(["milk", "whole milk"])])]


def test_crlf_lines():
    conf = parse("[dairy]\r\nmilk\r\n")
    assert conf.categories == [Category("dairy", [Ingredient(["milk"])])]


def test_ingredient_before_category_is_error():
    with pytest.raises(AisleParseError) as exc:
        parse("orphan\n[cat]\n")
    assert exc.value.message == "Expected category"
    assert exc.value.span == Span(0, 6)
    assert exc.value.labels() == [(Span(0, 6), None)]
    assert exc.value.hints() == []


def test_invalid_category_name_is_error():
    with pytest.raises(AisleParseError) as exc:
        parse("[a|b]\n")
    assert str(exc.value) == "Error parsing input: Invalid category name"
    assert exc.value.span == Span(1, 4)


def test_reverse_is_deprecated():
    conf = parse("[canned goods]\ntuna|chicken of the sea\n")
    with pytest.warns(DeprecationWarning):
        reversed_map = conf.reverse()
    assert reversed_map == {"tuna": "tuna", "chicken of the sea": "chicken of the sea"}


def test_parse_lenient_doc_example():
    conf, diagnostics = parse_lenient("\n[fruit and vegetables]\npotato\napple\n")
    assert len(conf.categories) == 1
    assert len(conf.categories[0].ingredients) == 2
    assert diagnostics == []


def test_parse_lenient_with_duplicates():
    text = """
[dairy]
milk
cheese

[produce]
apple
apple
banana

[meat]
chicken
apple
"""
    conf, diagnostics = parse_lenient(text)
    assert len(diagnostics) == 2
    assert all(d.severity is Severity.WARNING for d in diagnostics)
    assert len(conf.categories) == 3
    produce = conf.categories[1]
    assert produce.name == "produce"
    assert [i.names for i in produce.ingredients] == [["apple"], ["banana"]]
    meat = conf.categories[2]
    assert meat.name == "meat"
    assert [i.names for i in meat.ingredients] == [["chicken"]]


def test_parse_lenient_with_all_error_types():
    text = """
orphan ingredient
[dairy|invalid]
milk
[dairy]
cheese
[produce]
apple
"""
    conf, diagnostics = parse_lenient(text)
    assert len(diagnostics) == 3
    assert len(conf.categories) == 2
    assert conf.categories[0].name == "dairy"
    assert [i.names for i in conf.categories[0].ingredients] == [["cheese"]]
    assert conf.categories[1].name == "produce"
    assert [i.names for i in conf.categories[1].ingredients] == [["apple"]]


def test_parse_lenient_duplicate_category_warning():
    conf, diagnostics = parse_lenient("[cat]\nx\n[cat]\ny\n")
    assert [str(d) for d in diagnostics] == ["Duplicate category: 'cat'"]
    assert diagnostics[0].labels == ((Span(9, 12), "duplicate found here"),)
    assert conf.categories == [Category("cat", [Ingredient(["x"]), Ingredient(["y"])])]