from __future__ import annotations

import pytest

from data_model import ClassDoc, Constant, EnumDoc, Example, Function, InterfaceDoc, Parameter, Property
from html_parser import MissingElementError, parse_class, parse_class_description, parse_enum, parse_interface


def test_enum_scenario(doc) -> None:
    page = doc.page(
        doc.h(2, "Constants"),
        doc.h(3, "FOO"),
        doc.p("The foo constant."),
        title="Direction",
        lead="Does a thing.",
    )

    assert parse_enum(page) == EnumDoc(
        name="Direction",
        description="Does a thing.",
        constants=[Constant(name="FOO", description="The foo constant.")],
    )


def test_enum_lead_paragraph_is_stripped(doc) -> None:
    page = doc.page(title="GameMode", lead="  Game modes.\n")

    assert parse_enum(page) == EnumDoc(name="GameMode", description="Game modes.", constants=[])


def test_interface_collects_properties_and_examples(doc) -> None:
    page = doc.page(
        doc.h(2, "Properties"),
        doc.h(3, "x"),
        doc.p("X coordinate."),
        doc.h(4, "Examples"),
        doc.h(5, "vector.ts"),
        doc.pre("const v = { x: 1 };"),
        title="Vector3",
        lead=" A vector. ",
    )

    assert parse_interface(page) == InterfaceDoc(
        name="Vector3",
        description="A vector.",
        properties=[Property(name="x", description="X coordinate.")],
        examples=[Example(code_name="vector.ts", code="const v = { x: 1 };")],
    )


def test_class_assembles_all_sections(doc) -> None:
    page = doc.page(
        doc.h(2, "Extends"),
        doc.ul("Component"),
        doc.h(2, "Classes that extend Entity"),
        doc.ul("Player", "Npc"),
        doc.h(2, "Properties"),
        doc.h(3, "id"),
        doc.p("Identifier."),
        doc.h(2, "Methods"),
        doc.h(3, "kill"),
        doc.p("Kills the entity."),
        doc.h(4, "Parameters"),
        doc.ul("<p>cause</p><p>Damage cause.</p>"),
        doc.h(4, "Examples"),
        doc.h(5, "kill.ts"),
        doc.pre("entity.kill();"),
        doc.h(2, "Constants"),
        doc.h(3, "componentId"),
        doc.p("minecraft:entity"),
        title="Entity",
        lead="Represents an entity.",
    )

    assert parse_class(page) == ClassDoc(
        name="Entity",
        description="Represents an entity. Extends: Component. Extends: Player, Npc.",
        properties=[Property(name="id", description="Identifier.")],
        methods=[Function(
            name="kill",
            description="Kills the entity.",
            parameters=[Parameter(name="cause", description="Damage cause.")],
        )],
        constants=[Constant(name="componentId", description="minecraft:entity")],
        examples=[Example(code_name="kill.ts", code="entity.kill();")],
    )


def test_class_section_titles_must_match_exactly(doc) -> None:
    page = doc.page(
        doc.h(2, "Static Properties"),
        doc.h(3, "count"),
        doc.p("Counter."),
        title="Thing",
    )

    assert parse_class(page).properties == []


def test_class_description_from_visible_danger_callout(doc) -> None:
    page = doc.page(
        doc.alert("danger", "Experimental API."),
        doc.p(" This class is in preview."),
        lead="Lead paragraph.",
    )

    assert parse_class_description(page) == "Experimental API. This class is in preview."
    assert parse_class(page).description == "Experimental API. This class is in preview."


def test_hidden_danger_callout_is_skipped(doc) -> None:
    page = doc.page(
        doc.alert("danger", "Hidden caution.", attrs='style="display:none"'),
        doc.p("After hidden."),
        doc.alert("danger", "Visible caution."),
        doc.p(" After visible."),
    )

    assert parse_class_description(page) == "Visible caution. After visible."


def test_danger_callout_without_paragraph_uses_lead(doc) -> None:
    page = doc.page(
        doc.alert("danger", "Caution."),
        doc.ul("not a paragraph"),
        lead=" Lead paragraph. ",
    )

    # lead paragraph is returned as-is for classes
    assert parse_class_description(page) == " Lead paragraph. "


def test_missing_title_raises_lookup_error(doc) -> None:
    page = doc.page(title=None)

    with pytest.raises(MissingElementError):
        parse_enum(page)
    with pytest.raises(LookupError):
        parse_interface(page)


def test_missing_content_root_raises(doc) -> None:
    from html_parser import Settings, parse_html

    page = parse_html("<html><body><h1>T</h1><p>x</p></body></html>", Settings())

    with pytest.raises(MissingElementError) as exc_info:
        parse_enum(page)
    assert exc_info.value.selector == "div.content"


def test_class_failure_is_logged_and_reraised(doc, capsys) -> None:
    page = doc.page(title=None)

    with pytest.raises(MissingElementError):
        parse_class(page)

    assert "Błąd podczas parsowania klasy" in capsys.readouterr().err
