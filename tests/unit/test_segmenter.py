from __future__ import annotations

from html_parser import NodeKind, heading_boundary, iterate_until


def test_iterate_until_returns_nodes_strictly_between(doc) -> None:
    page = doc.page(
        doc.h(2, "Properties"),
        doc.p("one"),
        doc.ul("two"),
        doc.p("three"),
        doc.h(2, "Methods"),
        doc.p("after"),
    )
    start = page.headings(2)[0]

    nodes = iterate_until(start, lambda n: n.is_heading(2))

    assert [n.kind for n in nodes] == [NodeKind.PARAGRAPH, NodeKind.LIST, NodeKind.PARAGRAPH]
    assert [n.text for n in nodes] == ["one", "two", "three"]


def test_iterate_until_empty_when_next_sibling_is_boundary(doc) -> None:
    page = doc.page(doc.h(2, "Properties"), doc.h(2, "Methods"), doc.p("x"))
    start = page.headings(2)[0]

    assert iterate_until(start, lambda n: n.is_heading(2)) == []


def test_iterate_until_runs_to_last_sibling(doc) -> None:
    page = doc.page(doc.h(2, "Constants"), doc.p("a"), doc.p("b"))
    start = page.headings(2)[0]

    nodes = iterate_until(start, lambda n: False)

    assert [n.text for n in nodes] == ["a", "b"]


def test_iterate_until_with_arbitrary_predicate(doc) -> None:
    page = doc.page(doc.h(2, "S"), doc.p("a"), doc.pre("code"), doc.p("b"))
    start = page.headings(2)[0]

    nodes = iterate_until(start, lambda n: n.kind is NodeKind.CODE_BLOCK)

    assert [n.text for n in nodes] == ["a"]


def test_heading_boundary_stops_at_same_or_coarser_level(doc) -> None:
    page = doc.page(
        doc.h(2, "Methods"),
        doc.h(3, "first"),
        doc.p("body"),
        doc.h(4, "Parameters"),
        doc.ul("x"),
        doc.h(2, "Constants"),
        doc.p("not in entry"),
    )
    entry = page.headings(3)[0]

    nodes = iterate_until(entry, heading_boundary(3))

    assert [n.kind for n in nodes] == [NodeKind.PARAGRAPH, NodeKind.HEADING, NodeKind.LIST]
    assert nodes[1].level == 4


def test_heading_boundary_ignores_deeper_headings() -> None:
    boundary = heading_boundary(2)

    class _Fake:
        def __init__(self, level: int) -> None:
            self.level = level

        def is_heading(self) -> bool:
            return True

    assert boundary(_Fake(2))
    assert boundary(_Fake(1))
    assert not boundary(_Fake(3))
