from __future__ import annotations

from famtree.config import DisplaySettings
from famtree.families import FamilyGroup
from famtree.registry import Gender, MemberRegistry
from famtree.render.layout import (
    CONNECTOR,
    FamilyBlock,
    build_block,
    center,
    children_line,
    display_name,
    layout_rows,
    parent_line,
)

SETTINGS = DisplaySettings()


def make_registry():
    reg = MemberRegistry()
    reg.create_root("John", Gender.MALE, True)
    reg.create_member("Mary", Gender.FEMALE, True)
    return reg


def test_display_name_cuts_without_ellipsis():
    assert display_name("Abcdefghijklmnopqrst", 15) == "Abcdefghijklmno"
    assert display_name("Ann", 15) == "Ann"


def test_center_puts_odd_space_on_the_right():
    assert center("ab", 5) == " ab  "
    assert center("abc", 5) == " abc "
    assert center("", 6) == "      "
    assert len(center("John", 25)) == 25


def test_parent_line_uses_placeholders_for_missing_parents():
    reg = make_registry()

    assert parent_line(reg, FamilyGroup(), SETTINGS) == "Unknown (M) - Unknown (F)"
    assert parent_line(reg, FamilyGroup(father=0, mother=1), SETTINGS) == "John (M) - Mary (F)"
    assert parent_line(reg, FamilyGroup(mother=1), SETTINGS) == "Unknown (M) - Mary (F)"


def test_parent_line_keeps_recorded_gender_of_present_parent():
    reg = make_registry()
    # Mary recorded in the father slot still shows her own gender
    assert parent_line(reg, FamilyGroup(father=1), SETTINGS) == "Mary (F) - Unknown (F)"


def test_children_line_truncates_each_name():
    reg = make_registry()
    reg.create_member("Abcdefghijklmnopqrst", Gender.MALE, True)

    group = FamilyGroup(children=[1, 2])
    assert children_line(reg, group, SETTINGS) == "Mary Abcdefghijklmno"


def test_block_width_has_a_floor():
    block = FamilyBlock(parent_line="ab", children_line="", width=6)
    assert block.parent_cell() == "  ab  "
    assert block.children_cell() == "      "

    reg = make_registry()
    empty = build_block(reg, FamilyGroup(father=0, mother=1), DisplaySettings(min_block_width=40))
    assert empty.width == 40
    assert empty.children_line == ""


def test_block_width_follows_longest_line():
    reg = make_registry()
    block = build_block(reg, FamilyGroup(father=0, mother=1, children=[1]), SETTINGS)

    assert block.parent_line == "John (M) - Mary (F)"
    assert block.width == 19


def test_connector_sits_near_parent_line_middle():
    block = FamilyBlock(parent_line="John (M) - Mary (F)", children_line="Alice", width=19)

    assert block.connector_offset == 9
    assert block.connector_cell() == " " * 9 + CONNECTOR + " " * 9

    wide = FamilyBlock(parent_line="abcd", children_line="x" * 10, width=10)
    # left pad 3 + 4 // 2
    assert wide.connector_offset == 5


def test_rows_join_blocks_with_gap():
    a = FamilyBlock(parent_line="aa", children_line="b", width=6)
    b = FamilyBlock(parent_line="cccc", children_line="dd", width=6)

    parents, connectors, children = layout_rows([a, b], gap=3)

    assert parents == "  aa  " + "   " + " cccc "
    assert connectors == "   " + CONNECTOR + "  " + "   " + "   " + CONNECTOR + "  "
    assert children == "  b   " + "   " + "  dd  "
    assert len(parents) == len(connectors) == len(children) == 15
