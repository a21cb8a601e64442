"""Testy config_parser.structure: sekcje, grupy i ich pierwszeństwo."""

from __future__ import annotations

import pytest

from config_model import BlockKind
from config_parser import ParseOptions, describe_block, normalize, parse_blocks


def _parse(text: str, **options):
    doc = normalize(text)
    return doc, parse_blocks(doc, ParseOptions(**options))


class TestSections:

    def test_header_with_indented_body(self):
        doc, forest = _parse("interface Gi0/1\n description old\n")

        assert len(forest.roots) == 1
        section = forest.roots[0]
        assert section.kind is BlockKind.SECTION
        assert section.header_line_index == 0
        assert list(section.member_indices) == [0, 1]
        assert section.depth == 0
        assert section.parent is None
        assert forest.innermost == [section, section]

    def test_section_closes_on_indentation_drop(self, router_config):
        doc, forest = _parse(router_config)

        sections = [b for b in forest.roots if b.kind is BlockKind.SECTION]
        labels = [describe_block(b, doc) for b in sections]
        assert labels == [
            "interface GigabitEthernet0/1",
            "interface GigabitEthernet0/2",
            "interface GigabitEthernet0/3",
            "ip access-list extended MGMT",
            "router bgp 65000",
        ]
        assert list(sections[0].member_indices) == [1, 2, 3, 4]

    def test_nested_sections(self, router_config):
        doc, forest = _parse(router_config)

        bgp = next(b for b in forest.roots if describe_block(b, doc) == "router bgp 65000")
        assert [describe_block(c, doc) for c in bgp.children] == ["address-family ipv4"]
        af = bgp.children[0]
        assert af.depth == 1
        assert af.parent is bgp
        assert list(af.ancestors()) == [bgp]
        # exit-address-family wraca na poziom ciała bgp
        exit_index = doc.texts().index(" exit-address-family")
        assert forest.block_for(exit_index) is bgp
        network_index = doc.texts().index("  network 10.10.0.0 mask 255.255.0.0")
        assert forest.block_for(network_index) is af

    def test_section_ends_at_document_end(self):
        doc, forest = _parse("router ospf 1\n network 10.0.0.0 0.0.0.255 area 0\n passive-interface default\n")

        assert list(forest.roots[0].member_indices) == [0, 1, 2]

    def test_blank_line_does_not_close_by_default(self):
        doc, forest = _parse("interface Gi0/1\n description a\n\n shutdown\n")

        assert list(forest.roots[0].member_indices) == [0, 1, 2]

    def test_blank_line_closes_when_enabled(self):
        doc, forest = _parse(
            "interface Gi0/1\n description a\n\n shutdown\n",
            blank_line_closes_section=True,
        )

        assert list(forest.roots[0].member_indices) == [0, 1]
        assert forest.block_for(2) is None

    def test_indented_first_line_can_open_a_section(self):
        doc, forest = _parse(" vrf definition A\n  rd 1:1\n")

        assert forest.roots[0].kind is BlockKind.SECTION
        assert forest.roots[0].header_line_index == 0


class TestGroups:

    def test_consecutive_lines_sharing_leading_words(self):
        doc, forest = _parse("access-list 1 permit a\naccess-list 1 permit b\n")

        group = forest.roots[0]
        assert group.kind is BlockKind.GROUP
        assert group.header_line_index is None
        assert list(group.member_indices) == [0, 1]
        assert group.leading == "access-list 1 permit"
        assert describe_block(group, doc) == "access-list 1 permit ..."

    def test_group_inside_section_body(self, router_config):
        doc, forest = _parse(router_config)

        acl = next(b for b in forest.roots if describe_block(b, doc) == "ip access-list extended MGMT")
        assert len(acl.children) == 1
        group = acl.children[0]
        assert group.kind is BlockKind.GROUP
        assert group.depth == 1
        assert group.parent is acl
        assert group.leading == "permit tcp host"
        deny_index = doc.texts().index(" deny ip any any log")
        assert forest.block_for(deny_index) is acl

    def test_top_level_group(self, router_config):
        doc, forest = _parse(router_config)

        group = forest.roots[-1]
        assert group.kind is BlockKind.GROUP
        assert group.leading == "ntp server"
        assert forest.block_for(len(doc) - 1) is None  # "end"

    def test_single_line_is_never_a_group(self):
        doc, forest = _parse("ntp server 192.0.2.1\nhostname R1\n")

        assert forest.roots == []
        assert forest.innermost == [None, None]

    def test_group_words_option(self):
        text = "ip route 10.0.0.0 255.0.0.0 Null0\nip route 172.16.0.0 255.240.0.0 Null0\n"

        _, two = _parse(text, group_words=2)
        _, three = _parse(text, group_words=3)

        assert len(two.roots) == 1
        assert three.roots == []

    def test_lines_shorter_than_group_width_never_group(self):
        doc, forest = _parse("interface Gi0/1\n shutdown\n shutdown\n")

        assert forest.roots[0].children == []

    def test_different_indentation_breaks_a_run(self):
        doc, forest = _parse("a b c\n a b d\n")

        # druga linia jest wcięta: sekcja, nie grupa
        assert forest.roots[0].kind is BlockKind.SECTION

    def test_invalid_group_words(self):
        with pytest.raises(ValueError):
            ParseOptions(group_words=0)


class TestPriority:

    def test_section_wins_over_group(self):
        doc, forest = _parse(
            "class-map match-any VOICE\n match dscp ef\n"
            "class-map match-any VIDEO\n match dscp af41\n"
        )

        assert [b.kind for b in forest.roots] == [BlockKind.SECTION, BlockKind.SECTION]

    def test_group_stops_before_a_section_header(self):
        doc, forest = _parse(
            "ntp server 192.0.2.1\nntp server 192.0.2.2\nntp server 192.0.2.3\n prefer\n"
        )

        group, section = forest.roots
        assert group.kind is BlockKind.GROUP
        assert list(group.member_indices) == [0, 1]
        assert section.kind is BlockKind.SECTION
        assert list(section.member_indices) == [2, 3]


class TestDegenerateInput:

    def test_empty_document(self):
        doc, forest = _parse("")

        assert forest.roots == []
        assert forest.innermost == []
        assert len(forest) == 0

    def test_no_structural_clues(self):
        doc, forest = _parse("hostname R1\nservice timestamps\nend\n")

        assert forest.roots == []
        assert forest.innermost == [None, None, None]

    def test_every_line_has_one_innermost_claim(self, router_config):
        doc, forest = _parse(router_config)

        assert len(forest.innermost) == len(doc)
        for index, block in enumerate(forest.innermost):
            if block is None:
                continue
            assert index in block
            for child in block.children:
                assert index not in child

    def test_walk_is_document_order(self, router_config):
        doc, forest = _parse(router_config)

        starts = [b.start for b in forest.walk()]
        assert starts == sorted(starts)
        assert len(forest) == 8
