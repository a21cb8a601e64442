"""Testy differ.engine / differ.context: porównanie z kontekstem."""

from __future__ import annotations

import pytest

from config_model import ContextWindow, EntryKind, InputError, Side
from config_parser import ParseOptions, normalize, parse_blocks
from differ import change_regions, compare, context_window, diff, edit_script, summary


def _replace(text: str, old: str, new: str) -> str:
    assert old in text
    return text.replace(old, new, 1)


def _assert_context_complete(result) -> None:
    """Każda zmieniona linia pokazywana jest z całym najgłębszym blokiem."""
    for hunk in result.hunks:
        left_shown = {e.left_index for e in hunk.entries if e.left_index is not None}
        right_shown = {e.right_index for e in hunk.entries if e.right_index is not None}
        for e in hunk.entries:
            if e.kind is EntryKind.REMOVED:
                block = result.left_forest.block_for(e.left_index)
                if block is not None:
                    assert set(block.member_indices) <= left_shown
            elif e.kind is EntryKind.ADDED:
                block = result.right_forest.block_for(e.right_index)
                if block is not None:
                    assert set(block.member_indices) <= right_shown


class TestScenarios:

    def test_changed_line_inside_section(self):
        left = "interface Gi0/1\n description old\n"
        right = "interface Gi0/1\n description new\n"

        assert diff(left, right) == [
            " interface Gi0/1",
            "- description old",
            "+ description new",
        ]

    def test_comments_only_differ(self):
        assert diff("! comment\nhostname R1\n", "hostname R1\n! different comment\n") == []

    def test_trailing_blank_line_only(self):
        assert diff("hostname R1\nend\n", "hostname R1\nend\n\n") == []

    def test_changed_line_inside_group(self):
        left = "access-list 1 permit a\naccess-list 1 permit b\n"
        right = "access-list 1 permit a\naccess-list 1 permit c\n"

        assert diff(left, right) == [
            " access-list 1 permit a",
            "-access-list 1 permit b",
            "+access-list 1 permit c",
        ]


class TestProperties:

    def test_identity(self, router_config):
        assert diff(router_config, router_config) == []
        assert diff("! only\n!\n", "! only\n!\n") == []
        assert diff("", "") == []

    def test_comment_and_whitespace_transparency(self, router_config):
        noisy = router_config.replace("\n", "   \n").replace("hostname R1", "! note\nhostname R1")

        assert diff(router_config, noisy) == []

    def test_crlf_is_transparent(self, router_config):
        assert diff(router_config, router_config.replace("\n", "\r\n")) == []

    def test_context_completeness(self, router_config):
        right = _replace(router_config, "192.0.2.11", "192.0.2.12")
        right = _replace(right, " description access\n", "")
        right = _replace(right, "ntp server 192.0.2.2\n", "ntp server 192.0.2.2\nntp server 192.0.2.3\n")

        result = compare(router_config, right)

        assert not result.is_empty
        _assert_context_complete(result)

    def test_ordering_follows_document(self, router_config):
        right = _replace(router_config, "description spare", "description reserved")
        right = _replace(right, "description uplink to core", "description uplink")

        lines = diff(router_config, right)

        assert lines.index("- description uplink to core") < lines.index("- description spare")
        assert lines.index("+ description uplink") < lines.index("+ description reserved")

    def test_two_changes_in_one_section_merge(self, router_config):
        right = _replace(router_config, "description uplink to core", "description uplink")
        right = _replace(right, " no shutdown\n", " shutdown\n")

        result = compare(router_config, right)

        assert len(result.hunks) == 1
        assert diff(router_config, right) == [
            " interface GigabitEthernet0/1",
            "- description uplink to core",
            "+ description uplink",
            "  ip address 10.0.0.1 255.255.255.252",
            "- no shutdown",
            "+ shutdown",
        ]

    def test_disjoint_sections_give_separate_hunks(self, router_config):
        right = _replace(router_config, "description uplink to core", "description uplink")
        right = _replace(right, "description spare", "description reserved")

        lines = diff(router_config, right)

        assert lines == [
            " interface GigabitEthernet0/1",
            "- description uplink to core",
            "+ description uplink",
            "  ip address 10.0.0.1 255.255.255.252",
            "  no shutdown",
            "",
            " interface GigabitEthernet0/3",
            "- description spare",
            "+ description reserved",
            "  shutdown",
        ]

    def test_neighbouring_sections_stay_separate(self):
        left = "interface A\n description x\ninterface B\n description y\n"
        right = "interface A\n description x2\ninterface B\n description y2\n"

        result = compare(left, right)

        assert len(result.hunks) == 2
        assert diff(left, right) == [
            " interface A",
            "- description x",
            "+ description x2",
            "",
            " interface B",
            "- description y",
            "+ description y2",
        ]

    def test_neighbouring_stanzas_without_separator_comments(self, router_config):
        right = _replace(router_config, "description access", "description users")
        right = _replace(right, "description spare", "description reserved")

        lines = diff(router_config.replace("!\n", ""), right.replace("!\n", ""))

        assert lines.count("") == 1
        assert lines[lines.index("") + 1] == " interface GigabitEthernet0/3"

    def test_replaced_loose_line_is_one_hunk(self):
        result = compare("hostname R1\nend\n", "hostname R2\nend\n")

        assert len(result.hunks) == 1
        assert result.stats()["removed"] == result.stats()["added"] == 1


class TestContext:

    def test_group_change_shows_enclosing_header(self, router_config):
        right = _replace(router_config, "192.0.2.11", "192.0.2.12")

        assert diff(router_config, right) == [
            " ip access-list extended MGMT",
            "  permit tcp host 192.0.2.10 any eq 22",
            "- permit tcp host 192.0.2.11 any eq 22",
            "+ permit tcp host 192.0.2.12 any eq 22",
        ]

    def test_nested_section_change(self, router_config):
        right = _replace(router_config, "network 10.10.0.0", "network 10.20.0.0")

        assert diff(router_config, right) == [
            " router bgp 65000",
            "  address-family ipv4",
            "-  network 10.10.0.0 mask 255.255.0.0",
            "+  network 10.20.0.0 mask 255.255.0.0",
            "   neighbor 10.0.0.2 activate",
        ]

    def test_unaffiliated_line_has_single_line_context(self, router_config):
        right = _replace(router_config, "hostname R1", "hostname R2")

        assert diff(router_config, right) == ["-hostname R1", "+hostname R2"]

    def test_added_section(self, router_config):
        right = _replace(
            router_config,
            "ip access-list extended MGMT\n",
            "interface GigabitEthernet0/4\n description new\n shutdown\n"
            "ip access-list extended MGMT\n",
        )

        assert diff(router_config, right) == [
            "+interface GigabitEthernet0/4",
            "+ description new",
            "+ shutdown",
        ]

    def test_removed_section(self, router_config):
        right = _replace(router_config, "interface GigabitEthernet0/2\n description access\n shutdown\n!\n", "")

        assert diff(router_config, right) == [
            "-interface GigabitEthernet0/2",
            "- description access",
            "- shutdown",
        ]

    def test_whole_file_added(self):
        assert diff("", "hostname R1\nend\n") == ["+hostname R1", "+end"]

    def test_context_window_of_region(self, router_config):
        doc = normalize(router_config)
        forest = parse_blocks(doc)
        right = normalize(_replace(router_config, "192.0.2.11", "192.0.2.12"))
        regions = change_regions(edit_script(doc.texts(), right.texts()))
        removed = next(r for r in regions if r.side is Side.LEFT)

        window = context_window(removed, forest)

        acl_header = doc.texts().index("ip access-list extended MGMT")
        assert window.indices == frozenset({acl_header, acl_header + 1, acl_header + 2})
        assert len(window.blocks) == 1

    def test_window_union(self):
        left_a = ContextWindow(Side.LEFT, frozenset({0, 1}))
        left_b = ContextWindow(Side.LEFT, frozenset({1, 2}))

        assert left_a.union(left_b).indices == frozenset({0, 1, 2})
        with pytest.raises(ValueError):
            left_a.union(ContextWindow(Side.RIGHT, frozenset({3})))


class TestOptionsAndInput:

    def test_group_words_changes_context(self):
        left = "logging host 10.0.0.1\nlogging host 10.0.0.2\n"
        right = "logging host 10.0.0.1\nlogging host 10.0.0.3\n"

        assert diff(left, right, ParseOptions(group_words=3)) == [
            "-logging host 10.0.0.2",
            "+logging host 10.0.0.3",
        ]
        assert len(diff(left, right)) == 3

    def test_bytes_input(self):
        assert diff(b"hostname R1\n", b"hostname R1\n") == []

    def test_undecodable_bytes(self):
        with pytest.raises(InputError):
            compare(b"\xff\xfe\xfa", b"hostname R1\n")

    def test_summary(self, router_config):
        right = _replace(router_config, "hostname R1", "hostname R2")

        assert summary(compare(router_config, right)) == "1 hunk(s), +1 -1"
