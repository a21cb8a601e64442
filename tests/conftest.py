"""Wspólne fixtures: przykładowe konfiguracje i odizolowane środowisko CLI."""

from __future__ import annotations

from pathlib import Path

import pytest

ROUTER_CONFIG = """\
! Last configuration change at 10:12:01 UTC
hostname R1
!
interface GigabitEthernet0/1
 description uplink to core
 ip address 10.0.0.1 255.255.255.252
 no shutdown
!
interface GigabitEthernet0/2
 description access
 shutdown
!
interface GigabitEthernet0/3
 description spare
 shutdown
!
ip access-list extended MGMT
 permit tcp host 192.0.2.10 any eq 22
 permit tcp host 192.0.2.11 any eq 22
 deny ip any any log
!
router bgp 65000
 neighbor 10.0.0.2 remote-as 65001
 address-family ipv4
  network 10.10.0.0 mask 255.255.0.0
  neighbor 10.0.0.2 activate
 exit-address-family
!
ntp server 192.0.2.1
ntp server 192.0.2.2
!
end
"""


@pytest.fixture
def router_config() -> str:
    return ROUTER_CONFIG


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Katalog roboczy i ustawienia CFGDIFF_* niezależne od hosta."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CFGDIFF_IGNORE_FILE", str(tmp_path / "ignore"))
    monkeypatch.setenv("CFGDIFF_GROUP_WORDS", "2")
    monkeypatch.setenv("CFGDIFF_BLANK_CLOSES_SECTION", "0")
    monkeypatch.setenv("CFGDIFF_RESOLVE_DNS", "0")
    monkeypatch.setenv("COLUMNS", "120")
    return tmp_path
