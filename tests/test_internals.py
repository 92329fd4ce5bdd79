"""Tests for models, configuration and helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from arpscout.config import (
    DiscoveryConfig,
    EnrichmentConfig,
    Settings,
    get_settings,
    load_settings,
    write_settings,
)
from arpscout.models import DeviceRecord, Snapshot, SyncState
from arpscout.utils.redaction import Redactor


def test_config_roundtrip(tmp_path):
    path = tmp_path / "config.toml"
    settings = Settings(
        discovery=DiscoveryConfig(command=["ip", "neigh"], skip_if_unchanged=True),
        enrichment=EnrichmentConfig(probe_timeout=0.5, parallel_syncs=8),
    )
    write_settings(settings, path)

    loaded = load_settings(path)
    assert loaded == settings


def test_get_settings_reads_env_path(tmp_path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "config.toml"
    path.write_text('[vendor]\nbase_url = "https://oui.example"\n')
    monkeypatch.setenv("ARPSCOUT_CONFIG", str(path))

    assert get_settings().vendor.base_url == "https://oui.example"


def test_get_settings_missing_env_file(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ARPSCOUT_CONFIG", str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError):
        get_settings()


def test_invalid_config_names_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[enrichment]\nparallel_syncs = 0\n")

    with pytest.raises(ValueError, match="config.toml"):
        load_settings(path)


def test_record_identity_ignores_enrichment_fields():
    a = DeviceRecord(ip_address="10.0.0.1", mac_address="00-11-22-33-44-55")
    b = DeviceRecord(ip_address="10.0.0.1", mac_address="00-11-22-33-44-55")
    b.apply_enrichment("b.lan", "Acme", True)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != DeviceRecord(ip_address="10.0.0.1", mac_address="00-11-22-33-44-66")


def test_record_identity_is_read_only():
    record = DeviceRecord(ip_address="10.0.0.1", mac_address="00-11-22-33-44-55")

    with pytest.raises(ValidationError):
        record.ip_address = "10.0.0.2"


def test_describe_matches_table_layout():
    record = DeviceRecord(ip_address="10.0.0.1", mac_address="00-11-22-33-44-55")

    assert record.describe(3) == (
        "ARP-Table Index: 3\nIP-Address\t10.0.0.1\nMAC-Address\t00-11-22-33-44-55"
    )


def test_snapshot_pairs_and_sync_state():
    records = (
        DeviceRecord(ip_address="10.0.0.1", mac_address="00-11-22-33-44-55"),
        DeviceRecord(ip_address="10.0.0.2", mac_address="00-11-22-33-44-66"),
    )
    snapshot = Snapshot(generation=1, records=records)

    assert snapshot.pairs() == (
        ("10.0.0.1", "00-11-22-33-44-55"),
        ("10.0.0.2", "00-11-22-33-44-66"),
    )
    assert not snapshot.all_synced()
    for record in records:
        record.apply_enrichment("n.lan", "v", False)
    assert snapshot.all_synced()
    assert records[0].sync_state is SyncState.SYNCED


def test_redactor_masks_both_mac_styles():
    redactor = Redactor()

    assert redactor.redact_ip("192.168.1.20") == "x.x.x.20"
    assert redactor.redact_mac("AA-BB-CC-DD-EE-FF") == "AA-BB-CC-xx-xx-01"
    assert redactor.redact_mac("aa:bb:cc:00:00:02") == "aa:bb:cc:xx:xx:02"
    assert redactor.redact_mac("aa-bb-cc-dd-ee-ff") == "aa-bb-cc-xx-xx-01"
    assert redactor.redact_host("nas.home.lan") == "nas.x"


def test_redactor_disabled_passes_through():
    redactor = Redactor(enabled=False)

    assert redactor.redact_ip("192.168.1.20") == "192.168.1.20"
    assert redactor.redact_mac("AA-BB-CC-DD-EE-FF") == "AA-BB-CC-DD-EE-FF"
    assert redactor.redact_host(None) == ""


def test_redactor_copies_record_for_display():
    record = DeviceRecord(ip_address="192.168.1.1", mac_address="11-22-33-44-55-66")
    record.apply_enrichment("gateway.lan", "Netgear", True)

    shown = Redactor().redact_record(record)

    assert shown.ip_address == "x.x.x.1"
    assert shown.mac_address == "11-22-33-xx-xx-01"
    assert shown.host_name == "gateway.x"
    assert shown.vendor == "Netgear"
    assert shown.sync_state is SyncState.SYNCED
    assert record.ip_address == "192.168.1.1"
    assert record.host_name == "gateway.lan"
    assert Redactor(enabled=False).redact_record(record) is record
