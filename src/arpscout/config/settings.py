from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .paths import default_config_path, expand_path

CONFIG_ENV_VAR = "ARPSCOUT_CONFIG"


class DiscoveryConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    command: list[str] = Field(default_factory=lambda: ["arp", "-a"], min_length=1)
    encoding: str = "utf-8"
    fetch_timeout: float = Field(default=10.0, gt=0)
    skip_if_unchanged: bool = False


class EnrichmentConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    probe_timeout: float = Field(default=1.0, gt=0)
    dns_timeout: float = Field(default=2.0, gt=0)
    parallel_syncs: int = Field(default=50, ge=1, le=255)


class VendorConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    base_url: str = "http://www.macvendorlookup.com/api/v2"
    response_format: str = "pipe"
    timeout: float = Field(default=5.0, gt=0)


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    vendor: VendorConfig = Field(default_factory=VendorConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def _toml_string(value: str) -> str:
    return json.dumps(value)


def _toml_list(values: list[str]) -> str:
    return "[" + ", ".join(_toml_string(value) for value in values) + "]"


def render_settings_toml(settings: Settings) -> str:
    discovery = settings.discovery
    enrichment = settings.enrichment
    vendor = settings.vendor
    lines = [
        "# arpscout configuration",
        "",
        "[discovery]",
        f"command = {_toml_list(discovery.command)}",
        f"encoding = {_toml_string(discovery.encoding)}",
        f"fetch_timeout = {discovery.fetch_timeout}",
        f"skip_if_unchanged = {str(discovery.skip_if_unchanged).lower()}",
        "",
        "[enrichment]",
        f"probe_timeout = {enrichment.probe_timeout}",
        f"dns_timeout = {enrichment.dns_timeout}",
        f"parallel_syncs = {enrichment.parallel_syncs}",
        "",
        "[vendor]",
        f"base_url = {_toml_string(vendor.base_url)}",
        f"response_format = {_toml_string(vendor.response_format)}",
        f"timeout = {vendor.timeout}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
