from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from staticdocs import config


@dataclass(frozen=True)
class Content:
    root: str
    default_lang: str
    languages: frozenset[str]


@dataclass(frozen=True)
class Transport:
    kind: str
    base_dir: Path
    base_url: str
    timeout: float


@dataclass(frozen=True)
class Navigation:
    not_found_route: str


@dataclass(frozen=True)
class Settings:
    content: Content
    transport: Transport
    navigation: Navigation
    log_level: str = "WARNING"


_TRANSPORTS = {"filesystem", "http"}


def _expand(p: str, relative_to: Path | None = None) -> Path:
    expanded = Path(os.path.expandvars(os.path.expanduser(p)))
    if relative_to is not None and not expanded.is_absolute():
        expanded = relative_to / expanded
    return expanded.resolve()


def _languages(value: str | list[str]) -> frozenset[str]:
    if isinstance(value, str):
        value = value.split(",")
    return frozenset(v.strip().lower() for v in value if v and v.strip())


def _timeout(value: object) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid transport timeout: {value!r}") from e


def _check_transport(kind: str) -> str:
    if kind not in _TRANSPORTS:
        raise ValueError(f"Unknown transport {kind!r}, expected one of {sorted(_TRANSPORTS)}")
    return kind


def default_settings() -> Settings:
    """
    Settings from the environment (and .env) alone.
    """
    return Settings(
        content=Content(
            root=config.CONTENT_ROOT,
            default_lang=config.DEFAULT_LANG,
            languages=_languages(config.LANGUAGES),
        ),
        transport=Transport(
            kind=_check_transport(config.TRANSPORT),
            base_dir=_expand(config.BASE_DIR),
            base_url=config.BASE_URL,
            timeout=_timeout(config.TIMEOUT),
        ),
        navigation=Navigation(not_found_route=config.NOT_FOUND_ROUTE),
        log_level=config.LOG_LEVEL.upper(),
    )


def load_settings(path: str | Path = "settings.toml") -> Settings:
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")

    with path.open("rb") as f:
        raw = tomllib.load(f)

    try:
        return Settings(
            content=Content(
                root=raw["content"]["root"],
                default_lang=raw["content"]["default_lang"],
                languages=_languages(raw["content"].get("languages", [])),
            ),
            transport=Transport(
                kind=_check_transport(raw["transport"]["kind"]),
                # relative base_dir is taken relative to the settings file
                base_dir=_expand(raw["transport"].get("base_dir", "."), relative_to=path.parent),
                base_url=raw["transport"].get("base_url", config.BASE_URL),
                timeout=_timeout(raw["transport"].get("timeout", config.TIMEOUT)),
            ),
            navigation=Navigation(
                not_found_route=raw.get("navigation", {}).get("not_found_route", config.NOT_FOUND_ROUTE),
            ),
            log_level=str(raw.get("log_level", config.LOG_LEVEL)).upper(),
        )
    except KeyError as e:
        raise KeyError(f"Missing config key: {e}") from e
