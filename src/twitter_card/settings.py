from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from twitter_card.domain.errors import ConfigError
from twitter_card.domain.schema import META_SITEURL

SITEURL_ENV = "TWITTER_CARD_SITEURL"


@dataclass(frozen=True)
class Paths:
    source_dir: Path
    output_dir: Path


@dataclass(frozen=True)
class Build:
    extensions: tuple[str, ...] = (".html",)
    skip_hidden: bool = True


@dataclass(frozen=True)
class Settings:
    paths: Paths
    build: Build
    # Engine options: siteurl, card and default property values
    twitter: Mapping[str, Any] = field(default_factory=dict)


def load_settings(path: str | Path = "settings.toml") -> Settings:
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")

    load_dotenv(path.parent / ".env")

    with path.open("rb") as f:
        raw = tomllib.load(f)

    def expand(p: str) -> Path:
        return Path(os.path.expandvars(os.path.expanduser(p))).resolve()

    try:
        paths = Paths(
            source_dir=expand(raw["paths"]["source_dir"]),
            output_dir=expand(raw["paths"]["output_dir"]),
        )
        twitter = dict(raw["twitter"])
    except KeyError as e:
        raise ConfigError(f"Missing config key: {e}") from e

    build_raw = raw.get("build", {})
    build = Build(
        extensions=tuple(build_raw.get("extensions", Build.extensions)),
        skip_hidden=bool(build_raw.get("skip_hidden", Build.skip_hidden)),
    )

    siteurl = os.getenv(SITEURL_ENV)
    if siteurl:
        twitter[META_SITEURL] = siteurl

    return Settings(paths=paths, build=build, twitter=twitter)
