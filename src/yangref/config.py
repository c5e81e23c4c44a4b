"""Generator settings for the synthetic root that wraps top-level entries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from yangref.resolver import resolve_root_name

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_GENERATE_FAKE_ROOT = "YANGREF_GENERATE_FAKE_ROOT"
ENV_FAKE_ROOT_NAME = "YANGREF_FAKE_ROOT_NAME"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class RootConfig:
    """Whether to generate a root entry, and what to call it."""

    generate_fake_root: bool = False
    fake_root_name: str = ""
    default_root_name: str = "device"

    @property
    def root_name(self) -> str:
        """Name of the generated root, empty when none is generated."""
        return resolve_root_name(
            self.fake_root_name,
            self.default_root_name,
            self.generate_fake_root,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RootConfig:
        """Build a config from a mapping, falling back to defaults per key.

        Absent keys and None values take the default; an explicit empty
        name is kept. The generate flag accepts booleans and the same
        truthy strings as from_env.
        """
        generate = data.get("generate_fake_root")
        fake_name = data.get("fake_root_name")
        default_name = data.get("default_root_name")
        return cls(
            generate_fake_root=(
                cls.generate_fake_root if generate is None else _parse_flag(generate)
            ),
            fake_root_name=cls.fake_root_name if fake_name is None else str(fake_name),
            default_root_name=(
                cls.default_root_name if default_name is None else str(default_name)
            ),
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RootConfig:
        """Build a config from ``YANGREF_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            generate_fake_root=_parse_flag(env.get(ENV_GENERATE_FAKE_ROOT, "")),
            fake_root_name=env.get(ENV_FAKE_ROOT_NAME, ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to a dictionary."""
        return {
            "generate_fake_root": self.generate_fake_root,
            "fake_root_name": self.fake_root_name,
            "default_root_name": self.default_root_name,
        }


def _parse_flag(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)
