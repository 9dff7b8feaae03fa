"""Converter configuration and lookup tables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from iconpath.svg.scaler import MAX_DECIMALS, TARGET_SIZE
from iconpath.svg.viewbox import ViewBoxMode

DEFAULT_COLOUR_CLASSES: Mapping[str, str] = MappingProxyType({"#afcf5a": "text-base-primary"})


@dataclass(frozen=True)
class ConverterConfig:
    """Controls how each file is normalized."""

    viewbox_mode: ViewBoxMode = ViewBoxMode.STRICT
    target_size: float = TARGET_SIZE
    max_decimals: int = MAX_DECIMALS

    # Fidelity checks (svgpathtools bounds comparison)
    verify: bool = False
    fidelity_tolerance: float = 0.05


def _normalize_path(value: str | Path) -> str:
    return Path(value).as_posix().lower()


@dataclass(frozen=True)
class ConversionTables:
    """Read-only lookup tables, built once at startup and handed to the converter.

    colour_classes: lower-case hex colour → CSS class name
    icon_renames:   file stem → icon name, for files whose name is not the icon id
    skip_paths:     files never parsed (matched on full path or bare file name)
    """

    colour_classes: Mapping[str, str] = field(default_factory=lambda: DEFAULT_COLOUR_CLASSES)
    icon_renames: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    skip_paths: frozenset[str] = frozenset()

    @classmethod
    def build(
        cls,
        colour_classes: Mapping[str, str] | None = None,
        icon_renames: Mapping[str, str] | None = None,
        skip_paths: Iterable[str | Path] = (),
    ) -> ConversionTables:
        if colour_classes is None:
            colour_classes = DEFAULT_COLOUR_CLASSES
        return cls(
            colour_classes=MappingProxyType({k.lower(): v for k, v in colour_classes.items()}),
            icon_renames=MappingProxyType(dict(icon_renames or {})),
            skip_paths=frozenset(_normalize_path(p) for p in skip_paths),
        )

    def icon_name(self, file_path: Path) -> str:
        return self.icon_renames.get(file_path.stem, file_path.stem)

    def is_skipped(self, file_path: Path) -> bool:
        return (
            _normalize_path(file_path) in self.skip_paths
            or file_path.name.lower() in self.skip_paths
        )
