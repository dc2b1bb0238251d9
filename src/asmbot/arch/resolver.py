"""
Architecture resolver: maps user-facing architecture names onto the
(architecture, mode) pairs each engine needs.

Keystone and Capstone disagree on endianness defaults for ppc64 and on the
flag combination for mips64, so each direction keeps its own table.  Do not
merge them: one direction's wire output would silently change.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import capstone
import keystone

from ..errors import UnsupportedArchitecture


class Direction(str, Enum):
    ASSEMBLE = "assemble"
    DISASSEMBLE = "disassemble"


@dataclass(frozen=True)
class ArchitectureSpec:
    name: str
    family: str
    arch: int
    mode: int

    @property
    def is_x86(self) -> bool:
        return self.family == "x86"


def _build_table(entries: Iterable[Tuple[Tuple[str, ...], str, int, int]]) -> Dict[str, ArchitectureSpec]:
    """Expand (aliases, family, arch, mode) rows into an alias -> spec mapping."""
    table: Dict[str, ArchitectureSpec] = {}
    for names, family, arch, mode in entries:
        spec = ArchitectureSpec(name=names[0], family=family, arch=arch, mode=mode)
        for alias in names:
            table[alias] = spec
    return table


# Keystone (assemble direction)
ASSEMBLE_TABLE = _build_table([
    (("x86",), "x86", keystone.KS_ARCH_X86, keystone.KS_MODE_32),
    (("x86_16",), "x86", keystone.KS_ARCH_X86, keystone.KS_MODE_16),
    (("x86_64", "x64", "x86-64"), "x86", keystone.KS_ARCH_X86, keystone.KS_MODE_64),
    (("arm",), "arm", keystone.KS_ARCH_ARM, keystone.KS_MODE_ARM),
    (("thumb",), "arm", keystone.KS_ARCH_ARM, keystone.KS_MODE_THUMB),
    (("arm64", "aarch64"), "arm64", keystone.KS_ARCH_ARM64, keystone.KS_MODE_LITTLE_ENDIAN),
    (("ppc", "ppc32"), "ppc", keystone.KS_ARCH_PPC, keystone.KS_MODE_PPC32 | keystone.KS_MODE_BIG_ENDIAN),
    (("ppc64",), "ppc", keystone.KS_ARCH_PPC, keystone.KS_MODE_PPC64),
    (("mips", "mips32"), "mips", keystone.KS_ARCH_MIPS, keystone.KS_MODE_MIPS32 | keystone.KS_MODE_BIG_ENDIAN),
    (("mips64",), "mips", keystone.KS_ARCH_MIPS, keystone.KS_MODE_MIPS64),
])

# Capstone (disassemble direction)
DISASSEMBLE_TABLE = _build_table([
    (("x86",), "x86", capstone.CS_ARCH_X86, capstone.CS_MODE_32),
    (("x86_16",), "x86", capstone.CS_ARCH_X86, capstone.CS_MODE_16),
    (("x86_64", "x64", "x86-64"), "x86", capstone.CS_ARCH_X86, capstone.CS_MODE_64),
    (("arm",), "arm", capstone.CS_ARCH_ARM, capstone.CS_MODE_ARM),
    (("thumb",), "arm", capstone.CS_ARCH_ARM, capstone.CS_MODE_THUMB),
    (("arm64", "aarch64"), "arm64", capstone.CS_ARCH_ARM64, capstone.CS_MODE_ARM),
    (("ppc", "ppc32"), "ppc", capstone.CS_ARCH_PPC, capstone.CS_MODE_BIG_ENDIAN),
    (("ppc64",), "ppc", capstone.CS_ARCH_PPC, capstone.CS_MODE_LITTLE_ENDIAN),
    (("mips", "mips32"), "mips", capstone.CS_ARCH_MIPS, capstone.CS_MODE_MIPS32 | capstone.CS_MODE_BIG_ENDIAN),
    (("mips64",), "mips", capstone.CS_ARCH_MIPS, capstone.CS_MODE_MIPS64 | capstone.CS_MODE_LITTLE_ENDIAN),
])

_TABLES = {
    Direction.ASSEMBLE: ASSEMBLE_TABLE,
    Direction.DISASSEMBLE: DISASSEMBLE_TABLE,
}


def resolve(direction: Direction, name: str) -> Optional[ArchitectureSpec]:
    """Return the spec for `name`, or None if this direction does not know it."""
    return _TABLES[direction].get(name)


def require(direction: Direction, name: str) -> ArchitectureSpec:
    spec = resolve(direction, name)
    if spec is None:
        raise UnsupportedArchitecture(name, supported_names(direction))
    return spec


def alias_groups(direction: Direction) -> List[List[str]]:
    """Aliases grouped per spec, in table order: [["x86"], ["x86_64", "x64", "x86-64"], ...]"""
    groups: Dict[str, List[str]] = {}
    for alias, spec in _TABLES[direction].items():
        groups.setdefault(spec.name, []).append(alias)
    return list(groups.values())


def supported_names(direction: Direction) -> str:
    """
    Human-readable list of every name the direction's table accepts.
    Derived from the table so the advertisement cannot drift from it.
    """
    return ", ".join("/".join(group) for group in alias_groups(direction))
