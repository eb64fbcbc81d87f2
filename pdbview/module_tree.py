"""Tree of module paths, as found in a PDB file's module list."""

from __future__ import annotations

import hashlib
import ntpath
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

MODULE_PATH_SEPARATOR = "\\"

_SEPARATORS = re.compile(r"[\\/]")


@dataclass(frozen=True)
class ModuleInfo:
    """Information attached to a module leaf."""

    pdb_index: int


def parse_module_path(path: str) -> list[str]:
    """Split a module path into its components.

    Both slashes and backslashes separate components. A drive or UNC prefix is
    kept as the first component, the root is dropped, and "." is only kept when
    it starts a relative path.
    """
    prefix, rest = ntpath.splitdrive(path)
    parts = [prefix] if prefix else []
    has_root = bool(rest) and rest[0] in "\\/"
    for position, token in enumerate(_SEPARATORS.split(rest)):
        if not token:
            continue
        if token == "." and (position != 0 or has_root or prefix):
            continue
        parts.append(token)
    return parts


class ModulePath:
    """Immutable sequence of module path components."""

    __slots__ = ("_parts", "_hash64")

    def __init__(self, parts: Iterable[str] = ()) -> None:
        self._parts: tuple[str, ...] = tuple(parts)
        digest = hashlib.blake2b(digest_size=8)
        for part in self._parts:
            encoded = part.encode("utf-8")
            digest.update(len(encoded).to_bytes(8, "little"))
            digest.update(encoded)
        self._hash64 = int.from_bytes(digest.digest(), "little")

    @classmethod
    def root(cls) -> "ModulePath":
        return cls(())

    @classmethod
    def parse(cls, path: str) -> "ModulePath":
        return cls(parse_module_path(path))

    @property
    def parts(self) -> tuple[str, ...]:
        return self._parts

    def last(self) -> Optional[str]:
        return self._parts[-1] if self._parts else None

    def is_root(self) -> bool:
        return not self._parts

    def _starts_with(self, other: "ModulePath") -> bool:
        return self._parts[: len(other)] == other._parts

    def is_descendant_of(self, other: "ModulePath") -> bool:
        """Whether this is a strict descendant of ``other``."""
        return len(other) < len(self) and self._starts_with(other)

    def is_child_of(self, other: "ModulePath") -> bool:
        """Whether this is a direct child of ``other``."""
        return len(other) + 1 == len(self) and self._starts_with(other)

    def parent(self) -> Optional["ModulePath"]:
        """The parent path, or None for the root."""
        if not self._parts:
            return None
        return ModulePath(self._parts[:-1])

    def join(self, other: "ModulePath") -> "ModulePath":
        return ModulePath(self._parts + other._parts)

    def hash64(self) -> int:
        """Stable 64-bit hash of the path components."""
        return self._hash64

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModulePath):
            return NotImplemented
        return self._hash64 == other._hash64 and self._parts == other._parts

    def __hash__(self) -> int:
        return self._hash64

    def __str__(self) -> str:
        return MODULE_PATH_SEPARATOR.join(self._parts)

    def __repr__(self) -> str:
        return f"ModulePath({list(self._parts)!r})"


@dataclass
class ModuleTreeNode:
    """Node of a module tree; leaves carry module information."""

    path: ModulePath = field(default_factory=ModulePath.root)
    children: dict[str, "ModuleTreeNode"] = field(default_factory=dict)
    module_info: Optional[ModuleInfo] = None

    def add_module_by_path(self, module_path: ModulePath, module_info: ModuleInfo) -> None:
        """Insert a module, creating any missing intermediate nodes."""
        if not module_path.is_descendant_of(self.path):
            raise ValueError("Module doesn't belong to the tree")

        if module_path.is_child_of(self.path):
            last_part = module_path.last()
            if last_part is None:
                raise ValueError("Module path is empty")
            self._add_child(last_part, module_info)
            return

        for child in self.children.values():
            if module_path.is_descendant_of(child.path):
                child.add_module_by_path(module_path, module_info)
                return

        missing = module_path.parts[len(self.path):]
        current = self
        for depth, part in enumerate(missing, start=1):
            is_leaf = depth == len(missing)
            current = current._add_child(part, module_info if is_leaf else None)

    def _add_child(self, name: str, module_info: Optional[ModuleInfo]) -> "ModuleTreeNode":
        child = ModuleTreeNode(path=self.path.join(ModulePath([name])), module_info=module_info)
        self.children[name] = child
        return child