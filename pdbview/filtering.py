"""Search and kind filters applied to type, symbol and module lists."""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, TypeVar

_LOG = logging.getLogger(__name__)

_STD_PREFIX = "std::"

Entry = TypeVar("Entry", bound=tuple)


class TypeKind(Enum):
    """Kind of a user-defined type."""

    CLASS = "class"
    UNION = "union"
    ENUM = "enum"


class SymbolKind(Enum):
    """Kind of a symbol."""

    FUNCTION = "function"
    VARIABLE = "variable"
    TYPE = "type"


@dataclass
class TypeFilters:
    """Which kinds of types a search keeps."""

    classes: bool = True
    unions: bool = True
    enums: bool = True


@dataclass
class SymbolFilters:
    """Which kinds of symbols a search keeps."""

    functions: bool = True
    variables: bool = True
    types: bool = True


def filter_by_query(
    entries: Sequence[Entry],
    query: str,
    case_insensitive: bool,
    use_regex: bool,
) -> list[Entry]:
    """Keep the entries whose name (first item) matches the query.

    An empty query keeps everything. An invalid regular expression matches
    nothing.
    """
    if not query:
        return list(entries)
    if use_regex:
        try:
            pattern = re.compile(query, re.IGNORECASE if case_insensitive else 0)
        except re.error:
            return []
        return [entry for entry in entries if pattern.search(entry[0])]
    if case_insensitive:
        needle = query.lower()
        return [entry for entry in entries if needle in entry[0].lower()]
    return [entry for entry in entries if query in entry[0]]


def filter_types_kind(type_list: Iterable[Entry], type_filters: TypeFilters) -> list[Entry]:
    """Drop types whose kind is switched off in the filters."""
    excluded = {
        kind
        for kind, enabled in (
            (TypeKind.CLASS, type_filters.classes),
            (TypeKind.UNION, type_filters.unions),
            (TypeKind.ENUM, type_filters.enums),
        )
        if not enabled
    }
    return [entry for entry in type_list if entry[2] not in excluded]


def filter_symbols_kind(
    symbol_list: Iterable[Entry], symbol_filters: SymbolFilters
) -> list[Entry]:
    """Drop symbols whose kind is switched off in the filters."""
    excluded = {
        kind
        for kind, enabled in (
            (SymbolKind.FUNCTION, symbol_filters.functions),
            (SymbolKind.VARIABLE, symbol_filters.variables),
            (SymbolKind.TYPE, symbol_filters.types),
        )
        if not enabled
    }
    return [entry for entry in symbol_list if entry[2] not in excluded]


def filter_std(entries: Iterable[Entry]) -> list[Entry]:
    """Drop entries that live in the ``std`` namespace."""
    return [entry for entry in entries if not entry[0].startswith(_STD_PREFIX)]


def filter_type_list(
    type_list: Sequence[tuple],
    query: str,
    case_insensitive: bool,
    use_regex: bool,
    ignore_std_types: bool,
    sort_by_index: bool,
    filters: TypeFilters,
) -> list[tuple[str, int]]:
    """Filter ``(name, index, kind)`` types into ``(name, index)`` pairs."""
    start = time.perf_counter()
    result = filter_by_query(type_list, query, case_insensitive, use_regex)
    result = filter_types_kind(result, filters)
    if ignore_std_types:
        result = filter_std(result)
    if sort_by_index:
        result.sort(key=lambda entry: entry[1])
    _LOG.debug("Type filtering took %d ms", (time.perf_counter() - start) * 1000)
    return [(entry[0], entry[1]) for entry in result]


def filter_symbol_list(
    symbol_list: Sequence[tuple],
    query: str,
    case_insensitive: bool,
    use_regex: bool,
    ignore_std_symbols: bool,
    filters: SymbolFilters,
) -> list[tuple[str, int]]:
    """Filter ``(name, index, kind)`` symbols into ``(name, index)`` pairs."""
    start = time.perf_counter()
    result = filter_by_query(symbol_list, query, case_insensitive, use_regex)
    result = filter_symbols_kind(result, filters)
    if ignore_std_symbols:
        result = filter_std(result)
    _LOG.debug("Symbol filtering took %d ms", (time.perf_counter() - start) * 1000)
    return [(entry[0], entry[1]) for entry in result]


def filter_module_list(
    module_list: Sequence[tuple[str, int]],
    query: str,
    case_insensitive: bool,
    use_regex: bool,
) -> list[tuple[str, int]]:
    """Filter ``(path, index)`` modules by their path."""
    start = time.perf_counter()
    result = filter_by_query(module_list, query, case_insensitive, use_regex)
    _LOG.debug("Module filtering took %d ms", (time.perf_counter() - start) * 1000)
    return result


def merge_lists(lists: Iterable[Iterable[tuple[str, int]]]) -> list[tuple[str, int]]:
    """Merge lists by name, sorted and without duplicates.

    Indices differ between PDB files, so every index collapses to 0.
    """
    return sorted({(entry[0], 0) for entries in lists for entry in entries})