"""
Reading structural metadata out of a value description.

A description is an arbitrary mapping from attribute names to values.
Only a few names mean anything in particular; these helpers pull them out
in a normalized shape. Metadata of the wrong shape reads as absent,
so the rules that depend on it simply do not hold.
"""
import math
from typing import Any, Mapping, Optional, Sequence

DIMENSION = "dimension"
NAMES = "names"
CLASS = "class"
VALUES = "values"
S4_BIT = "S4"

ALIASES = {"dim": DIMENSION}

# Metadata about the value rather than attributes it carries.
NOT_ATTRIBUTES = frozenset([VALUES, S4_BIT])

def normalize(attributes:Optional[Mapping[str, Any]]) -> dict[str, Any]:
	""" The canonical spelling wins if a description uses both. """
	if not isinstance(attributes, Mapping): return {}
	result = {}
	for key, value in attributes.items():
		canon = ALIASES.get(key, key)
		if canon == key or canon not in attributes: result[canon] = value
	return result

def _sequence(x) -> bool:
	return isinstance(x, Sequence) and not isinstance(x, (str, bytes))

def _extent(e) -> bool:
	return isinstance(e, int) and not isinstance(e, bool) and e >= 0

def dimension(attributes:Mapping[str, Any]) -> Optional[tuple[int, ...]]:
	extents = attributes.get(DIMENSION)
	if not _sequence(extents) or not all(map(_extent, extents)): return None
	return tuple(extents)

def class_labels(attributes:Mapping[str, Any]) -> tuple[str, ...]:
	labels = attributes.get(CLASS)
	if isinstance(labels, str): return (labels,)
	if not _sequence(labels): return ()
	return tuple(c for c in labels if isinstance(c, str))

def values(attributes:Mapping[str, Any]) -> Optional[tuple]:
	items = attributes.get(VALUES)
	if not _sequence(items): return None
	return tuple(items)

def has_s4_bit(attributes:Mapping[str, Any]) -> bool:
	return bool(attributes.get(S4_BIT))

def carried(attributes:Mapping[str, Any]) -> set[str]:
	""" Names of the attributes the value actually carries. """
	return set(attributes) - NOT_ATTRIBUTES

# Element-wise numeric properties. None stands for a missing value,
# and anything that is not a number has none of these properties.

def is_missing(x) -> bool:
	return x is None

def _parts(x) -> tuple:
	if isinstance(x, complex): return x.real, x.imag
	if isinstance(x, (int, float)): return (x,)
	return ()

def is_nan(x) -> bool:
	return any(math.isnan(p) for p in _parts(x))

def is_infinite(x) -> bool:
	return any(math.isinf(p) for p in _parts(x))

def is_finite(x) -> bool:
	parts = _parts(x)
	return bool(parts) and all(math.isfinite(p) for p in parts)
