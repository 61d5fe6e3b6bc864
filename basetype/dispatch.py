"""
The queries that decide what a value dispatches on.

A base object has no class attribute, so method dispatch falls back on an
implicit class made from its dimensions and its fundamental type.
An OO object says what it is in its class attribute.
"""
from typing import Any, Mapping, Optional

from . import primitive, attributes
from .ontology import TypeTag

BASE, S3, S4 = "base", "S3", "S4"

_TYPE_PART = {
	primitive.DOUBLE: ("double", "numeric"),
	primitive.INTEGER: ("integer", "numeric"),
	primitive.CLOSURE: ("function",),
	primitive.SPECIAL: ("function",),
	primitive.BUILTIN: ("function",),
	primitive.SYMBOL: ("name",),
	primitive.CALL: ("call",),
}

def mode_of(tag) -> str:
	return primitive.lookup(tag).mode

def storage_mode_of(tag) -> str:
	return primitive.lookup(tag).storage_mode

def _dimension_part(attrs:Mapping[str, Any]) -> tuple[str, ...]:
	extents = attributes.dimension(attrs)
	if not extents: return ()
	elif len(extents) == 2: return "matrix", "array"
	else: return ("array",)

def _type_part(tag:TypeTag) -> tuple[str, ...]:
	return _TYPE_PART.get(tag, (tag.native,))

def implicit_class(tag, attrs:Optional[Mapping[str, Any]]=None) -> tuple[str, ...]:
	""" The classes a base object dispatches on, most specific first. """
	tag, attrs = primitive.lookup(tag), attributes.normalize(attrs)
	return _dimension_part(attrs) + _type_part(tag)

def class_of(tag, attrs:Optional[Mapping[str, Any]]=None) -> tuple[str, ...]:
	"""
	What the class query reports: the explicit class if there is one.
	Otherwise matrix/array if dimensioned, else a single word for the type,
	which says "numeric" rather than "double".
	"""
	tag, attrs = primitive.lookup(tag), attributes.normalize(attrs)
	explicit = attributes.class_labels(attrs)
	if explicit: return explicit
	dims = _dimension_part(attrs)
	if dims: return dims
	if tag is primitive.DOUBLE: return ("numeric",)
	return _type_part(tag)[:1]

def object_kind(tag, attrs:Optional[Mapping[str, Any]]=None) -> str:
	tag, attrs = primitive.lookup(tag), attributes.normalize(attrs)
	if tag in primitive.S4_TYPES or attributes.has_s4_bit(attrs): return S4
	elif attributes.class_labels(attrs): return S3
	else: return BASE
