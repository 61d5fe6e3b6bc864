"""
Build the table of fundamental types.
Also, the sets of them that several predicates and queries share.

Each type goes in under its own name, and then again under the
native spelling the language's own type query would print for it.
"""

from .ontology import TypeTag
from .space import Layer, Absent

class UnknownTypeTag(Absent):
	""" No such fundamental type. This is always the caller's mistake. """

type_table = Layer[TypeTag](UnknownTypeTag)

def _base_type(name:str, native:str, blurb:str, *, mode:str=None, storage_mode:str=None) -> TypeTag:
	tag = type_table.define(TypeTag(name, native, mode, storage_mode, blurb))
	type_table.install_alias(native, tag)
	return tag

NULL = _base_type("null", "NULL", "The empty object.")

# Atomic vectors
LOGICAL = _base_type("logical", "logical", "Vector of TRUE / FALSE / NA.")
INTEGER = _base_type("integer", "integer", "Vector of whole numbers.", mode="numeric")
DOUBLE = _base_type("double", "double", "Vector of floating-point numbers.", mode="numeric")
COMPLEX = _base_type("complex", "complex", "Vector of complex numbers.")
CHARACTER = _base_type("character", "character", "Vector of strings.")
RAW = _base_type("raw", "raw", "Vector of bytes.")

LIST = _base_type("list", "list", "Generic vector; elements of any type.")

# Functions
CLOSURE = _base_type("closure-function", "closure", "Function written in the language itself.", mode="function", storage_mode="function")
SPECIAL = _base_type("special-internal-function", "special", "Primitive that receives its arguments unevaluated.", mode="function", storage_mode="function")
BUILTIN = _base_type("primitive-function", "builtin", "Primitive that receives evaluated arguments.", mode="function", storage_mode="function")

ENVIRONMENT = _base_type("environment", "environment", "Bag of bindings with a parent link.")
S4 = _base_type("S4-instance", "S4", "Instance of a formal class with no other base type.")
OBJECT = _base_type("object", "object", "Later spelling of the S4-instance type for non-vector objects.")

# Language objects
SYMBOL = _base_type("symbol", "symbol", "A name.", mode="name")
CALL = _base_type("call-expression", "language", "An unevaluated function call.", mode="call")
PAIRLIST = _base_type("argument-list", "pairlist", "Linked list; mostly seen as function arguments.")
EXPRESSION = _base_type("expression-sequence", "expression", "List of unevaluated expressions.")

# Internal plumbing; rarely visible from ordinary code.
CHARSXP = _base_type("char-string", "char", "Internal scalar string in the global string pool.")
EXTERNAL_POINTER = _base_type("external-pointer", "externalptr", "Handle on memory owned by foreign code.")
WEAK_REFERENCE = _base_type("weak-reference", "weakref", "Reference that does not keep its key alive.")
BYTECODE = _base_type("bytecode", "bytecode", "Compiled function body.")
PROMISE = _base_type("promise", "promise", "Lazily-evaluated argument.")
DOTS = _base_type("dots-placeholder", "...", "The bundle of arguments behind '...'.")
ANY = _base_type("any-placeholder", "any", "Wildcard used when matching types internally.")

FUNCTION_TYPES = frozenset([CLOSURE, SPECIAL, BUILTIN])
PRIMITIVE_TYPES = frozenset([SPECIAL, BUILTIN])
ATOMIC_TYPES = frozenset([NULL, LOGICAL, INTEGER, DOUBLE, COMPLEX, CHARACTER, RAW])
NUMERIC_TYPES = frozenset([INTEGER, DOUBLE])
NUMBER_LIKE_TYPES = frozenset([LOGICAL, INTEGER, DOUBLE, COMPLEX])
VECTOR_TYPES = frozenset([LOGICAL, INTEGER, DOUBLE, COMPLEX, CHARACTER, RAW, LIST, EXPRESSION])
LANGUAGE_TYPES = frozenset([SYMBOL, CALL, EXPRESSION])
RECURSIVE_TYPES = frozenset([
	LIST, PAIRLIST, CLOSURE, SPECIAL, BUILTIN, ENVIRONMENT, PROMISE, CALL,
	DOTS, ANY, EXPRESSION, EXTERNAL_POINTER, WEAK_REFERENCE, BYTECODE,
])
S4_TYPES = frozenset([S4, OBJECT])

def lookup(name) -> TypeTag:
	""" Accept a tag, its name, or its native spelling. Raise UnknownTypeTag otherwise. """
	if isinstance(name, TypeTag):
		if type_table.symbol(name.name) is not name: raise UnknownTypeTag(name)
		return name
	if not isinstance(name, str):
		raise UnknownTypeTag(name)
	return type_table.fetch(name)

def each_type():
	return type_table.each_symbol()
