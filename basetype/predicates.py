"""
The predicate table.

Every predicate is a name, a category, and a rule. Rules are plain data;
the classifier's RuleEvaluator decides what each kind of rule means.
Keeping them as data means `--predicates` can print the table
straight from the same objects the classifier judges.
"""

from typing import Iterable
from .ontology import Rule, Predicate, PredicateCategory as PC, TypeTag
from .space import Layer, Absent
from . import primitive as p, attributes

class UnknownPredicate(Absent):
	""" No such predicate. """

class TypeIs(Rule):
	""" The tag is exactly this one. """
	def __init__(self, tag:TypeTag): self.tag = tag
	def describe(self): return "type is %s" % self.tag

class TypeIn(Rule):
	""" The tag is any of these. """
	def __init__(self, tags:Iterable[TypeTag]): self.tags = frozenset(tags)
	def describe(self): return "type in {%s}" % ", ".join(sorted(t.name for t in self.tags))

class FormalObject(Rule):
	""" An S4 type, or any value with the S4 bit set. """
	def describe(self): return "type in {%s} or the S4 bit is set" % ", ".join(sorted(t.name for t in p.S4_TYPES))

class PlainVector(Rule):
	""" A vector type carrying no attributes other than names. """
	def describe(self): return "vector type with no attributes besides names"

class Dimensioned(Rule):
	def __init__(self, at_least:int, at_most:int=None):
		self.at_least, self.at_most = at_least, at_most
	def describe(self):
		if self.at_least == self.at_most: return "dimension has exactly %d extents" % self.at_least
		else: return "dimension has at least %d extent(s)" % self.at_least

class HasClass(Rule):
	def describe(self): return "has a class attribute"

class ClassContains(Rule):
	def __init__(self, label:str): self.label = label
	def describe(self): return "class contains %r" % self.label

class Numeric(Rule):
	""" Integer or double, but a factor does not count even though it is stored as integers. """
	def describe(self): return "type is integer or double, and not a factor"

class EachValue(Rule):
	"""
	Element-wise properties: does every (or some) element satisfy a test?
	Only meaningful for the listed tags; for anything else the answer is no.
	"""
	def __init__(self, quantifier:str, test, tags:Iterable[TypeTag], wording:str):
		assert quantifier in ("all", "any")
		self.quantifier, self.test, self.tags, self.wording = quantifier, test, frozenset(tags), wording
	def describe(self): return "%s value(s) %s" % (self.quantifier, self.wording)

class Unsorted(Rule):
	def describe(self): return "values are not in non-decreasing order"

class Constant(Rule):
	""" Historical compatibility checks: no behavior beyond a fixed answer. """
	def __init__(self, answer:bool): self.answer = answer
	def describe(self): return "always %s" % ("true" if self.answer else "false")

predicate_table = Layer[Predicate](UnknownPredicate)

def _predicate(name:str, category:str, rule:Rule) -> Predicate:
	return predicate_table.define(Predicate(name, category, rule))

# Exact type matches
for _tag, _name in [
	(p.NULL, "is-null"),
	(p.LOGICAL, "is-logical"),
	(p.INTEGER, "is-integer"),
	(p.DOUBLE, "is-double"),
	(p.COMPLEX, "is-complex"),
	(p.CHARACTER, "is-character"),
	(p.RAW, "is-raw"),
	(p.SYMBOL, "is-symbol"),
	(p.ENVIRONMENT, "is-environment"),
	(p.EXPRESSION, "is-expression"),
	(p.CALL, "is-call"),
]:
	_predicate(_name, PC.EXACT, TypeIs(_tag))
_predicate("is-s4", PC.EXACT, FormalObject())

# Membership in a set of types
_predicate("is-atomic", PC.TYPE_SET, TypeIn(p.ATOMIC_TYPES))
_predicate("is-function", PC.TYPE_SET, TypeIn(p.FUNCTION_TYPES))
_predicate("is-primitive", PC.TYPE_SET, TypeIn(p.PRIMITIVE_TYPES))
_predicate("is-list", PC.TYPE_SET, TypeIn([p.LIST, p.PAIRLIST]))
_predicate("is-pairlist", PC.TYPE_SET, TypeIn([p.PAIRLIST, p.NULL]))
_predicate("is-language", PC.TYPE_SET, TypeIn(p.LANGUAGE_TYPES))
_predicate("is-recursive", PC.TYPE_SET, TypeIn(p.RECURSIVE_TYPES))

# Structure carried in attributes
_predicate("is-vector", PC.ATTRIBUTE, PlainVector())
_predicate("is-matrix", PC.ATTRIBUTE, Dimensioned(2, 2))
_predicate("is-array", PC.ATTRIBUTE, Dimensioned(1))
_predicate("is-object", PC.ATTRIBUTE, HasClass())

# Class labels
for _label, _name in [
	("factor", "is-factor"),
	("ordered", "is-ordered"),
	("data.frame", "is-data-frame"),
	("table", "is-table"),
	("numeric_version", "is-numeric-version"),
]:
	_predicate(_name, PC.CLASS, ClassContains(_label))

# Numeric properties
_predicate("is-numeric", PC.NUMERIC, Numeric())
_predicate("is-finite", PC.NUMERIC, EachValue("all", attributes.is_finite, p.NUMBER_LIKE_TYPES, "are finite"))
_predicate("is-infinite", PC.NUMERIC, EachValue("any", attributes.is_infinite, p.NUMBER_LIKE_TYPES, "are infinite"))
_predicate("is-nan", PC.NUMERIC, EachValue("any", attributes.is_nan, [p.DOUBLE, p.COMPLEX], "are NaN"))

# Everything else
_predicate("is-unsorted", PC.SPECIAL, Unsorted())
_predicate("is-r", PC.SPECIAL, Constant(True))
_predicate("is-single", PC.SPECIAL, Constant(False))

def lookup(name) -> Predicate:
	if not isinstance(name, str): raise UnknownPredicate(name)
	return predicate_table.fetch(name)

def each_predicate() -> Iterable[Predicate]:
	return predicate_table.each_symbol()
