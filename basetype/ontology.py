"""
These most-fundamental classes are separate from the rest
to avoid various circular-import scenarios. The type table,
the predicate table, and the classifier all refer to them,
but they refer to nothing else.
"""
from typing import NamedTuple, Optional

class TypeTag:
	"""
	One fundamental type. The set of these is closed:
	the table in `primitive` builds every one of them at import,
	and nothing adds more afterward.
	"""
	def __init__(self, name:str, native:str, mode:Optional[str], storage_mode:Optional[str], blurb:str):
		assert isinstance(name, str) and name
		self.name, self.native, self.blurb = name, native, blurb
		self.mode = mode or native
		self.storage_mode = storage_mode or native
	def __repr__(self): return "<TypeTag %s>" % self.name
	def __str__(self): return self.name
	def key(self): return self.name

class PredicateCategory:
	""" The six families of type predicate. Just labels; nothing more. """
	EXACT = "exact-type-match"
	TYPE_SET = "type-set-membership"
	ATTRIBUTE = "attribute-based"
	CLASS = "class-based"
	NUMERIC = "numeric-property"
	SPECIAL = "special-purpose"

ALL_CATEGORIES = (
	PredicateCategory.EXACT,
	PredicateCategory.TYPE_SET,
	PredicateCategory.ATTRIBUTE,
	PredicateCategory.CLASS,
	PredicateCategory.NUMERIC,
	PredicateCategory.SPECIAL,
)

class Rule:
	""" Root for the rule objects; a RuleEvaluator knows how to judge each. """
	def describe(self) -> str: raise NotImplementedError(type(self))

class Predicate(NamedTuple):
	name: str
	category: str
	rule: Rule
	def key(self): return self.name

class ClassificationResult(NamedTuple):
	tag: TypeTag
	categories: frozenset[str]
	predicates: frozenset[str]

	def satisfies(self, predicate_name:str) -> bool:
		return predicate_name in self.predicates

	def in_category(self, category:str) -> bool:
		return category in self.categories
