"""
The classifier proper: look up the type, then judge every predicate.

Rules are judged independently of one another, so the order of the
predicate table has no bearing on the answer.
"""
from typing import Any, Mapping, Optional
from boozetools.support.foundation import Visitor

from .ontology import ClassificationResult, TypeTag, Predicate
from . import primitive, predicates, attributes

def classify(tag, attrs:Optional[Mapping[str, Any]]=None) -> ClassificationResult:
	"""
	Report the fundamental type of a described value, and which predicates
	and categories hold for it. Raises UnknownTypeTag for a type that is not
	in the table; anything else, however odd, gets an answer.
	"""
	tag = primitive.lookup(tag)
	attrs = attributes.normalize(attrs)
	judge = RuleEvaluator(tag, attrs)
	hits = [p for p in predicates.each_predicate() if judge.holds(p)]
	return ClassificationResult(
		tag=tag,
		categories=frozenset(p.category for p in hits),
		predicates=frozenset(p.name for p in hits),
	)

def is_(predicate_name:str, tag, attrs:Optional[Mapping[str, Any]]=None) -> bool:
	""" Judge just the one predicate. """
	predicate = predicates.lookup(predicate_name)
	judge = RuleEvaluator(primitive.lookup(tag), attributes.normalize(attrs))
	return judge.holds(predicate)

class RuleEvaluator(Visitor):
	""" Decides each kind of rule against one particular value description. """
	def __init__(self, tag:TypeTag, attrs:Mapping[str, Any]):
		self.tag, self.attrs = tag, attrs

	def holds(self, predicate:Predicate) -> bool:
		return bool(self.visit(predicate.rule))

	def visit_TypeIs(self, rule:predicates.TypeIs):
		return self.tag is rule.tag

	def visit_TypeIn(self, rule:predicates.TypeIn):
		return self.tag in rule.tags

	def visit_FormalObject(self, rule:predicates.FormalObject):
		return self.tag in primitive.S4_TYPES or attributes.has_s4_bit(self.attrs)

	def visit_PlainVector(self, rule:predicates.PlainVector):
		if self.tag not in primitive.VECTOR_TYPES: return False
		return attributes.carried(self.attrs) <= {attributes.NAMES}

	def visit_Dimensioned(self, rule:predicates.Dimensioned):
		extents = attributes.dimension(self.attrs)
		if extents is None: return False
		if len(extents) < rule.at_least: return False
		return rule.at_most is None or len(extents) <= rule.at_most

	def visit_HasClass(self, rule:predicates.HasClass):
		return bool(attributes.class_labels(self.attrs))

	def visit_ClassContains(self, rule:predicates.ClassContains):
		return rule.label in attributes.class_labels(self.attrs)

	def visit_Numeric(self, rule:predicates.Numeric):
		if self.tag not in primitive.NUMERIC_TYPES: return False
		return "factor" not in attributes.class_labels(self.attrs)

	def visit_EachValue(self, rule:predicates.EachValue):
		if self.tag not in rule.tags: return False
		items = attributes.values(self.attrs)
		if not items: return False
		quantify = all if rule.quantifier == "all" else any
		return quantify(rule.test(x) for x in items)

	def visit_Unsorted(self, rule:predicates.Unsorted):
		items = attributes.values(self.attrs)
		if items is None or any(map(attributes.is_missing, items)): return False
		try: return any(a > b for a, b in zip(items, items[1:]))
		except TypeError: return False  # Incomparable values have no order to break.

	def visit_Constant(self, rule:predicates.Constant):
		return rule.answer
