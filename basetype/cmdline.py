"""
This is a lookup tool for the fundamental types of an S-family language's object model.

{0}

For example:

    basetype double --dim 2,3

will tell you that a double with two dimensions is a matrix, an array,
numeric, atomic, and so forth, but no longer a plain vector.

    basetype --list

will list all the fundamental types, and

    basetype -h

will explain all the arguments.
"""
import sys, argparse

from .ontology import ALL_CATEGORIES
from .diagnostics import Report, TooManyIssues
from .primitive import UnknownTypeTag
from .predicates import UnknownPredicate
from . import primitive, predicates, classifier, dispatch, attributes

parser = argparse.ArgumentParser(
	prog="basetype",
	description="Classify a value by its fundamental type and the type predicates it satisfies.",
)
parser.add_argument("tag", nargs="?", help="a fundamental type, by name or native spelling; try 'double' or 'closure'.")
parser.add_argument("--dim", help="dimension extents, comma-separated, as in 2,3")
parser.add_argument("--class", dest="class_", metavar="CLASS", help="class labels, comma-separated, as in ordered,factor")
parser.add_argument("--names", action="store_true", help="the value carries a names attribute.")
parser.add_argument("--values", help="element values, comma-separated; NA, NaN, Inf, -Inf, TRUE and FALSE are understood.")
parser.add_argument("--attr", action="append", default=[], metavar="KEY=VALUE", help="any other attribute; may repeat.")
parser.add_argument("--s4", action="store_true", help="the value has its S4 bit set.")
parser.add_argument("--is", dest="ask", action="append", default=[], metavar="PREDICATE", help="answer just this predicate, as in is-matrix; may repeat.")
parser.add_argument('-l', "--list", action="store_true", help="List the fundamental types and stop.")
parser.add_argument('-p', "--predicates", action="store_true", help="List the predicates and their rules, then stop.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")

class FlagError(ValueError):
	def __init__(self, flag, text, hint):
		super().__init__(flag, text, hint)
		self.flag, self.text, self.hint = flag, text, hint

def _split(text:str) -> list[str]:
	return [part.strip() for part in text.split(",") if part.strip()]

def _scalar(text:str):
	if text == "NA": return None
	if text in ("Inf", "+Inf"): return float("inf")
	if text == "-Inf": return float("-inf")
	if text in ("TRUE", "T"): return True
	if text in ("FALSE", "F"): return False
	for kind in (int, float, complex):
		try: return kind(text)
		except ValueError: pass
	return text

def describe(args) -> dict:
	""" Turn the attribute flags into the mapping the classifier expects. """
	attrs = {}
	if args.dim is not None:
		try: extents = [int(e) for e in _split(args.dim)]
		except ValueError: extents = None
		if not extents or min(extents) < 0:
			raise FlagError("--dim", args.dim, "Give whole numbers separated by commas, as in 2,3.")
		attrs[attributes.DIMENSION] = extents
	if args.class_ is not None:
		attrs[attributes.CLASS] = _split(args.class_)
	if args.names:
		attrs[attributes.NAMES] = True
	if args.values is not None:
		attrs[attributes.VALUES] = [_scalar(v) for v in _split(args.values)]
	if args.s4:
		attrs[attributes.S4_BIT] = True
	for pair in args.attr:
		key, eq, value = pair.partition("=")
		if not (eq and key):
			raise FlagError("--attr", pair, "Give the attribute as KEY=VALUE.")
		attrs[key] = value
	return attrs

def run(args) -> int:
	report = Report(verbose=args.verbose)
	try:
		if args.list:
			list_types()
			return 0
		if args.predicates:
			list_predicates()
			return 0
		if args.tag is None:
			report.nothing_to_classify()
		else:
			try:
				attrs = describe(args)
				report.info("Classifying %s with %r" % (args.tag, attrs))
				if args.ask: answer(args.tag, attrs, args.ask)
				else: show(args.tag, attrs)
				return 0
			except FlagError as fe:
				report.bad_flag(fe.flag, fe.text, fe.hint)
			except UnknownTypeTag as ex:
				report.unknown_type_tag(ex.args[0], _known_type_names())
			except UnknownPredicate as ex:
				report.unknown_predicate(ex.args[0], [p.name for p in predicates.each_predicate()])
	except TooManyIssues:
		pass
	report.complain_to_console()
	return 1

def _known_type_names() -> list[str]:
	names = []
	for tag in primitive.each_type():
		names.extend([tag.name, tag.native])
	return names

def show(tag, attrs):
	result = classifier.classify(tag, attrs)
	tag = result.tag
	print("type:       ", tag.name)
	print("native:     ", tag.native)
	print("mode:       ", tag.mode)
	print("storage:    ", tag.storage_mode)
	print("class:      ", " ".join(dispatch.class_of(tag, attrs)))
	print("implicit:   ", " ".join(dispatch.implicit_class(tag, attrs)))
	print("kind:       ", dispatch.object_kind(tag, attrs))
	print("categories: ", " ".join(c for c in ALL_CATEGORIES if result.in_category(c)) or "(none)")
	by_category = {}
	for p in predicates.each_predicate():
		if result.satisfies(p.name): by_category.setdefault(p.category, []).append(p.name)
	for category in ALL_CATEGORIES:
		if category in by_category:
			print("  %-20s %s" % (category, " ".join(by_category[category])))

def answer(tag, attrs, names):
	verdicts = [(name, classifier.is_(name, tag, attrs)) for name in names]
	for name, verdict in verdicts:
		print(name, "TRUE" if verdict else "FALSE")

def list_types():
	for tag in primitive.each_type():
		print("%-26s %-12s %-12s %s" % (tag.name, tag.native, tag.mode, tag.blurb))

def list_predicates():
	for category in ALL_CATEGORIES:
		print(category)
		for p in predicates.each_predicate():
			if p.category == category:
				print("  %-20s %s" % (p.name, p.rule.describe()))

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
