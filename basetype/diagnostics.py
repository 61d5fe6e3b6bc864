import sys, random
from difflib import get_close_matches
from typing import Iterable

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Jeepers', 'Heavens', 'Nuts', 'Rats', 'Woe is me',
	]

	resignations = [
		'I cannot classify that.',
		'That is not in my table.',
		'I have no idea what the right answer is.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects the complaints of a single run, then airs them all at once. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def issue(self, it:"Pic"):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	# Methods the lookups lead to:
	def unknown_type_tag(self, name:str, known:Iterable[str]):
		intro = "There is no fundamental type called %r." % name
		self.issue(Pic(intro, _suggest(name, known) + ["(Try --list to see them all.)"]))

	def unknown_predicate(self, name:str, known:Iterable[str]):
		intro = "There is no predicate called %r." % name
		self.issue(Pic(intro, _suggest(name, known) + ["(Try --predicates to see them all.)"]))

	# Methods the command line calls:
	def bad_flag(self, flag:str, text:str, hint:str):
		intro = "I could not make sense of %s %r." % (flag, text)
		self.issue(Pic(intro, [hint]))

	def nothing_to_classify(self):
		self.issue(Pic("Name a fundamental type to classify.", ["(Or use --list to see them all.)"]))

def _suggest(name:str, known:Iterable[str]) -> list[str]:
	close = get_close_matches(name, list(known), n=3)
	if close: return ["Perhaps you meant: " + ", ".join(close)]
	else: return []

class Pic:
	def __init__(self, intro:str, footer=()):
		self._intro, self._footer = intro, list(footer)
	def as_text(self):
		return '\n'.join([self._intro, *self._footer])

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
