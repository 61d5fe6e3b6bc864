"""
The name-space behind the static tables.

A Layer is a lightly enhanced dictionary. It does not like duplicate keys,
and it distinguishes a thing's own name from the aliases it answers to.
"""

from typing import Generic, Iterable, Optional, Protocol, TypeVar

class AlreadyExists(KeyError): pass
class Absent(KeyError): pass

class Keyed(Protocol):
	def key(self) -> str: ...

T = TypeVar('T', bound=Keyed)

class Layer(Generic[T]):
	_symbol: dict[str, T]
	_own: list[T]

	def __init__(self, absent:type[Absent]=Absent):
		self._symbol, self._own = {}, []
		self._absent = absent

	def __contains__(self, key: str) -> bool:
		return key in self._symbol

	def __len__(self): return len(self._own)

	def symbol(self, key: str) -> Optional[T]:
		return self._symbol.get(key)

	def fetch(self, key: str) -> T:
		try: return self._symbol[key]
		except KeyError: raise self._absent(key) from None

	def define(self, symbol: T) -> T:
		self.install_alias(symbol.key(), symbol)
		self._own.append(symbol)
		return symbol

	def install_alias(self, alias: str, symbol: T) -> T:
		if alias in self._symbol:
			if self._symbol[alias] is symbol: return symbol
			raise AlreadyExists(alias)
		self._symbol[alias] = symbol
		return symbol

	def each_symbol(self) -> Iterable[T]:
		""" Each thing defined, once apiece, in order of definition. Aliases do not repeat. """
		return iter(self._own)
