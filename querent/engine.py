"""
The Query: a lazily-evaluated wrapper around a producer factory.

A producer factory is any zero-argument callable which, each time it is
called, returns something iterable. Every terminal operator calls the
factory afresh, so one query may be evaluated any number of times, and
queries branching off a common upstream never disturb each other.

Operators `where` and `select` return new queries and touch nothing.
Nothing is pulled from a source until some terminal operator asks.
"""
from collections.abc import Mapping
from typing import Any, Callable, Iterator, NamedTuple, Optional
from .ontology import Object
from .diagnostics import expect_callable, current
from . import stages

class KeyValuePair(NamedTuple):
	""" One entry of a mapping, on its way through a pipeline. """
	key: Any
	value: Any

_ABSENT = object()

def _as_pair(item) -> Optional[tuple]:
	"""
	Pair-shaped means having a key and a value, either as attributes
	or (for mappings) as entries called "key" and "value".
	A key of None counts as no key at all.
	"""
	if isinstance(item, Mapping):
		key, value = item.get("key"), item.get("value")
	else:
		key = getattr(item, "key", None)
		value = getattr(item, "value", _ABSENT)
		if value is _ABSENT: return None
	if key is None: return None
	return key, value

class Query(Object):
	""" Wraps one producer factory. Immutable: operators make new queries. """
	
	def init(self, factory:Callable, stage:stages.STAGE=None):
		self._factory = expect_callable(factory, "producer")
		self._stage = stage if stage is not None else stages.ProducerSource(factory)
	
	def __repr__(self):
		return "<Query: %s>" % self.describe()
	
	def __iter__(self):
		return self.to_producer()
	
	def describe(self) -> str:
		""" Say what this pipeline does, without doing it. """
		return stages.Render().visit(self._stage)
	
	def _start(self, operation:str) -> Iterator:
		report = current()
		if report.verbose >= 2:
			report.info("%s over %s (%d operators)" % (operation, self.describe(), stages.depth(self._stage)), level=2)
		return iter(self._factory())
	
	# Lazy operators
	
	def where(self, predicate:Callable[[Any], Any]) -> "Query":
		""" Keep only the items which satisfy the predicate, in their original order. """
		expect_callable(predicate, "predicate")
		upstream = self._factory
		def factory():
			return (item for item in upstream() if predicate(item))
		return Query(factory, stages.Filter(self._stage, predicate))
	
	def select(self, selector:Callable[[Any], Any]) -> "Query":
		""" Transform each item, one for one. """
		expect_callable(selector, "selector")
		upstream = self._factory
		def factory():
			return (selector(item) for item in upstream())
		return Query(factory, stages.Transform(self._stage, selector))
	
	# Terminal operators
	
	def to_sequence(self) -> list:
		result = list(self._start("to_sequence"))
		current().info("to_sequence: %d items" % len(result))
		return result
	
	def to_mapping(self) -> dict:
		"""
		Gather the pair-shaped items into a dictionary. Later keys win.
		Anything not pair-shaped, or with a key that cannot be hashed, is quietly left out.
		"""
		result, skipped = {}, 0
		for item in self._start("to_mapping"):
			pair = _as_pair(item)
			if pair is None: skipped += 1
			else:
				try: result[pair[0]] = pair[1]
				except TypeError: skipped += 1  # unhashable key
		current().info("to_mapping: %d keys, %d items skipped" % (len(result), skipped))
		return result
	
	def to_producer(self) -> Iterator:
		""" A fresh one-shot iterator, for pulling items by hand. """
		return self._start("to_producer")
	
	def first(self):
		""" The first item, or None if there isn't one. Pulls no further. """
		return next(self._start("first"), None)
	
	def first_or_none(self):
		return self.first()
	
	def all(self, predicate:Callable[[Any], Any]) -> bool:
		""" True unless some item fails the predicate. Stops at the first one that does. """
		expect_callable(predicate, "predicate")
		for item in self._start("all"):
			if not predicate(item): return False
		return True
	
	def any(self, predicate:Callable[[Any], Any]) -> bool:
		""" True if some item satisfies the predicate. Stops at the first one that does. """
		expect_callable(predicate, "predicate")
		for item in self._start("any"):
			if predicate(item): return True
		return False
