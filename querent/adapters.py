"""
Ways to turn raw data into a Query.

Each adapter captures its source and returns a query whose factory
starts a fresh traversal every time it is called, so the source itself
is never consumed or disturbed by evaluation.
"""
from collections.abc import Callable, Collection, Mapping, Sequence
from typing import Any
from boozetools.support.foundation import Visitor
from .diagnostics import expect, expect_callable
from .engine import Query, KeyValuePair
from . import stages

def from_sequence(seq:Sequence) -> Query:
	""" Items come out in index order. """
	expect(isinstance(seq, Sequence), "sequence")
	return Query(lambda: iter(seq), stages.SequenceSource(seq))

def from_mapping(mapping:Mapping) -> Query:
	""" One KeyValuePair per entry. Do not count on any particular order. """
	expect(isinstance(mapping, Mapping), "mapping")
	def factory():
		return (KeyValuePair(key, value) for key, value in mapping.items())
	return Query(factory, stages.MappingSource(mapping))

def from_producer(fn:Callable[[], Any]) -> Query:
	""" Any zero-argument callable that returns something iterable will do. """
	return Query(expect_callable(fn, "producer"))

def from_none() -> Query:
	return Query(lambda: iter(()), stages.EMPTY)

class SourceSniffer(Visitor):
	"""
	Decide which adapter suits a value that is not already a query.
	Text is treated as a single value rather than a sequence of characters,
	and so (having nothing to offer item-wise) yields the empty query.
	"""
	
	@staticmethod
	def visit_str(source):
		return from_none()
	
	visit_bytes = visit_bytearray = visit_str
	
	@staticmethod
	def visit_object(source):
		if isinstance(source, Sequence): return from_sequence(source)
		if isinstance(source, Mapping): return from_mapping(source)
		if isinstance(source, Collection):
			return Query(lambda: iter(source), stages.SequenceSource(source))
		if callable(source): return from_producer(source)
		return from_none()

_sniffer = SourceSniffer()

def auto_from(source:Any) -> Query:
	"""
	Pick an adapter by looking at what the source is:
	already a query, a sequence, a mapping, some other collection,
	a producer factory, or none of the above (which makes an empty query).
	"""
	if Query.class_of(source): return source
	return _sniffer.visit(source)
