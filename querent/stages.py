"""
Records of how each query came to be. A query carries the stage that
made it, and the stage points upstream, so the whole pipeline can be
described without pulling a single item through it.
"""
from typing import NamedTuple, Callable, Sized, Union
from boozetools.support.foundation import Visitor

class SequenceSource(NamedTuple):
	source: Sized

class MappingSource(NamedTuple):
	source: Sized

class ProducerSource(NamedTuple):
	factory: Callable

class Filter(NamedTuple):
	upstream: "STAGE"
	predicate: Callable

class Transform(NamedTuple):
	upstream: "STAGE"
	selector: Callable

STAGE = Union[SequenceSource, MappingSource, ProducerSource, Filter, Transform]

EMPTY = SequenceSource(())

def _name_of(fn:Callable) -> str:
	try: return fn.__name__
	except AttributeError: return type(fn).__name__

class Render(Visitor):
	""" Return a string representation of a pipeline, source first. """
	
	@staticmethod
	def visit_SequenceSource(stage:SequenceSource):
		return "sequence[%d]" % len(stage.source)
	
	@staticmethod
	def visit_MappingSource(stage:MappingSource):
		return "mapping[%d]" % len(stage.source)
	
	@staticmethod
	def visit_ProducerSource(stage:ProducerSource):
		return "producer(%s)" % _name_of(stage.factory)
	
	def visit_Filter(self, stage:Filter):
		return "%s | where(%s)" % (self.visit(stage.upstream), _name_of(stage.predicate))
	
	def visit_Transform(self, stage:Transform):
		return "%s | select(%s)" % (self.visit(stage.upstream), _name_of(stage.selector))

def depth(stage:STAGE) -> int:
	""" How many operators sit atop the source. """
	n = 0
	while isinstance(stage, (Filter, Transform)):
		n += 1
		stage = stage.upstream
	return n
