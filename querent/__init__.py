"""
Querent: lazy, chainable queries over sequences, mappings, and producers.

	from querent import query
	query([1, 2, 3, 4]).where(lambda n: n % 2).select(str).to_sequence()

gives ['1', '3']. Nothing is evaluated until a terminal operator
(to_sequence, to_mapping, to_producer, first, first_or_none, all, any)
asks for it, and every terminal operator starts over from the source.
"""
from .ontology import Object, Prototype, make_class, class_of
from .engine import Query, KeyValuePair
from .adapters import from_sequence, from_mapping, from_producer, from_none, auto_from
from .diagnostics import MalformedArgument, Report, configure

query = auto_from

__all__ = [
	"query", "auto_from",
	"from_sequence", "from_mapping", "from_producer", "from_none",
	"Query", "KeyValuePair",
	"Object", "Prototype", "make_class", "class_of",
	"MalformedArgument", "Report", "configure",
]
