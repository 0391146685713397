"""
Complaints and chatter.

Malformed arguments get refused at the door, loudly and at once.
Anything else worth saying goes through a Report, which keeps quiet
unless somebody asked it to be verbose.
"""
import sys
from typing import Any, Callable

class MalformedArgument(TypeError):
	""" Somebody passed the wrong shape of thing to an adapter or operator. """
	pass

def expect(condition:bool, what:str):
	if not condition:
		raise MalformedArgument("expected " + what)

def expect_callable(it:Any, role:str) -> Callable:
	expect(callable(it), role + " function")
	return it

class Report:
	"""
	Where the run-time tells what it did.
	verbose=1 gets you item counts from the terminal operators;
	verbose=2 also describes each pipeline as it is evaluated.
	"""
	def __init__(self, *, verbose:int=0, stream=None):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._stream = stream
	
	@property
	def verbose(self) -> int: return self._verbose
	
	def info(self, *args, level:int=1):
		if self._verbose >= level:
			print(*args, file=self._stream or sys.stderr)

_current = Report()

def configure(*, verbose:int=0, stream=None) -> Report:
	""" Replace the process-wide report. Returns the new one. """
	global _current
	_current = Report(verbose=verbose, stream=stream)
	return _current

def current() -> Report:
	return _current
