"""
A minimal object system: classes with exactly one parent,
instances made by calling a class, and membership tests that
walk the chain of parents by identity.

The query engine is built on this, which is why it lives apart
from everything else: it must not import anything from the package.
"""
from typing import Any, Optional

class Prototype(type):
	"""
	The class of classes. A prototype has at most one parent,
	and its members are fixed the moment it is made.
	"""
	
	def __new__(mcs, name, bases, namespace):
		if len(bases) > 1:
			raise TypeError("%s: a class has at most one parent, not %d" % (name, len(bases)))
		for base in bases:
			if not isinstance(base, Prototype):
				raise TypeError("%s: parent %r is not a class of this system" % (name, base))
		return super().__new__(mcs, name, bases, namespace)
	
	def __setattr__(cls, key, value):
		raise AttributeError("The members of %s are fixed once made." % cls.__name__)
	
	def __delattr__(cls, key):
		raise AttributeError("The members of %s are fixed once made." % cls.__name__)
	
	def __call__(cls, *args, **kwargs):
		return cls.instantiate(*args, **kwargs)
	
	@property
	def superclass(cls) -> Optional["Prototype"]:
		base = cls.__base__
		return base if isinstance(base, Prototype) else None
	
	def instantiate(cls, *args, **kwargs):
		""" Make a fresh instance and hand it to the initializer, if the class has one. """
		it = cls.__new__(cls)
		init = getattr(cls, "init", None)
		if init is not None:
			init(it, *args, **kwargs)
		return it
	
	def __repr__(cls):
		return "<class %s>" % cls.__name__

class Object(metaclass=Prototype):
	""" Root of every chain. """
	
	def instance_of(self, cls) -> bool:
		assert isinstance(cls, Prototype), cls
		each = type(self)
		while each is not None:
			if each is cls: return True
			each = each.superclass
		return False
	
	@classmethod
	def class_of(cls, value:Any) -> bool:
		""" Is this (whatever it is) one of my instances? Never fails. """
		return isinstance(value, Object) and value.instance_of(cls)

def make_class(parent:Optional[Prototype]=None, name:Optional[str]=None, /, **members) -> Prototype:
	"""
	Make a new class. Without a parent, the class hangs directly off the root.
	Parent and name are positional, so any word at all may name a member.
	Members not given here are found on the parent (and its parents, and so on).
	"""
	if parent is None: parent = Object
	if not isinstance(parent, Prototype):
		raise TypeError("Parent class must be a class, not %r" % (parent,))
	return Prototype(name or "Anonymous", (parent,), members)

def class_of(candidate:Any, value:Any) -> bool:
	""" Like `candidate.class_of(value)`, but False if the candidate is not a class at all. """
	return isinstance(candidate, Prototype) and candidate.class_of(value)
