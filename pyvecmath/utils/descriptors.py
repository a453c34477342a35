"""
Descriptors used by the vector types.

The vector API exposes pairs of operations under a single name: a pure form
reached through the class (``Vector3.add(a, b)``) and a mutating or derived
form reached through an instance (``v.add(rhs)``). Attribute lookup tells
the two apart, so one descriptor per name is enough.
"""
import functools


class classproperty:
    """A read-only property evaluated against the class on every access."""

    def __init__(self, fget):
        self.fget = fget
        functools.update_wrapper(self, fget)

    def __get__(self, obj, objtype=None):
        if objtype is None:
            objtype = type(obj)
        return self.fget(objtype)


class dualmethod:
    """
    A method whose class-level and instance-level forms differ.

    The decorated function is the class-level form and receives the class as
    its first argument, like a classmethod. Register the instance-level form
    with ``@name.instance``.
    """

    def __init__(self, class_func, instance_func=None):
        self.class_func = class_func
        self.instance_func = instance_func
        functools.update_wrapper(self, class_func)

    def instance(self, instance_func):
        return type(self)(self.class_func, instance_func)

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self.class_func.__get__(objtype, type(objtype))
        if self.instance_func is None:
            raise AttributeError(f"'{self.__name__}' has no instance form")
        return self.instance_func.__get__(obj, objtype)


class dualproperty:
    """
    A read-only property on instances that is a plain function on the class.

    ``v.magnitude`` evaluates the getter for ``v``; ``Vector3.magnitude(v)``
    calls the same getter with an explicit argument.
    """

    def __init__(self, fget):
        self.fget = fget
        functools.update_wrapper(self, fget)

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self.fget
        return self.fget(obj)

    def __set__(self, obj, value):
        raise AttributeError(f"can't set attribute '{self.__name__}'")
