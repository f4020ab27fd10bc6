#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import operator

import numpy as np

import pyinteger.base as base

# one wrapper class per representation, keyed by dtype string (e.g. '<i4')
_instantiations = {}


class Integer:
    '''
    Fixed-width signed or unsigned integer with a distinct type per
    representation, and the same arithmetic as the raw C type underneath:
    values under- or over-flow according to the number of bits, division
    truncates toward zero, and dividing by zero raises like it does for a
    plain Python integer.

    The class is generic over a numpy integer representation, and has to be
    instantiated over one before use, e.g. `Integer[np.int32](10)`. The
    value lives in a 0-d numpy array of exactly that dtype, with no other
    per-instance state.

    Every compound operator (`+=`, `<<=`, ...) mutates the left operand in
    place. Every plain binary operator copies the left operand and applies
    the compound operator to the copy.
    '''

    __slots__ = ('_storage',)

    # let numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    dtype = None
    value_type = None
    bits = None
    is_signed = None
    min = None
    max = None

    def __class_getitem__(cls, rep):
        '''
        Instantiate the wrapper over a representation, anything numpy.dtype()
        accepts. Non-integral representations are rejected here, before any
        value of the type can exist. The same representation always maps to
        the same class.
        '''
        if cls.dtype is not None:
            raise TypeError(f"{cls.__name__} is already instantiated over '{cls.dtype.name}'")
        dtype = base.calc_integral_dtype(rep)
        if dtype.str not in _instantiations:
            logging.debug(f"Instantiating Integer over '{dtype.name}', {dtype.itemsize:d} byte(s).")
            name = f"Integer[{dtype.name}]"
            _instantiations[dtype.str] = type(name, (cls,), {
                '__slots__': (),
                '__qualname__': name,
                'dtype': dtype,
                'value_type': dtype.type,
                'bits': base.calc_bits(dtype),
                'is_signed': base.calc_is_signed(dtype),
                'min': base.calc_min(dtype),
                'max': base.calc_max(dtype),
            })
        return _instantiations[dtype.str]

    def __init__(self, num=0):
        '''
        Initialize with zero, with an integer value the representation can hold,
        or with another wrapper of the same type (a copy).
        '''
        if self.dtype is None:
            raise TypeError("Integer must be instantiated over a representation first, e.g. Integer[np.int32]")
        self._storage = np.zeros((), dtype=self.dtype)
        self._storage[()] = self._convert(num)

    @classmethod
    def _convert(cls, num):
        '''
        Validate a value on its way into storage, and return it as a Python int.
        '''
        if isinstance(num, Integer):
            if type(num) is not cls:
                raise TypeError(f"Cannot convert {type(num).__name__} to {cls.__name__}")
            return num.cget()
        if not isinstance(num, (int, np.integer)):
            raise TypeError(f"Cannot convert {type(num).__name__} to {cls.__name__}")
        int_num = int(num)
        if int_num < cls.min or int_num > cls.max:
            raise OverflowError(f"Value {int_num} out-of-range for {cls.__name__}")
        return int_num

    def _coerce(self, o):
        '''
        Right-hand operand of an arithmetic or bitwise operator as a Python int,
        or None when the operand is not something our type operates with.
        '''
        if isinstance(o, Integer):
            return o.cget() if type(o) is type(self) else None
        if isinstance(o, (int, np.integer)):
            return self._convert(o)
        return None

    def _compare_value(self, o):
        if isinstance(o, Integer):
            return o.cget() if type(o) is type(self) else None
        if isinstance(o, (int, np.integer)):
            return int(o)
        return None

    def _lift(self, o):
        # raw left operand of a reflected operator
        if isinstance(o, (int, np.integer)):
            return self.__class__(o)
        return None

    def _store(self, num):
        self._storage[()] = base.calc_wrap(num, self.dtype)

    def _compound(self, o, calc):
        rhs = self._coerce(o)
        if rhs is None:
            return NotImplemented
        self._store(calc(self.cget(), rhs))
        return self

    def _reflected(self, o, compound):
        lhs = self._lift(o)
        if lhs is None:
            return NotImplemented
        return compound(lhs, self)

    # Access

    def get(self):
        '''
        The live storage, a 0-d numpy array; writing through it, e.g.
        `x.get()[...] = 7`, changes this wrapper.
        '''
        return self._storage

    def cget(self):
        return self._storage.item()

    @property
    def nbytes(self):
        return self._storage.nbytes

    # Construction, copy & move

    def copy(self):
        return self.__class__(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    @classmethod
    def moved_from(cls, src):
        '''
        Move-construct: a new wrapper holding the source's value, with the
        source left holding zero.
        '''
        if type(src) is not cls:
            raise TypeError(f"Cannot move {type(src).__name__} into {cls.__name__}")
        moved = cls(src)
        src._storage[()] = 0
        return moved

    def assign(self, rhs):
        '''
        Copy-assign from a wrapper of the same type or a raw integer. Assigning
        a wrapper to itself leaves it untouched.
        '''
        if rhs is self:
            return self
        self._storage[()] = self._convert(rhs)
        return self

    def move_assign(self, rhs):
        '''
        Move-assign from another wrapper of the same type, leaving it holding
        zero. Moving a wrapper into itself leaves it untouched.
        '''
        if rhs is self:
            return self
        if type(rhs) is not type(self):
            raise TypeError(f"Cannot move {type(rhs).__name__} into {type(self).__name__}")
        self._storage[()] = rhs.cget()
        rhs._storage[()] = 0
        return self

    # Increment & decrement

    def incr(self):
        return self.__iadd__(1)

    def decr(self):
        return self.__isub__(1)

    def post_incr(self):
        old = self.copy()
        self.incr()
        return old

    def post_decr(self):
        old = self.copy()
        self.decr()
        return old

    # Unary

    def __pos__(self):
        return self.copy()

    def __neg__(self):
        result = self.copy()
        result._store(-self.cget())
        return result

    def __invert__(self):
        result = self.copy()
        result._store(~self.cget())
        return result

    def logical_not(self):
        return self.cget() == 0

    def __bool__(self):
        return self.cget() != 0

    '''
    Compound operators do the work, with the result wrapped back into the
    representation.
    '''
    def __iadd__(self, o): return self._compound(o, operator.add)
    def __isub__(self, o): return self._compound(o, operator.sub)
    def __imul__(self, o): return self._compound(o, operator.mul)
    def __itruediv__(self, o): return self._compound(o, base.calc_trunc_div)
    def __imod__(self, o): return self._compound(o, base.calc_trunc_mod)
    def __iand__(self, o): return self._compound(o, operator.and_)
    def __ior__(self, o): return self._compound(o, operator.or_)
    def __ixor__(self, o): return self._compound(o, operator.xor)
    def __ilshift__(self, o): return self._compound(o, lambda num, count: base.calc_lshift(num, count, self.dtype))
    def __irshift__(self, o): return self._compound(o, lambda num, count: base.calc_rshift(num, count, self.dtype))

    '''
    Plain binary operators copy the left operand, then apply the compound
    operator to the copy.
    '''
    def __add__(self, o): return self.copy().__iadd__(o)
    def __sub__(self, o): return self.copy().__isub__(o)
    def __mul__(self, o): return self.copy().__imul__(o)
    def __truediv__(self, o): return self.copy().__itruediv__(o)
    def __mod__(self, o): return self.copy().__imod__(o)
    def __and__(self, o): return self.copy().__iand__(o)
    def __or__(self, o): return self.copy().__ior__(o)
    def __xor__(self, o): return self.copy().__ixor__(o)
    def __lshift__(self, o): return self.copy().__ilshift__(o)
    def __rshift__(self, o): return self.copy().__irshift__(o)

    '''
    A raw integer on the left is converted to our type first, as if it had
    been written `Integer[...](o) + self`.
    '''
    def __radd__(self, o): return self._reflected(o, Integer.__iadd__)
    def __rsub__(self, o): return self._reflected(o, Integer.__isub__)
    def __rmul__(self, o): return self._reflected(o, Integer.__imul__)
    def __rtruediv__(self, o): return self._reflected(o, Integer.__itruediv__)
    def __rmod__(self, o): return self._reflected(o, Integer.__imod__)
    def __rand__(self, o): return self._reflected(o, Integer.__iand__)
    def __ror__(self, o): return self._reflected(o, Integer.__ior__)
    def __rxor__(self, o): return self._reflected(o, Integer.__ixor__)
    def __rlshift__(self, o): return self._reflected(o, Integer.__ilshift__)
    def __rrshift__(self, o): return self._reflected(o, Integer.__irshift__)

    '''
    Comparison dunders cannot overflow, so just compare the underlying
    Python int() values.
    '''
    def __eq__(self, o):
        rhs = self._compare_value(o)
        return NotImplemented if rhs is None else self.cget() == rhs

    def __ne__(self, o):
        rhs = self._compare_value(o)
        return NotImplemented if rhs is None else self.cget() != rhs

    def __lt__(self, o):
        rhs = self._compare_value(o)
        return NotImplemented if rhs is None else self.cget() < rhs

    def __le__(self, o):
        rhs = self._compare_value(o)
        return NotImplemented if rhs is None else self.cget() <= rhs

    def __gt__(self, o):
        rhs = self._compare_value(o)
        return NotImplemented if rhs is None else self.cget() > rhs

    def __ge__(self, o):
        rhs = self._compare_value(o)
        return NotImplemented if rhs is None else self.cget() >= rhs

    # mutable, so not a dictionary key
    __hash__ = None

    # Conversions

    def __int__(self):
        return self.cget()

    def __index__(self):
        return self.cget()

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self.cget().__format__(*fmt_args)

    def __str__(self):
        return str(self.cget())

    def __repr__(self):
        return f"{type(self).__name__}({self.cget()})"


def _truth_values(lhs, rhs):
    if not isinstance(lhs, Integer) or type(lhs) is not type(rhs):
        raise TypeError(f"Logical operands must share one Integer type, got {type(lhs).__name__} & {type(rhs).__name__}")
    return lhs.cget() != 0, rhs.cget() != 0


def logical_and(lhs, rhs):
    '''
    Logical and of two wrapped values. Both operands are already evaluated,
    so unlike Python's `and` nothing is short-circuited, and the result is
    always a bool.
    '''
    lhs_truth, rhs_truth = _truth_values(lhs, rhs)
    return lhs_truth and rhs_truth


def logical_or(lhs, rhs):
    '''
    Logical or of two wrapped values, without short-circuiting.
    '''
    lhs_truth, rhs_truth = _truth_values(lhs, rhs)
    return lhs_truth or rhs_truth


def sizeof(obj):
    '''
    Storage size in bytes of a wrapper type or wrapper value, which is the size
    of its representation.
    '''
    if obj.dtype is None:
        raise TypeError("Integer must be instantiated over a representation first")
    return obj.dtype.itemsize
