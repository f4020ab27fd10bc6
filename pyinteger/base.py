#!/usr/bin/env python
# -*- coding: utf-8 -*-

import numpy as np

'''
Stateless functions that are used throughout the integer wrapper and the
naming catalog.
'''

def calc_integral_dtype(rep):
    '''
    Normalize a representation (a numpy scalar type, dtype or type code) to a
    numpy dtype, rejecting anything that is not a fixed-width integer.
    '''
    dtype = np.dtype(rep)
    if not np.issubdtype(dtype, np.integer):
        raise TypeError(f"Representation '{dtype.name}' is not an integral type")
    return dtype


def calc_bits(dtype):
    return np.dtype(dtype).itemsize * 8


def calc_is_signed(dtype):
    return np.issubdtype(np.dtype(dtype), np.signedinteger)


def calc_mask(dtype):
    '''
    All-ones bit pattern for a representation, 0xFF... or 0b111...
    '''
    return (2 ** calc_bits(dtype)) - 1


def calc_min(dtype):
    return int(np.iinfo(dtype).min)


def calc_max(dtype):
    return int(np.iinfo(dtype).max)


def calc_wrap(num, dtype):
    '''
    Wrap an arbitrary Python integer into a representation, two's complement
    for signed types and modulo 2 ** bits for unsigned ones. This is what C
    arithmetic on the raw type produces on overflow.
    '''
    wrapped = int(num) & calc_mask(dtype)
    if calc_is_signed(dtype) and wrapped > calc_max(dtype):
        wrapped -= 2 ** calc_bits(dtype)
    return wrapped


def calc_trunc_div(num, den):
    '''
    Integer quotient rounded toward zero, as C does it. Python's // floors
    instead, which differs when exactly one operand is negative. A zero
    denominator raises ZeroDivisionError from Python's own // operator.
    '''
    quot = abs(num) // abs(den)
    if (num < 0) != (den < 0):
        return -quot
    return quot


def calc_trunc_mod(num, den):
    '''
    Remainder with the sign of the numerator, so that
    num == calc_trunc_div(num, den) * den + calc_trunc_mod(num, den).
    '''
    return num - (calc_trunc_div(num, den) * den)


def calc_lshift(num, count, dtype):
    # counts at or past the width shift every bit out
    return calc_wrap(num << min(count, calc_bits(dtype)), dtype)


def calc_rshift(num, count, dtype):
    # Python's >> on a negative int is already arithmetic
    return calc_wrap(num >> min(count, calc_bits(dtype)), dtype)
