#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import numpy as np
import pandas as pd

from pyinteger.integer import Integer, sizeof

'''
Platform-independent names for common integer representations, following C's
fundamental types and <cstdint>. Platform-dependent widths come from numpy's
own mapping of the C types; the "fast" types follow glibc, where 16- and
32-bit fast types are pointer-width.
'''

REPRESENTATIONS = {
    'signed_char': np.byte,
    'unsigned_char': np.ubyte,
    'short_int': np.short,
    'unsigned_short_int': np.ushort,
    'integer': np.intc,
    'unsigned_integer': np.uintc,
    'long_int': np.dtype('l').type,
    'unsigned_long_int': np.dtype('L').type,
    'long_long_int': np.longlong,
    'unsigned_long_long_int': np.ulonglong,

    'int8_t': np.int8,
    'int16_t': np.int16,
    'int32_t': np.int32,
    'int64_t': np.int64,
    'int_fast8_t': np.int8,
    'int_fast16_t': np.intp,
    'int_fast32_t': np.intp,
    'int_fast64_t': np.int64,
    'int_least8_t': np.int8,
    'int_least16_t': np.int16,
    'int_least32_t': np.int32,
    'int_least64_t': np.int64,
    'intmax_t': np.longlong,
    'intptr_t': np.intp,

    'uint8_t': np.uint8,
    'uint16_t': np.uint16,
    'uint32_t': np.uint32,
    'uint64_t': np.uint64,
    'uint_fast8_t': np.uint8,
    'uint_fast16_t': np.uintp,
    'uint_fast32_t': np.uintp,
    'uint_fast64_t': np.uint64,
    'uint_least8_t': np.uint8,
    'uint_least16_t': np.uint16,
    'uint_least32_t': np.uint32,
    'uint_least64_t': np.uint64,
    'uintmax_t': np.ulonglong,
    'uintptr_t': np.uintp,
}

signed_char = Integer[REPRESENTATIONS['signed_char']]
unsigned_char = Integer[REPRESENTATIONS['unsigned_char']]
short_int = Integer[REPRESENTATIONS['short_int']]
unsigned_short_int = Integer[REPRESENTATIONS['unsigned_short_int']]
integer = Integer[REPRESENTATIONS['integer']]
unsigned_integer = Integer[REPRESENTATIONS['unsigned_integer']]
long_int = Integer[REPRESENTATIONS['long_int']]
unsigned_long_int = Integer[REPRESENTATIONS['unsigned_long_int']]
long_long_int = Integer[REPRESENTATIONS['long_long_int']]
unsigned_long_long_int = Integer[REPRESENTATIONS['unsigned_long_long_int']]

int8_t = Integer[REPRESENTATIONS['int8_t']]
int16_t = Integer[REPRESENTATIONS['int16_t']]
int32_t = Integer[REPRESENTATIONS['int32_t']]
int64_t = Integer[REPRESENTATIONS['int64_t']]
int_fast8_t = Integer[REPRESENTATIONS['int_fast8_t']]
int_fast16_t = Integer[REPRESENTATIONS['int_fast16_t']]
int_fast32_t = Integer[REPRESENTATIONS['int_fast32_t']]
int_fast64_t = Integer[REPRESENTATIONS['int_fast64_t']]
int_least8_t = Integer[REPRESENTATIONS['int_least8_t']]
int_least16_t = Integer[REPRESENTATIONS['int_least16_t']]
int_least32_t = Integer[REPRESENTATIONS['int_least32_t']]
int_least64_t = Integer[REPRESENTATIONS['int_least64_t']]
intmax_t = Integer[REPRESENTATIONS['intmax_t']]
intptr_t = Integer[REPRESENTATIONS['intptr_t']]

uint8_t = Integer[REPRESENTATIONS['uint8_t']]
uint16_t = Integer[REPRESENTATIONS['uint16_t']]
uint32_t = Integer[REPRESENTATIONS['uint32_t']]
uint64_t = Integer[REPRESENTATIONS['uint64_t']]
uint_fast8_t = Integer[REPRESENTATIONS['uint_fast8_t']]
uint_fast16_t = Integer[REPRESENTATIONS['uint_fast16_t']]
uint_fast32_t = Integer[REPRESENTATIONS['uint_fast32_t']]
uint_fast64_t = Integer[REPRESENTATIONS['uint_fast64_t']]
uint_least8_t = Integer[REPRESENTATIONS['uint_least8_t']]
uint_least16_t = Integer[REPRESENTATIONS['uint_least16_t']]
uint_least32_t = Integer[REPRESENTATIONS['uint_least32_t']]
uint_least64_t = Integer[REPRESENTATIONS['uint_least64_t']]
uintmax_t = Integer[REPRESENTATIONS['uintmax_t']]
uintptr_t = Integer[REPRESENTATIONS['uintptr_t']]


def lookup(name):
    '''
    Wrapper type for a catalog name, e.g. lookup('uint8_t')(255).
    '''
    if name not in REPRESENTATIONS:
        raise KeyError(f"No '{name}' integer type in the catalog")
    return Integer[REPRESENTATIONS[name]]


def catalog_frame():
    '''
    Return the catalog as a table, one row per name, with the representation
    each name resolves to on this platform and its range.
    '''
    logging.info(f"Rendering catalog of {len(REPRESENTATIONS):,d} integer types.")
    rows = {}
    for name in REPRESENTATIONS:
        int_type = lookup(name)
        rows[name] = {
            'representation': int_type.dtype.name,
            'bits': int_type.bits,
            'itemsize': sizeof(int_type),
            'is_signed': int_type.is_signed,
            'min': int_type.min,
            'max': int_type.max,
        }
    return pd.DataFrame.from_dict(rows, orient='index')
