#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pyinteger.catalog import integer
from pyinteger.integer import sizeof


def main():
    i = integer(10)

    i += 15

    if i > 20:
        print("Greater!")

    if i == 25:
        print("Equal!")

    print(f"Value: {i.cget():d}")
    print(f"sizeof(i) = {sizeof(i):d}")


if __name__ == '__main__':
    main()
