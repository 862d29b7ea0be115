"""Integer-pair kernels behind the rational operators.

Each function takes the components of canonical operands and returns a
``(numerator, denominator)`` pair that is already reduced with a positive
denominator, so callers can build the result without another gcd.
"""
from __future__ import annotations

import math
import sys
from typing import Tuple

Pair = Tuple[int, int]


def imul(a: int, b: int) -> int:
    """Multiply, skipping the work for trivial operands."""
    if a == 0 or b == 0:
        return 0
    if a == 1:
        return b
    if b == 1:
        return a
    return a * b


def add_sub(an: int, ad: int, bn: int, bd: int, plus: bool = True) -> Pair:
    """Return ``an/ad ± bn/bd`` using the two-stage gcd reduction."""
    g = math.gcd(ad, bd)
    t1 = imul(an, bd // g)
    t2 = imul(bn, ad // g)
    c = t1 + t2 if plus else t1 - t2
    # gcd(c, g) is the only factor left in common with ad*bd/g
    g2 = math.gcd(c, g)
    return c // g2, imul(ad // g, bd // g2)


def mul_div(an: int, ad: int, bn: int, bd: int, multiply: bool = True) -> Pair:
    """Return ``an/ad * bn/bd`` (or ``/`` when *multiply* is false).

    Cross gcds are taken before multiplying so intermediates never grow
    beyond the size of the result.
    """
    if not multiply:
        if bn == 0:
            raise ZeroDivisionError("division by zero")
        if bn < 0:
            an, bn = -an, -bn
        bn, bd = bd, bn
    g1 = math.gcd(an, bd)
    g2 = math.gcd(ad, bn)
    return imul(an // g1, bn // g2), imul(ad // g2, bd // g1)


def compare_pairs(an: int, ad: int, bn: int, bd: int) -> int:
    """Three-way comparison of two canonical fractions."""
    if ad == bd:
        left, right = an, bn
    else:
        left, right = imul(an, bd), imul(bn, ad)
    diff = left - right
    return (diff > 0) - (diff < 0)


def power_pair(num: int, den: int, exponent: int) -> Pair:
    """Raise a canonical fraction to an integer power.

    The result has a positive denominator; numerator and denominator stay
    coprime because powers of coprime integers are coprime.
    """
    if abs(exponent) > sys.maxsize:
        raise ValueError("exponent is too large")
    if exponent == 0:
        return 1, 1
    if exponent > 0:
        return num ** exponent, den ** exponent
    if num == 0:
        raise ZeroDivisionError("0 cannot be raised to a negative power")
    positive = -exponent
    new_num, new_den = den ** positive, num ** positive
    if new_den < 0:
        new_num, new_den = -new_num, -new_den
    return new_num, new_den


__all__ = ["Pair", "add_sub", "compare_pairs", "imul", "mul_div", "power_pair"]
