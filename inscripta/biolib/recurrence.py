"""
Two-term linear recurrences of the Fibonacci family.
"""


def fibonacci(n: int, a: int = 1, b: int = 1) -> int:
    """Returns the n-th term of the recurrence ``f(n) = a * f(n - 2) + b * f(n - 1)`` with ``f(1) = f(2) = 1``.

    With the default weights this is the Fibonacci sequence. Setting ``a`` to ``k`` gives the rabbit population
    after ``n`` months when every mature pair produces ``k`` new pairs each month.

    Two accumulators are kept; at step ``i`` the one matching the parity of ``i`` holds ``f(i - 2)`` and is
    overwritten with ``f(i)``.

    Python integers do not overflow. In a signed 64-bit type, ``fibonacci(92)`` is the last classic Fibonacci
    number that fits.

    Parameters
    ----------
    n
        1-based index of the term to return.
    a
        Weight of the term two steps back.
    b
        Weight of the previous term.

    Raises
    ------
    ValueError
        If n is less than 1.
    """
    if n < 1:
        raise ValueError("Recurrence is defined for n >= 1, got {}".format(n))
    terms = [1, 1]
    for i in range(3, n + 1):
        j = i & 1
        terms[j] = a * terms[j] + b * terms[1 - j]
    return terms[n & 1]
