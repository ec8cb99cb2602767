"""Utility functions and classes not found in the standard libraries.

Important classes:
 - Ok / Err: a success-or-error result, for operations that can fail in an
   expected way and want their callers to say so explicitly
 - FrozenDict: a hashable immutable dictionary

Important functions:
 - compare_with_lt: a cmp-style comparator built from `<`
"""

# builtins
from functools import total_ordering

# 3rd party
from dictionaries import FrozenDict as _FrozenDict

class Ok(object):
    """A successful result carrying a value."""
    __slots__ = ("value",)
    def __init__(self, value):
        self.value = value
    def __bool__(self):
        return True
    def unwrap(self):
        return self.value
    def __eq__(self, other):
        return isinstance(other, Ok) and self.value == other.value
    def __ne__(self, other):
        return not self.__eq__(other)
    def __repr__(self):
        return "Ok({!r})".format(self.value)

class Err(object):
    """A falsy result carrying the exception that explains the failure.

    Nothing is raised until somebody calls `unwrap`, so callers that expect
    failures can test the result with `if` instead of catching exceptions.
    """
    __slots__ = ("error",)
    def __init__(self, error):
        assert isinstance(error, Exception)
        self.error = error
    def __bool__(self):
        return False
    def unwrap(self):
        raise self.error
    def __eq__(self, other):
        return (isinstance(other, Err)
            and type(self.error) is type(other.error)
            and self.error.args == other.error.args)
    def __ne__(self, other):
        return not self.__eq__(other)
    def __str__(self):
        return "err: {}".format(self.error)
    def __repr__(self):
        return "Err({!r})".format(self.error)

@total_ordering
class FrozenDict(_FrozenDict):
    """
    Immutable dictionary that is hashable (suitable for use in sets/maps)
    and orderable (supports <, >, etc).
    """

    def __lt__(self, other):
        return tuple(sorted(self.items())) < tuple(sorted(other.items()))

    def __repr__(self):
        return "FrozenDict({!r})".format(sorted(self.items()))

def compare_with_lt(x, y):
    """
    Comparator function that promises only to use the `<` binary operator
    (not `>`, `<=`, etc.)
    See also: `functools.cmp_to_key` if you plan to use this with `sorted`.
    """
    if x < y:
        return -1
    elif y < x:
        return 1
    else:
        return 0
