# robutils

A handful of small, dependency-free helpers for everyday Python code.

## Installation

```
pip install robutils
```

For running the test suite:

```
pip install "robutils[test]"
pytest
```

## What is inside

- `robutils.asserts`: the exception types `AssertionException` and
  `IllegalStateException`, for reporting failed assertions and invalid object
  states. Both keep their text in `.message`, and `str()` of the exception
  is exactly that text.
- `robutils.env`: `get_env_var(name)` returns the value of an environment
  variable, or `""` when it is not set. `set_env_var(name, value)` sets the
  variable, or unsets it when `value` is `None`, and returns `True`. Both
  raise `RuntimeError` when the name is `None` or not a string;
  `set_env_var` also raises `RuntimeError` for an empty name, a name holding
  `=` or a NUL character, or a value that is not a string or holds a NUL.
- `robutils.clamp`: `clamp(v, lo, hi, comp=None)` returns `lo` if `v` is
  less than `lo`, `hi` if `hi` is less than `v`, and `v` otherwise.
  `comp(a, b)` decides whether `a` is less than `b`; without it `<` is used.
  It raises `ValueError` when `hi` is less than `lo`.
- `robutils.endian`: the `Endian` enumeration with `LITTLE` and `BIG`, and
  `NATIVE`, an alias of whichever of the two is the byte order of the
  running machine.
- `robutils.find_and_replace`: `find_and_replace(input, find, replace)`
  returns a copy of `input` (a `str` or `bytes`) with every non-overlapping
  occurrence of `find`, found left to right, replaced by `replace`. An empty
  `find` leaves `input` unchanged.
- `robutils.scope_exit`: `ScopeExit` and `make_scope_exit(callable)` give a
  context manager that calls `callable` when the `with` block is left,
  normally or by an exception, unless `cancel()` was called first. The
  callable runs at most once, and exceptions from the block are not
  suppressed.

## Examples

```python
from robutils.clamp import clamp
from robutils.endian import Endian
from robutils.env import get_env_var, set_env_var
from robutils.find_and_replace import find_and_replace
from robutils.scope_exit import make_scope_exit

clamp(15, 0, 10)                              # 10
clamp(-3, 0, 10, lambda a, b: a < b)          # 0
find_and_replace("a/b/c", "/", "::")          # "a::b::c"

set_env_var("ROBUTILS_DEMO", "on")
get_env_var("ROBUTILS_DEMO")                  # "on"
set_env_var("ROBUTILS_DEMO", None)
get_env_var("ROBUTILS_DEMO")                  # ""

Endian.NATIVE in (Endian.LITTLE, Endian.BIG)  # True

with make_scope_exit(lambda: print("cleaned up")):
    ...                                       # prints "cleaned up" on exit

with make_scope_exit(lambda: print("never")) as guard:
    guard.cancel()                            # nothing is printed
```