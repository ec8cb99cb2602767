"""A small logging framework that supports timing and indented log messages.

Messages go to standard error so that they never interleave with printed
polynomials on standard output.

Important functions:
 - task: a context manager to wrap self-contained tasks
 - event: print a log message (indented based on active tasks)
 - format_profile: summarize the time spent in each task so far
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from sparsepoly.opts import Option

verbose = Option("verbose", bool, False, description="Log arithmetic and evaluation steps to stderr")

_times = defaultdict(float)
_task_stack = []

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def task_begin(name, **kwargs):
    start = datetime.datetime.now()
    _task_stack.append((name, start))
    if not verbose.value:
        return
    indent = "  " * (len(_task_stack) - 1)
    log("{indent}{name}{maybe_kwargs}...".format(
        indent = indent,
        name   = name,
        maybe_kwargs = (" [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]") if kwargs else ""))

def task_end():
    end = datetime.datetime.now()
    key = tuple(name for name, start in _task_stack)
    name, start = _task_stack.pop()
    duration = (end-start).total_seconds()
    _times[key] += duration
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{indent}Finished {name} [duration={duration:.3}s]".format(indent=indent, name=name, duration=duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    if not verbose.value:
        return
    indent = "  " * len(_task_stack)
    log("{indent}{name}".format(indent=indent, name=name))

def format_profile():
    """One line per task path, slowest first."""
    lines = []
    for k in sorted(_times.keys(), key=_times.get, reverse=True):
        lines.append("{:12.3} {}".format(_times[k], " > ".join(k)))
    return "\n".join(lines)
