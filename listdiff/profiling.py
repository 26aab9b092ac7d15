"""Tools for profiling diff performance.

The stages of a diff call (trimming and the calculation of the edit
script) are timed by `timer`, which is disabled by default. To see where
the time goes for a pair of inputs, launch

    python -m listdiff.profiling old.json new.json

which runs `listdiff diff` with the timer enabled and prints a table like

    Key          Calls       Time    Time/Call
    ---------  -------  ---------  -----------
    calculate        1  2.31642    2.31642
    trim             1  0.0002141  0.0002141

Note that calculations running in a worker process are not timed, pass
--no-spawn-worker to keep them inline.
"""

import time
import contextlib
from tabulate import tabulate
from functools import wraps


def _sort_time(value):
    time = value[1]['time']
    return -time


class TimePaths(object):
    def __init__(self, verbose=False, enabled=True):
        self.verbose = verbose
        self.map = {}
        self.enabled = enabled

    @contextlib.contextmanager
    def time(self, key):
        if not self.enabled:
            yield
            return
        start = time.perf_counter()
        yield
        secs = time.perf_counter() - start
        entry = self.map.setdefault(key, dict(time=0.0, calls=0))
        entry['time'] += secs
        entry['calls'] += 1

    def profile(self, key=None):
        def decorator(function):
            nonlocal key
            if key is None:
                key = function.__name__ or 'unknown'
            @wraps(function)
            def inner(*args, **kwargs):
                with self.time(key):
                    return function(*args, **kwargs)
            return inner
        return decorator

    @contextlib.contextmanager
    def enable(self):
        old = self.enabled
        self.enabled = True
        yield
        self.enabled = old

    def reset(self):
        self.map = {}

    def __str__(self):
        items = sorted(self.map.items(), key=_sort_time)
        lines = []
        for key, data in items:
            time = data['time']
            calls = data['calls']
            lines.append((key, calls, time, time / calls))
        return tabulate(lines, headers=['Key', 'Calls', 'Time', 'Time/Call'])


timer = TimePaths(enabled=False)


def profile_diff_paths(args=None):
    import listdiff.listdiffapp
    try:
        with timer.enable():
            listdiff.listdiffapp.main(args)
    finally:
        print(str(timer))


if __name__ == "__main__":
    profile_diff_paths()
