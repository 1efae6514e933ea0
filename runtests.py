# -*- coding: utf-8 -*-
"""Run all tests for `stepwise`.

Each test module has a `test()` function; run them all, report, and exit
nonzero if any failed. The same modules are also collected by `pytest`.
"""

import os
import re
import sys
from importlib import import_module
from traceback import print_exc

def listtestmodules(path):
    testfiles = listtestfiles(path)
    testmodules = [modname(path, fn) for fn in testfiles]
    return list(sorted(testmodules))

def listtestfiles(path, prefix="test_", suffix=".py"):
    return [fn for fn in os.listdir(path) if fn.startswith(prefix) and fn.endswith(suffix)]

def modname(path, filename):  # some/dir/mod.py --> some.dir.mod
    modpath = re.sub(os.path.sep, r".", path)
    themod = re.sub(r"\.py$", r"", filename)
    return ".".join([modpath, themod])

def main():
    failed = []
    modnames = listtestmodules(os.path.join("stepwise", "test"))
    for m in modnames:
        print(f"{m}: ", end="")
        # Protect the rest of the run against ImportError as well as failures.
        try:
            mod = import_module(m)
            mod.test()
        except Exception:
            print_exc()
            failed.append(m)
    print(f"{len(modnames) - len(failed)} of {len(modnames)} test modules passed.")
    for m in failed:
        print(f"FAILED: {m}")
    return not failed

if __name__ == '__main__':
    if not main():
        sys.exit(1)  # pragma: no cover, this only runs when the tests fail.
