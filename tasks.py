# Copyright (c) 2025 NASK. All rights reserved.

"""
This is the *n6uri*'s *[Invoke](https://www.pyinvoke.org/) tasks* file.
It defines a handful of *n6uri*-development-related *tasks*.

To make use of it, you need to install *n6uri* in the development
mode, e.g., by executing:

    cd n6uri  # <- your local *n6uri* source code directory
    python3 -m venv my-n6uri-venv
    source my-n6uri-venv/bin/activate
    pip install -e '.[tests,dev]'

Then you can list the available tasks by executing the command:

    inv --list

You can also learn more about particular tasks by executing:

    inv <task name> --help

See also:
  * https://docs.pyinvoke.org/en/stable/
"""

from __future__ import annotations

import contextlib
import shlex
import sys
from collections.abc import Generator
from pathlib import PosixPath

from invoke import (
    Context,
    task,
)


#
# Auxiliary constants
#


PACKAGE_DIRNAME = 'n6uri'

PYTEST_DOCTEST_OPT = '--doctest-modules'


#
# Actual task definitions
#


@task
def delete_pycs(
    c: Context,
) -> None:
    """
    Delete all cached Python bytecode (`*.pyc`) files

    (more precisely: all `*.pyc` files being ordinary files as well as
    all `__pycache__` directories, in your local *n6uri*'s source code
    top-level directory and, recursively, in all its subdirectories;
    if a directory cannot be traversed or a file/directory cannot be
    deleted, only a warning is printed by the underlying 'find' command,
    but the entire task is still considered successful).
    """
    with _top_dir_as_cwd(c) as top_dir:
        _intent(
            f"delete any cached Python bytecode "
            f"stuff beneath {str(top_dir)!a}",
        )

        c.run(
            "( find . -type f -name '*.pyc' -delete"
            "; find . -type d -name '__pycache__' -delete"
            "; true )",
        )

        _success(
            c,
            (
                "deleted local `**/*.pyc` files and `**/__pycache__` "
                "directories (if any deletable ones existed)"
            ),
        )


@task(
    pre=[delete_pycs],
    aliases=['test', 'tests'],
    help={
        'doctests': (
            f"Shall also doctests be run, i.e., shall the "
            f"`{PYTEST_DOCTEST_OPT}` option be passed to "
            f"'pytest'? (default: yes)"
        ),
        'pytest_args': (
            "Any extra command-line arguments to 'pytest' "
            "(typically, they need to be quoted as a whole, "
            "to form a single STRING)."
        ),
    },
)
def pytest(
    c: Context,
    doctests: bool = True,
    pytest_args: str = '',
) -> None:
    """
    Run the *n6uri* tests, using *pytest*

    (with the Python interpreter *Invoke* is run with; optionally, with
    additional *pytest* command-line arguments, if you specify
    `--pytest-args`...).

    Note: before the start of this task, the 'delete-pycs' task is invoked
    automatically.
    """
    with _top_dir_as_cwd(c):
        _intent(f"test the {PACKAGE_DIRNAME!a} package (using *pytest*)")

        all_pytest_args = []
        if doctests:
            all_pytest_args.append(PYTEST_DOCTEST_OPT)
        all_pytest_args.extend(shlex.split(pytest_args))
        all_pytest_args.append(PACKAGE_DIRNAME)

        c.run(
            (
                f"{shlex.quote(sys.executable)}"
                f" -m pytest"
                f" {shlex.join(all_pytest_args)}"
            ),
            pty=True,
        )

        _success(
            c,
            f"successfully ran tests (using *pytest*) for {PACKAGE_DIRNAME!a}",
        )


#
# General-use helpers


@contextlib.contextmanager
def _top_dir_as_cwd(c: Context) -> Generator[PosixPath, None, None]:
    top_dir = PosixPath(__file__).parent.resolve(strict=True)
    with c.cd(str(top_dir)):
        yield top_dir


def _intent(intended_operation_description: str) -> None:
    print(f"About to {intended_operation_description}...")
    sys.stdout.flush()


def _success(
    c: Context,
    successful_operation_description: str,
) -> None:
    print(f"OK, {successful_operation_description}.")
    if c.config.run.dry:
        print("(Well, actually not, because it is a *dry* run...)")
    sys.stdout.flush()
