"""System and dependency report used when filing viewer bug reports."""

import platform
import re
import sys
from functools import partial
from importlib.metadata import requires, version
from pathlib import Path
from typing import IO, Callable, Optional

import psutil

_SPECIFIERS = re.compile(r"(~=|==|!=|<=|>=|<|>|===)")


def sys_info(fid: Optional[IO] = None, developer: bool = False):
    """Print the system information for debugging.

    Parameters
    ----------
    fid : file-like, default=None
        The file to write to, passed to :func:`print`.
        Can be None to use :data:`sys.stdout`.
    developer : bool, default=False
        If True, also list the ``test`` extra dependencies.
    """
    ljust = 26
    out = partial(print, end="", file=fid)
    package = __package__.split(".")[0]

    out("Platform:".ljust(ljust) + platform.platform() + "\n")
    out("Python:".ljust(ljust) + sys.version.replace("\n", " ") + "\n")
    out("Executable:".ljust(ljust) + sys.executable + "\n")
    out("CPU:".ljust(ljust) + platform.processor() + "\n")
    out("Physical cores:".ljust(ljust) + str(psutil.cpu_count(False)) + "\n")
    out("Logical cores:".ljust(ljust) + str(psutil.cpu_count(True)) + "\n")
    out("RAM:".ljust(ljust))
    out(f"{psutil.virtual_memory().total / float(2 ** 30):0.1f} GB\n")

    out("\nDependencies info\n")
    try:
        pkg_version = version(package)
    except Exception:
        pkg_version = "Not installed."
    out(f"{package}:".ljust(ljust) + pkg_version + "\n")

    raw_requires = _declared_requirements(package)
    dependencies = [elt.split(";")[0].rstrip() for elt in raw_requires if "extra" not in elt]
    _list_dependencies_info(out, ljust, dependencies)

    if developer:
        extras = [
            elt.split(";")[0].rstrip() for elt in raw_requires if "extra" in elt
        ] or _pyproject_table(package).get("optional-dependencies", {}).get("test", [])
        if extras:
            out("\nOptional 'test' info\n")
            _list_dependencies_info(out, ljust, extras)


def _declared_requirements(package):
    """Return the requirement strings of ``package``.

    Installed metadata is preferred; from a source checkout the
    ``[project]`` table of ``pyproject.toml`` is read instead.
    """
    try:
        raw_requires = requires(package) or []
    except Exception:
        raw_requires = []
    if not raw_requires:
        raw_requires = list(_pyproject_table(package).get("dependencies", []))
    return raw_requires


def _pyproject_table(package):
    try:
        import tomllib
    except ImportError:
        return {}
    pyproject_path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    if not pyproject_path.exists():
        return {}
    with pyproject_path.open("rb") as fh:
        data = tomllib.load(fh)
    project = data.get("project", {})
    if project.get("name") != package:
        return {}
    return project


def _list_dependencies_info(out: Callable, ljust: int, dependencies: list[str]):
    """List dependencies names and versions.

    Parameters
    ----------
    out : Callable
        output function
    ljust : int
         length of returned string
    dependencies : List[str]
        list of dependencies
    """
    for dep in dependencies:
        specifiers = _SPECIFIERS.findall(dep)
        if specifiers:
            dep = dep.split(specifiers[0])[0].rstrip()
        if "[" in dep:
            dep = dep.split("[")[0]
        try:
            version_ = version(dep)
        except Exception:
            version_ = "Not found."
        out(f"{dep}:".ljust(ljust) + version_ + "\n")
