"""
keeps the project version file in sync with the latest git tag

"""
from __future__ import annotations

import os
import re
import subprocess

VERSION_LINE_MATCHER = re.compile(r"""^__version__ = ['"]([^'"]+)['"]""", re.MULTILINE)


def pep440ify(git_describe_version: str) -> str:
    # "1.2.3-4-gabcdef" -> "1.2.3+gabcdef"
    parts = git_describe_version.split("-")
    if len(parts) == 3:
        return f"{parts[0]}+{parts[2]}"
    if re.match(r"^\d+\.\d+\.\d+$", git_describe_version):
        return git_describe_version
    return f"0.0.0+{git_describe_version}"


def _read_file_version(version_file: str) -> str | None:
    try:
        with open(version_file, encoding="utf-8") as fp:
            match = VERSION_LINE_MATCHER.search(fp.read())
    except OSError:
        return None
    return match.group(1) if match else None


def get_project_version(version_file: str) -> str:
    version_file = os.path.join(os.path.dirname(os.path.realpath(__file__)), version_file)
    file_ver = _read_file_version(version_file)

    try:
        proc = subprocess.run(
            ["git", "describe", "--tags", "--always"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
        git_ver = proc.stdout.decode("utf-8").strip() if proc.returncode == 0 else ""
    except OSError:
        git_ver = ""

    if git_ver:
        git_ver = pep440ify(git_ver)
        if git_ver != file_ver:
            with open(version_file, "w", encoding="utf-8") as fp:
                fp.write("__version__ = '%s'\n" % git_ver)
        return git_ver

    if not file_ver:
        raise Exception("version not available from git or from file %r" % version_file)

    return file_ver


if __name__ == "__main__":
    import sys

    get_project_version(sys.argv[1])
