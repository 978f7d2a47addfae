"""
Setup file.
"""

import os

from setuptools import find_packages, setup

KEYWORDS = "build cross-platform bun compile executable orchestrator"
HERE = os.path.dirname(os.path.abspath(__file__))


def _read_version() -> str:
    with open(os.path.join(HERE, "src", "prefbuild", "__init__.py"), encoding="utf-8") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"')
    raise RuntimeError("Unable to find __version__")


if __name__ == "__main__":
    setup(
        name="prefbuild",
        version=_read_version(),
        description="Cross-platform build orchestrator for pref-doctor executables",
        keywords=KEYWORDS,
        python_requires=">=3.9",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=["tqdm>=4.0"],
        extras_require={"test": ["pytest>=7.0"]},
        entry_points={"console_scripts": ["prefbuild=prefbuild.cli:main"]},
    )
