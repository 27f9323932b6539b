"""Setup and install orm_enums.

Typical usage:
  python setup.py develop
  python setup.py install
  python setup.py test
"""
from __future__ import annotations

from pathlib import Path

import setuptools

module_folder = "orm_enums"
module_name = "orm-enums"

with Path("README.md").open(encoding="utf-8") as file:
    long_description = file.read()

version: dict[str, str] = {}
with Path(module_folder, "version.py").open(encoding="utf-8") as file:
    exec(file.read(), version)  # noqa: S102

required = [
    "sqlalchemy>=2",
    "typing-extensions",
]
extras_require = {
    "test": ["coverage", "pytest"],
}
extras_require["dev"] = extras_require["test"] + [
    "ruff",
    "codespell",
    "black",
    "isort",
    "pre-commit",
]

setuptools.setup(
    name=module_name,
    version=version["__version__"],
    description="Named enumerations for SQLAlchemy models from lookup tables, "
    "class constants, or native enums",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=setuptools.find_packages(include=[module_folder, f"{module_folder}.*"]),
    package_data={module_folder: []},
    install_requires=required,
    extras_require=extras_require,
    test_suite="tests",
    scripts=[],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Development Status :: 2 - Pre-Alpha",
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Topic :: Database",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    zip_safe=False,
)
