import os

from setuptools import find_packages, setup

here = os.path.abspath(os.path.dirname(__file__))
src = os.path.join(here, "src/justpipe")

# Instead of doing the obvious thing (importing 'justpipe' directly and just reading '__version__'),
# we are parsing the version out of the source AST here, because if the user is missing any
# dependencies at setup time, an import error would prevent the installation.
# Two simple ways to verify the installation using this setup.py file:
#
#     pip install -e .
#
#  or:
#
#     pip install .
#
import ast

with open(os.path.join(src, "__init__.py")) as f:
    mod = ast.parse(f.read())
    version = [
        t
        for t in [*filter(lambda n: isinstance(n, ast.Assign), mod.body)]
        if isinstance(t.targets[0], ast.Name) and t.targets[0].id == "__version__"
    ][0].value.value

meta = {
    "name": "justpipe",
    "license": "MIT",
    "version": version,
    "python_requires": ">=3.10",
    "keywords": [
        "pipes",
        "pipeline",
        "ast",
        "parse transform",
        "functional",
    ],
    "classifiers": [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
    ],
    "extras_require": {"test": ["pytest", "pytest-cov", "hypothesis>=6.23.1"]},
    "description": "left-to-right pipes for python, rewritten at compile time",
    "platforms": ["any"],
}


requires = (
    "pydantic>=2.0",
    "beartype>=0.10",
    "icontract>=2.5.4",
    "tomli>=1.1.0; python_version < '3.11'",
)


with open(os.path.join(here, "README.md")) as f:
    LONG_DESCRIPTION = f.read()

setup(
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    install_requires=requires,
    zip_safe=True,
    **meta
)
