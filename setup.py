import os

from setuptools import find_packages, setup


def _read_version():
    path = os.path.join(os.path.dirname(__file__), "lengthkit", "version.py")
    namespace = {}
    with open(path) as version_file:
        exec(version_file.read(), namespace)
    return namespace["__version__"]


setup(
    name="lengthkit",
    version=_read_version(),
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        "attrs>=22.1",
        "numpy>=1.21",
        "rich>=12.0",
        "typer>=0.9",
        "typing_extensions>=4.0",
    ],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["lengthkit=lengthkit.cli.main:app"]},
    description="Parse, convert and normalize lengths in metric, imperial and astronomic units",
    license="MIT",
    platforms="ALL",
    classifiers=[
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
    ],
)
