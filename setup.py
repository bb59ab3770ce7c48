"""
Setup script for attribute-editors.
"""

from setuptools import find_packages, setup

setup(
    name="attribute-editors",
    version="0.1.0",
    description="Resolution of editors for configurable component attributes",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.26",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
