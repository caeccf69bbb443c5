from setuptools import setup, find_packages

from linecompleter import VERSION

setup(
    name="linecompleter",
    description="Completion engine for interactive terminal line editors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "wcwidth",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    python_requires=">=3.10",
    version=VERSION,
)
