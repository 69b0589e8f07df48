import runpy

from setuptools import setup

# picoarg/__init__.py needs the dependencies, read the constants directly
const = runpy.run_path("picoarg/const.py")

setup(
    name="picoarg",
    version=const["VERSION_STR"],
    python_requires='>=3.10',
    description=const["DESCRIPTION"],
    packages=["picoarg"],
    install_requires=[
        "dataclasses-json",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "picoarg = picoarg:main",
        ],
    },
    license="MIT",
    platforms="any",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
