from setuptools import setup, find_packages


setup(
    name="multitar",
    version="0.1",
    packages=find_packages(include=["multitar", "multitar.*"]),
    description="A write-only UStar tape-archive encoder with multi-part assembly.",
    author="vercingetorx",
    python_requires=">=3.8",
)
