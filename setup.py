from setuptools import setup, find_packages

setup(
    name="adaptive_grid",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "adaptive_grid.tests"]),
    package_data={"adaptive_grid": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
