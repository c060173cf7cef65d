# setup.py
from setuptools import setup, find_packages

setup(
    name="owl",
    version="0.1.0",
    description="A small S-expression scripting language with a tree-walking interpreter",
    packages=find_packages(include=["owl", "owl.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["owl=owl.__main__:main"],
    },
    zip_safe=False,
)
