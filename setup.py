# setup.py
from setuptools import setup, find_packages

setup(
    name="tern",
    version="0.4.0",
    description="Tree-walking interpreter for the Tern language",
    packages=find_packages(include=["tern", "tern.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tern = tern.__main__:main"],
    },
    zip_safe=False,
)
