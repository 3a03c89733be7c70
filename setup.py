from setuptools import find_packages
from setuptools import setup

setup(
    name="xkeys",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "ecdsa",
        "pycryptodome",
    ],
    extras_require={
        "dev": [],
        "test": ["pytest"],
    },
)
