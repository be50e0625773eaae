from setuptools import setup, find_packages


setup(
    name="frodomatrix",
    version="0.1",
    packages=find_packages(include=["frodomatrix", "frodomatrix.*"]),
    description="Deterministic public-matrix expansion (SHAKE128 / AES-128) for FrodoKEM-style lattice KEMs.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
    entry_points={
        "console_scripts": [
            "frodomatrix=frodomatrix.cli:main",
        ]
    },
)
