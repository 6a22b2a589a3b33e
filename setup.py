#!/usr/bin/env python3
"""The setup script."""

from setuptools import setup, find_packages

with open("README.rst") as readme_file:
    readme = readme_file.read()

with open("HISTORY.rst") as history_file:
    history = history_file.read()

requirements = [
    "Click>=7",
    "trezor>=0.13",
    "attrs>=19.2.0",
    "construct>=2.9",
    "fastecdsa>=2.1,<3",
]

test_requirements = ["pytest"]

setup(
    author='Jan "matejcik" Matějek',
    author_email="jan.matejek@satoshilabs.com",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Topic :: Security :: Cryptography",
    ],
    description="BIP32 hierarchical deterministic key derivation",
    entry_points={"console_scripts": ["hdkeys=hdkeys.cli:main"]},
    install_requires=requirements,
    extras_require={"test": test_requirements},
    license="GNU General Public License v3",
    long_description=readme + "\n\n" + history,
    include_package_data=True,
    keywords="hdkeys bip32",
    name="hdkeys",
    packages=find_packages("src", include=["hdkeys", "hdkeys.*"]),
    package_dir={"": "src"},
    python_requires=">=3.6",
    url="https://github.com/trezor/hdkeys",
    version="0.1.0",
    zip_safe=False,
)
