""" ecclib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecclib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecclib.name,
    version=ecclib.__version__,
    license=ecclib.__license__,
    author=ecclib.__author__,
    author_email=ecclib.__author_email__,
    description="A library for prime field elliptic curve arithmetic and ECDSA",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"ecclib": ["ecc/_data/*.json"]},
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords="cryptography elliptic-curves ecdsa secp256k1 SEC-1 finite-fields",
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
