""" gf25 build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import gf25

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=gf25.name,
    version=gf25.__version__,
    license=gf25.__license__,
    author=gf25.__author__,
    author_email=gf25.__author_email__,
    description="Elliptic curve group law over the finite field GF(5^2)",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords="finite-fields elliptic-curves galois-field GF(25) didactic",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
