# type: ignore
import setuptools

MAJOR               = 1
MINOR               = 0
MICRO               = 0
VERSION             = f"{MAJOR}.{MINOR}.{MICRO}"

with open("README.md", "r") as f:
    long_description = f.read()

setuptools.setup(
    name="pcgrand",
    version=VERSION,
    description="Small, fast, reproducible permuted congruential random number generators.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="BSD 3-Clause License",
    packages=["pcgrand", "pcgrand.context"],
    entry_points={ "console_scripts": ["pcgrand = pcgrand.__main__:main"]},
    classifiers=[
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3.8",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering"
    ],
    install_requires = [],
    extras_require = {
        "test": ["scipy>=1.0"]
    },
    python_requires=">=3.8",
)
