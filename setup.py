from setuptools import setup, find_packages

setup(
    name="numkernel",
    version="0.1",
    description="Dense matrices, exact fractions and Gauss-Jordan elimination",
    long_description=("A small linear algebra kernel: dense Matrix and Vector containers, an exact 64-bit rational "
                      "scalar and a row reduction engine (RREF / Gauss-Jordan) that classifies linear systems as "
                      "uniquely solvable, unsolvable, underdetermined or having infinitely many solutions"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.7",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "gauss-jordan", "rref", "fractions"],
    zip_safe=False,
)
