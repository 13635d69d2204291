from setuptools import setup, find_packages

setup(
    name="fracmatrix",
    version="1.0.0",
    description="Exact rational arithmetic and fixed-shape matrices with determinant and inverse",
    long_description=("Exact rational numbers with automatic reduction and dense matrices over exact scalars, "
                      "offering row-reduction and cofactor determinants, Gauss-Jordan inversion and rank, "
                      "with conversions from and to numpy and sympy"),
    long_description_content_type="text/plain",
    author="Philipp Schneider",
    author_email="zgddtgt@gmail.com",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["fracmatrix", "fracmatrix.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational", "fraction", "matrix", "determinant", "gaussian elimination"],
    zip_safe=False,
)
