"""Setup file for the lexibias package."""

from setuptools import setup, find_packages

setup(
    name="lexibias",
    version="0.1.0",
    description="Train small GloVe embeddings and measure implicit-association bias in word vectors",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "scikit-learn",
        "gensim>=4.0",
        "matplotlib",
        "seaborn",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
