from setuptools import setup, find_packages

setup(
    name="sdes",
    version="0.1.0",
    description="Simplified DES (S-DES) teaching cipher with exhaustive key search",
    license="MIT",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "sdes-demo=sdes.__main__:main"
        ]
    },
)
