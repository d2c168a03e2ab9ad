from setuptools import setup, find_packages

setup(
    name="mdsrc2txt",
    version="1.0.0",
    description="Combines source code files from a directory or ZIP file into a single text file",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.9",
    install_requires=[
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mdsrc2txt=mdsrc2txt.cli:main",
        ]
    },
)
