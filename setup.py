# setup.py
from setuptools import setup, find_packages

setup(
    name="book-summary",
    version="0.1.0",
    description="Generate SUMMARY.md tables of contents for mdBook and GitBook notes",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "titlecase",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'book-summary=booksummary.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
