from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "fugashi>=1.3.0",
    "unidic-lite>=1.0.8",
    "pydantic>=2.0",
    "typer>=0.9.0",
    "tqdm>=4.65.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="gomamayo",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "gomamayo=gomamayo.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Detect gomamayo (boundary mora overlap) in Japanese phrases",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Natural Language :: Japanese",
    ],
)
