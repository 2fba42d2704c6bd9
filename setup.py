import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name="procmaps",
    version="0.1.0",
    description="Typed parser for Linux /proc/<pid>/maps files.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    install_requires=["intervaltree", "pyelftools"],
    tests_require=['pytest'],
    extras_require={'test': ['pytest']},
    packages=setuptools.find_packages(exclude=['tests', 'examples']),
    python_requires=">=3.6",
    classifiers=(
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
    )
)
