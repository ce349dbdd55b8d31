from setuptools import find_packages, setup

VERSION_FILE = "centered_intervaltree/_version.py"

with open("README.md", "r") as f:
    long_description = f.read()


setup(
    name="centered-intervaltree",
    use_scm_version={
        "write_to": VERSION_FILE,
        "local_scheme": "dirty-tag",
        "fallback_version": "0.1.0",
    },
    setup_requires=["setuptools_scm>=6.2"],
    author="Denis Korytkin",
    author_email="dkorytkin@gmail.com",
    description="Centered interval tree for point queries over integer intervals",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords=["interval", "tree", "interval tree", "centered", "point query"],
    packages=find_packages(exclude=["tests*"]),
    install_requires=[],
    extras_require={"test": ["pytest>=6.2", "mock>=4.0"]},
    license="MIT license",
    python_requires=">=3.7",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
)
