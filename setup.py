from setuptools import find_packages, setup

PKG_NAME = "deferredvec"
about: dict = dict()
exec(open(f"{PKG_NAME}/__about__.py").read(), about)

with open("README.md") as fh:
    long_description = fh.read()


setup(
    name=PKG_NAME,
    version=about["__version__"],
    author=about["__author__"],
    author_email=about["__author_email__"],
    description="A lazily-produced, cached sequence container.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"": ["py.typed"]},
    python_requires=">=3.7",
    install_requires=["typing-extensions >= 3.7"],
    extras_require={"test": ["pytest"]},
)
