from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="PushSeq",
    version=version,
    description="A library of lazy, composable operations over restartable sequences",
    long_description=long_description,
    keywords=['iterator', 'lazy', 'sequence', 'pipeline', 'functional'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=["tests", "tests.*", "docs", "docs.*"]),
    python_requires=">=3.8",
    install_requires=[
        'tblib'],
    extras_require={
        'numpy support': [
            'numpy'],
        'tests': [
            'pytest', 'pytest-timeout', 'numpy', 'coverage']
    }
)
