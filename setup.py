import setuptools
from setuptools import find_packages

with open('README.md', 'r') as fh:
    long_description = fh.read()

setuptools.setup(
    name='allen-relations',
    version='0.1.0',
    description="Allen's interval relations for discrete and continuous domains",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(where=".", include=["allen", "allen.*"]),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pandas',
    ],
    extras_require=dict(tests=["pytest"]),
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        ],
    )
