#!/usr/bin/env python
from setuptools import setup, find_packages


with open('README.rst') as readme_file:
    README = readme_file.read()


install_requires = [
    'click>=7,<9.0',
    'pyyaml>=5.3.1,<7.0.0',
]

setup(
    name='mediatype',
    version='1.0.0',
    description="Internet media types and HTTP media ranges",
    long_description=README,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=install_requires,
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
            'mock',
        ],
    },
    license="Apache License 2.0",
    package_data={'mediatype': ['py.typed']},
    include_package_data=True,
    zip_safe=False,
    keywords='mediatype mime content-type',
    entry_points={
        'console_scripts': [
            'mediatype = mediatype.cli:main',
        ]
    },
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Natural Language :: English',
        "Programming Language :: Python :: 3",
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
    ],
)
