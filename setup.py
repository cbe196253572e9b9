#!/usr/bin/env python
from setuptools import setup
setup(
    name='remoteresources',
    version='1.0',
    description='a client library for resources of JSON REST APIs',
    author='Six Apart Ltd.',
    author_email='python@sixapart.com',
    url='http://sixapart.github.com/remoteobjects/',

    packages=['remoteresources'],
    provides=['remoteresources'],
    install_requires=['simplejson>=2.0.0', 'httplib2>=0.4.0'],
    extras_require={
        'test': ['mock'],
    },
    test_suite='tests',
)
