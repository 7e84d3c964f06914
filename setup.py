#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'delnone', 'tqdm']
test_requires = ['tox', 'pytest', 'tabulate']

setup(
    name='onepass',
    version='0.1.0',
    author='Andrew Thomson',
    author_email='athomsonguy@gmail.com',
    packages=['onepass'],
    install_requires = requires,
    extras_require = {'test': test_requires},
    python_requires='>=3.8',
    license='MIT',
    description='composable transducers which fuse map, filter and take stages into a single pass.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: MIT License',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3',
    ],
)
