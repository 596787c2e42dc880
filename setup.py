"""GFPM setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import gfpm

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='gfpm',
    version=gfpm.__version__,
    description='GFPM -- Finite fields GF(p^m) and their primitive elements in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite field', 'Galois field', 'extension field', 'primitive element',
              'irreducible polynomial', 'polynomial arithmetic'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=gfpm.__license__,
    packages=['gfpm'],
    install_requires=['gmpy2'],
    entry_points={'console_scripts': ['gfpm = gfpm.__main__:main']},
    platforms=['any'],
    python_requires='>=3.9'
)
