# ------------------------------------------------------------------------------
# Name:          setup.py
# Purpose:       install hum2ly package
#
# Authors:       Greg Chapman
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

import setuptools

hum2lyversion = '1.0.0'

if __name__ == '__main__':
    setuptools.setup(
        name='hum2ly',
        version=hum2lyversion,

        description='A Humdrum (**kern) to LilyPond converter package and command line tool, '
                    'built on converter21\'s Humdrum parser',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',

        author='Greg Chapman',
        author_email='gregc@mac.com',

        classifiers=[
            'Development Status :: 3 - Alpha',
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python :: 3 :: Only',
            'Operating System :: OS Independent',
            'Natural Language :: English',
        ],

        keywords=[
            'music',
            'score',
            'notation',
            'converter',
            'conversion',
            'humdrum',
            'kern',
            'krn',
            'lilypond',
            'ly',
            'writer',
        ],

        packages=setuptools.find_packages(exclude=['tests', 'tests.*']),

        python_requires='>=3.10',

        install_requires=[
            'converter21>=3.3',
            'music21>=9.1',
        ],

        extras_require={
            'test': ['pytest'],
        },
    )
