# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='prattle',
  version='0.0.1',
  description='Prattle: a regex tokenizer, buffered token scanner, and operator precedence expression parser for Python 3.',

  python_requires='>=3.10',
  packages=['prattle', 'prattle.pl0', 'utest'],
  entry_points={
    'console_scripts': [
      'pl0=prattle.pl0.__main__:main',
    ],
  },
)
