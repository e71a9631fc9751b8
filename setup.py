from setuptools import setup, find_packages

setup(name='vector2',
      version='1.0',
      description='Generic 2D vector value type with a small command line calculator',
      packages=find_packages(include=['vector2', 'vector2.*']),
      py_modules=['run_vector2'],
      python_requires='>=3.9',
      entry_points={'console_scripts': ['run-vector2 = vector2.cli:main']})
