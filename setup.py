#!/usr/bin/env python3
from setuptools import setup, find_packages
import glob

def requirements_from_file(file_name):
  return open(file_name).read().splitlines()

setup(
  name='formit',
  version='1.0.0',
  package_dir={"":"lib"},
  packages=find_packages(where="lib"),
  package_data={"formit": ["templates/*.html", "templates/fields/*.html"]},
  scripts=glob.glob("bin/*.py"),
  install_requires=requirements_from_file('requirements.txt'),
  extras_require={"test": ["pytest"]}
)
