from setuptools import setup
import io


with io.open('README.md', encoding='utf-8') as f:
    long_description = f.read()

with io.open('requirements.txt', encoding='utf-8') as f:
    requirements = [r for r in f.read().split('\n') if len(r)]


setup(name='xsdmerge',
      version='0.1.0',
      description='Merge XML Schema files into one tree and generate C++ declarations from it',
      long_description=long_description,
      long_description_content_type='text/markdown',
      license='MIT',
      packages=['xsdmerge', 'xsdmerge.gen', 'xsdmerge.utils'],
      entry_points={
          'console_scripts': ['xsdmerge=xsdmerge.__main__:main'],
      },
      zip_safe=True,
      python_requires='>=3.8',
      install_requires=requirements,
      extras_require={'test': ['pytest']})
