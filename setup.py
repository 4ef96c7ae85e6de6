"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='ion-lang',
	version='0.1.0',
	packages=['ion', 'ion.tree_walker', ],
	license='MIT',
	description='The run-time core of a small scripting language: values, scopes, and a tree-walking evaluator',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Interpreters",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
)
