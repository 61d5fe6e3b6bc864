"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='basetype',
	version='0.1.0',
	packages=['basetype'],
	entry_points={
		'console_scripts': ["basetype = basetype.cmdline:main"],
	},
	license='MIT',
	description='Look up the fundamental type of a value and the type predicates it satisfies',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Intended Audience :: Education",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.11',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
