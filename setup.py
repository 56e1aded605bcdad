#!/usr/bin/env python
# Encoding: utf-8
# See: <https://setuptools.pypa.io/en/latest/userguide/>
import os
from setuptools import setup

NAME        = "cssbuilder"
WEBSITE     = "http://www.github.com/sebastien/cssbuilder"
SUMMARY     = "Chainable CSS selector builder."
DESCRIPTION = """\
Builds CSS selectors from element, id, class, attribute, pseudo-class and
pseudo-element fragments, enforcing their order and cardinality.
"""
LONG_DESCRIPTION  = None
if os.path.exists("README.md") and os.popen("which pandoc").read():
	LONG_DESCRIPTION = os.popen("pandoc -f markdown -t rst README.md").read()

VERSION = eval([_.rsplit("=",1)[1] for _ in open("src/cssbuilder/__init__.py").readlines() if _.startswith("VERSION")][0])

setup(
	name             = NAME,
	version          = VERSION,
	description      = DESCRIPTION,
	long_description = LONG_DESCRIPTION,
	author           = "Sébastien Pierre",
	author_email     = "sebastien.pierre@gmail.com",
	url              =  WEBSITE,
	download_url     =  WEBSITE + "/%s-%s.tar.gz" % (NAME.lower(), VERSION) ,
	keywords         = ["css", "selector", "builder",],
	install_requires = [],
	extras_require   = {"test":["pytest"]},
	packages         = ["cssbuilder"],
	package_dir      = {"cssbuilder":"src/cssbuilder"},
	scripts          = ["bin/cssbuilder"],
	python_requires  = ">=3.7",
	license          = "License :: OSI Approved :: BSD License",
	# SEE: https://pypi.python.org/pypi?%3Aaction=list_classifiers
	classifiers      = [
		"Programming Language :: Python",
		"Programming Language :: Python :: 3",
		"Development Status :: 4 - Beta",
		"Natural Language :: English",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"Operating System :: OS Independent",
		"Topic :: Utilities"
	],
)

# EOF - vim: ts=4 sw=4 noet
