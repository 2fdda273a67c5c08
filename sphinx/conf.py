#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# ExactQ documentation build configuration file

import os
import sys
sys.path.insert(1, os.path.abspath('..'))

import exactq_version

# -- General configuration ------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.todo',
    'sphinx.ext.coverage',
    'sphinx.ext.mathjax',
    'sphinx.ext.githubpages',
]

templates_path = ['_templates']
source_suffix = '.rst'
master_doc = 'index'

project = 'ExactQ'
copyright = '2019-2026, Florian Schanda'
author = 'Florian Schanda'

version = exactq_version.version
release = exactq_version.version

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# The name of the Pygments (syntax highlighting) style to use.
pygments_style = 'sphinx'

# If true, `todo` and `todoList` produce output, else they produce nothing.
todo_include_todos = True


# -- Options for HTML output ----------------------------------------------

html_theme = 'classic'

html_static_path = ['_static']
