import sys
import os

# to allow autodoc to discover the documented modules
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

with open(os.path.join(os.path.dirname(__file__), '..', 'VERSION')) as f:
    release = f.read().strip()

project = 'Judgelib'
copyright = '2026, Judgelib authors'
author = 'Judgelib authors'
version = release

extensions = [
    'sphinx.ext.autodoc',
    'recommonmark',
]

autodoc_member_order = 'bysource'

source_suffix = {
    '.rst': 'restructuredtext',
    '.md': 'markdown',
}

master_doc = 'index'

exclude_patterns = ['_build']

html_theme = 'sphinxdoc'
