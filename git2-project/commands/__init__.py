# This file makes the 'commands' directory a Python package
# Importing command modules from here

from . import init
from . import config
from . import mktag
from . import hash_object
from . import cat_file
from . import tag
