"""
Schema module initialization.
Exports all request schema classes from submodules for convenient imports.
"""
from .auth import *
from .game import *
from .reward import *
from .tournament import *
