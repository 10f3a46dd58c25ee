"""
mylibrary: Food and Cookie

A small demonstration of single inheritance and method overriding. Each
entity knows the sound it makes and announces it when eaten.
"""

__version__ = "0.1.0"


from ._announcer import *
from ._food import *
from ._cookie import *
from ._log import *
