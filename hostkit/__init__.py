"""
hostkit: small conveniences over the Python standard library

    -core: exceptions, constants, logging and byte stream helpers
    -net: the IPAddress value type and name resolution pass-throughs
    -collection: serial iterator helpers
"""
# hostkit/__init__.py
from hostkit.collection import *
from hostkit.core import *
from hostkit.net import *
