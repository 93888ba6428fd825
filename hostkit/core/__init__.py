"""
Contains the core elements that are used within hostkit

Core:
    -Provides custom exceptions for the various hostkit elements
    -Provides the reference constants used for address handling and logging
"""
# core/__init__.py
from hostkit.core.exceptions import *
from hostkit.core.formats import *
from hostkit.core.logging import *
