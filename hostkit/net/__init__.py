"""
Address handling for hostkit
"""
# net/__init__.py
from hostkit.net.ip_address import *
from hostkit.net.ip_utils import *
from hostkit.net.resolver import *
