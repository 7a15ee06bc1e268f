"""
A collection of helpers around the Google Sheets v4 Python client.
The goal is to take the tedium out of building batchUpdate request bodies,
formatting directives, typed cell values, and reading ranges back.

Python dataclasses are used for the resource structs and most of the logic is
translating between those and the raw dicts the client wants.  The actual
calls go through a client binding the caller provides, see access.py.
"""
import logging

__version__ = "0.2.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
