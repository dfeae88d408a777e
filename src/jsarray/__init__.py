"""An ordered collection with the operations of a JavaScript Array.

See README.md for complete documentation and usage examples.
"""

from jsarray.jsarray import dynamicarray, jsarray

__all__ = ["dynamicarray", "jsarray"]
