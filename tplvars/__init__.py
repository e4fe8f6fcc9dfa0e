"""Template Variable Inspector.

Dumps the variables visible to a template as an indented HTML tree:
- Accessor paths for every member ($name, ->member, [0], ['a b'])
- Runtime type of every node
- Values, escaped and bounded by a maximum depth
"""

__version__ = "3.0.0"
