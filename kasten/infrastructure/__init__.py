"""
Infrastructure layer.

The infrastructure layer contains implementations of the protocols defined
in the application layer. It handles all external concerns:

- Persistence (CouchDB documents and views)
- Provisioning of the view definitions
"""
