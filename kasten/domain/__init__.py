"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on the document store or any other infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Domain Services: Stateless rules shared by entities
"""
