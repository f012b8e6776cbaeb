"""Application layer - Query use cases and port definitions.

This layer contains:
- Use Cases: The payment query service
- Ports: Abstract interfaces for the repository and the clock

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
