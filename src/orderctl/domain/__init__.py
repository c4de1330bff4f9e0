"""Domain layer — products, customers, orders, and the order builder.

This layer depends only on stdlib, structlog, and the shared configuration
handle. It must never import from services, commands, or output.
"""
