# mentora/services/__init__.py
# Business logic. Routers call these; they raise mentora.exceptions errors.
