"""
Domain Layer - Core Business Logic

Entities, value objects, validation rules, form state and theme resolution.
Independent of HTTP, storage and presentation concerns.
"""
