"""
FieldVue Backend — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (including the detection aggregation pipeline), infrastructure
(MongoDB, blob storage, vision detection clients) and the background room
analysis queue.
"""
