"""
FastAPI routers for all API endpoints.

Each module defines a router for one table (categories, settings) plus the
public health check. Routers receive the Supabase client through
catalog_backend.routes.dependencies.get_supabase_client.
"""
