"""
Serverless function entrypoints.

Each module exposes `handler(event, context)` for API Gateway / Netlify style
events and delegates to the shared handlers.
"""
