"""
Application wiring: lifespan, CORS, middlewares, exception handlers.
"""
