"""
PRESENTATION LAYER - HTTP surface

Thin FastAPI routers: parse input, build a Command/Query, call the handler,
return a DTO. Domain errors are mapped to HTTP by fastapi_app.
"""
