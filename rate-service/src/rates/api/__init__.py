"""
HTTP routers for the rate service, mounted under /api.
"""
