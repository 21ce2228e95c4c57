"""HTTP API layer - routers, dependencies and middleware"""
