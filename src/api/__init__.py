"""
Hulk の HTTP API
"""
