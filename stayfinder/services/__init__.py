"""Service layer - HTTP access to the remote API"""
