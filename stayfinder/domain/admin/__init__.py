"""Admin domain - admin-scoped booking management"""
