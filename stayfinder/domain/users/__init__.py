"""Users domain - admin-scoped user management"""
