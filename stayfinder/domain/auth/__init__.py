"""Auth domain - login, registration and session restore"""
