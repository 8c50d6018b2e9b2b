"""Notifications domain - server-side notification inbox"""
