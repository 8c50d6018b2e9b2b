"""Messaging domain - conversations and messages"""
