"""Shared helpers - schemas, validators and view plumbing"""
